from typing import Any, Iterable, List, Optional


def field_text(row: Any, name: str) -> str:
    """Reads a field from a model or a plain dict; absent values read as ''."""
    if isinstance(row, dict):
        value = row.get(name)
    else:
        value = getattr(row, name, None)
    return "" if value is None else str(value)


def normalize_query(query: Optional[str]) -> str:
    return (query or "").strip().lower()


def matches(row: Any, query: str) -> bool:
    """Case-insensitive substring match on product or id. Expects a normalized query."""
    return query in field_text(row, "product").lower() or query in field_text(row, "id").lower()


def filter_transactions(transactions: Iterable[Any], query: Optional[str]) -> List[Any]:
    """
    Returns the transactions matching a free-text query, in their original order.
    An empty or blank query keeps everything.
    """
    q = normalize_query(query)
    if not q:
        return list(transactions)
    return [t for t in transactions if matches(t, q)]
