from typing import Any, Iterable, List, NamedTuple, Optional

import pandas as pd

from pulse.config import CHART_WINDOW
from pulse.search import field_text

INVALID_LABEL = "Invalid Date"


class Bucket(NamedTuple):
    label: str
    total: float


def local_timestamp(value: Any) -> Optional[pd.Timestamp]:
    """
    Parses an ISO-8601 string into local wall-clock time.
    Naive timestamps are taken as already local. Returns None when unparseable.
    """
    if not value:
        return None
    ts = pd.to_datetime(value, errors='coerce')
    if pd.isna(ts):
        return None
    if ts.tzinfo is not None:
        # astimezone() picks the local offset in force at that instant, DST included
        ts = pd.Timestamp(ts.to_pydatetime().astimezone())
    return ts


def bucket_label(value: Any) -> str:
    """Minute-granularity label used as the chart key, e.g. '10:00'."""
    ts = local_timestamp(value)
    return INVALID_LABEL if ts is None else ts.strftime("%H:%M")


def _amount(row: Any) -> float:
    raw = row.get("amount") if isinstance(row, dict) else getattr(row, "amount", None)
    try:
        return float(raw)
    except (TypeError, ValueError):
        return 0.0


def aggregate(rows: Iterable[Any], fallback: Optional[Iterable[Any]] = None,
              window: int = CHART_WINDOW) -> List[Bucket]:
    """
    Sums amounts per minute label over the last `window` rows.
    Falls back to `fallback` (the unfiltered list) when `rows` is empty.
    Labels keep first-seen order, they are not re-sorted chronologically.
    """
    source = list(rows or [])
    if not source:
        source = list(fallback or [])

    recent = source[-window:] if window > 0 else []
    if not recent:
        return []

    df = pd.DataFrame({
        'label': [bucket_label(field_text(r, "date")) for r in recent],
        'amount': [_amount(r) for r in recent],
    })
    sums = df.groupby('label', sort=False)['amount'].sum()
    return [Bucket(str(label), float(total)) for label, total in sums.items()]
