"""
Pure state -> view-model projection. The Streamlit layer only draws what comes out of here.
"""
from dataclasses import dataclass, field
from typing import Any, List, Sequence, Tuple

from pulse.aggregation import Bucket, aggregate, local_timestamp
from pulse.config import CHART_WINDOW, TABLE_ROWS
from pulse.models import Metric, Transaction

DATE_FORMAT = "%d/%m/%Y, %H:%M:%S"


@dataclass(frozen=True)
class MetricCard:
    title: str
    value: str


@dataclass(frozen=True)
class TableRow:
    id: str
    product: str
    date: str
    amount: str


@dataclass(frozen=True)
class DashboardView:
    indicator: Tuple[str, str]
    status_text: str
    cards: List[MetricCard] = field(default_factory=list)
    rows: List[TableRow] = field(default_factory=list)
    chart: List[Bucket] = field(default_factory=list)

    @property
    def chart_labels(self) -> List[str]:
        return [b.label for b in self.chart]

    @property
    def chart_values(self) -> List[float]:
        return [b.total for b in self.chart]


def _display(value: Any) -> str:
    return "" if value is None else str(value)


def format_amount(amount: float) -> str:
    return f"${float(amount):.2f}"


def format_date(iso: str) -> str:
    """Local, 24-hour date time. Unparseable input is shown as-is."""
    ts = local_timestamp(iso)
    return iso if ts is None else ts.strftime(DATE_FORMAT)


def project_cards(metrics: Sequence[Metric]) -> List[MetricCard]:
    return [MetricCard(title=_display(m.title), value=_display(m.value)) for m in metrics or []]


def project_rows(filtered: Sequence[Transaction], limit: int = TABLE_ROWS) -> List[TableRow]:
    """Most recent `limit` entries, newest first."""
    recent = list(filtered)[-limit:] if limit > 0 else []
    return [
        TableRow(id=t.id, product=t.product, date=format_date(t.date), amount=format_amount(t.amount))
        for t in reversed(recent)
    ]


def project(
    metrics: Sequence[Metric],
    transactions: Sequence[Transaction],
    filtered: Sequence[Transaction],
    indicator: Tuple[str, str],
    status_text: str,
) -> DashboardView:
    return DashboardView(
        indicator=indicator,
        status_text=status_text,
        cards=project_cards(metrics),
        rows=project_rows(filtered),
        chart=aggregate(filtered, fallback=transactions, window=CHART_WINDOW),
    )
