from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator


class Mode(str, Enum):
    LIVE = "live"
    DEMO = "demo"


class Transaction(BaseModel):
    """A single sale. Lenient on input so a sloppy seed file never breaks the feed."""
    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str = ""
    product: str = ""
    date: str = ""
    amount: float = 0.0

    @field_validator("id", "product", "date", mode="before")
    @classmethod
    def _as_text(cls, value: Any) -> str:
        if value is None:
            return ""
        return value if isinstance(value, str) else str(value)

    @field_validator("amount", mode="before")
    @classmethod
    def _as_number(cls, value: Any) -> float:
        try:
            return float(value)
        except (TypeError, ValueError):
            return 0.0


class Metric(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    title: Optional[str] = None
    value: Any = None

    @field_validator("title", mode="before")
    @classmethod
    def _title_as_text(cls, value: Any) -> Optional[str]:
        if value is None or isinstance(value, str):
            return value
        return str(value)


class Snapshot(BaseModel):
    metrics: List[Metric] = Field(default_factory=list)
    transactions: List[Transaction] = Field(default_factory=list)

    @classmethod
    def empty(cls) -> "Snapshot":
        return cls()

    @classmethod
    def from_payload(cls, payload: Any) -> "Snapshot":
        """
        Normalizes any decoded JSON value into a Snapshot.
        Non-array fields become empty lists and non-object entries are dropped.
        """
        if not isinstance(payload, dict):
            return cls.empty()

        return cls(
            metrics=_parse_items(Metric, payload.get("metrics")),
            transactions=_parse_items(Transaction, payload.get("transactions")),
        )


def _parse_items(model, raw) -> list:
    if not isinstance(raw, list):
        return []

    items = []
    for entry in raw:
        if not isinstance(entry, dict):
            continue
        try:
            items.append(model.model_validate(entry))
        except ValidationError:
            continue
    return items
