"""Read-only transaction rows used for analytics."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Mapping

from flouss.domain.localization import Language

EXPENSE = "expense"
INCOME = "income"


def coerce_amount(value: Any) -> float:
    """Parse a numeric field; missing, malformed or negative values become 0."""
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        amount = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(amount) or amount < 0:
        return 0.0
    return amount


@dataclass(frozen=True)
class CategoryRef:
    """Category joined onto a transaction row."""

    names: dict[str, str] = field(default_factory=dict)
    icon: str | None = None
    color: str | None = None

    def localized_name(self, language: Language) -> str | None:
        return (
            self.names.get(language.value)
            or self.names.get(Language.EN.value)
            or self.names.get(Language.TN.value)
        )

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> CategoryRef:
        names = {
            language.value: row[f"name_{language.value}"]
            for language in Language
            if row.get(f"name_{language.value}")
        }
        return cls(names=names, icon=row.get("icon"), color=row.get("color"))


@dataclass(frozen=True)
class TransactionRecord:
    """A single income or expense transaction."""

    id: str
    type: str
    amount: float
    transaction_date: date
    category: CategoryRef | None = None

    @property
    def is_expense(self) -> bool:
        return self.type == EXPENSE

    @property
    def is_income(self) -> bool:
        return self.type == INCOME

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> TransactionRecord:
        """Build a record from a backend row (category joined as a nested object)."""
        category_row = row.get("category")
        return cls(
            id=str(row.get("id", "")),
            type=str(row.get("type") or ""),
            amount=coerce_amount(row.get("amount")),
            transaction_date=_parse_date(row.get("transaction_date")),
            category=(
                CategoryRef.from_row(category_row)
                if isinstance(category_row, Mapping) and category_row
                else None
            ),
        )


def _parse_date(value: Any) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not value:
        msg = "transaction_date is required"
        raise ValueError(msg)
    text = str(value).strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text).date()
