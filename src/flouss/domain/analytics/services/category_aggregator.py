"""Reduce raw category rows to chart-ready category amounts."""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Sequence, Union

from flouss.domain.analytics.services._utils import share_percentage
from flouss.domain.analytics.value_objects import (
    DEFAULT_ICON,
    EXPENSE_PALETTE,
    CategoryAmount,
    CategoryInput,
    coerce_amount,
)

CategoryRecord = Union[CategoryInput, Mapping[str, Any]]


class CategoryAggregator:
    """Assign colors, icons and percentage shares to category totals.

    Output order always matches input order. Percentages are recomputed from
    the amounts, so any percentage carried by the input is ignored.
    """

    def __init__(self, palette: Sequence[str] = EXPENSE_PALETTE):
        if not palette:
            msg = "palette must contain at least one color"
            raise ValueError(msg)
        self._palette = tuple(palette)

    def aggregate(self, records: Iterable[CategoryRecord]) -> list[CategoryAmount]:
        rows = [_normalize(record) for record in records]
        total = sum(row.amount for row in rows) or 1.0

        return [
            CategoryAmount(
                category=row.category,
                amount=row.amount,
                percentage=share_percentage(row.amount, total),
                color=row.color or self._palette[i % len(self._palette)],
                icon=row.icon or DEFAULT_ICON,
            )
            for i, row in enumerate(rows)
        ]


def total_amount(categories: Iterable[CategoryAmount]) -> float:
    """Sum of category amounts (0 for an empty list)."""
    return sum((c.amount for c in categories), 0.0)


def _normalize(record: CategoryRecord) -> CategoryInput:
    if isinstance(record, CategoryInput):
        return CategoryInput(
            category=record.category,
            amount=coerce_amount(record.amount),
            color=record.color,
            icon=record.icon,
        )
    return CategoryInput(
        category=str(record.get("category") or ""),
        amount=coerce_amount(record.get("amount")),
        color=record.get("color") or None,
        icon=record.get("icon") or None,
    )
