"""Category totals for breakdown charts."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CategoryInput:
    """Raw category/amount pair as delivered by a data source.

    Everything except the label is optional; the aggregator fills in
    missing values.
    """

    category: str
    amount: float | None = None
    percentage: float | None = None
    color: str | None = None
    icon: str | None = None


@dataclass(frozen=True)
class CategoryAmount:
    """One slice of a breakdown chart.

    `percentage` is on a 0-100 scale with one decimal place.
    """

    category: str
    amount: float
    percentage: float
    color: str
    icon: str
