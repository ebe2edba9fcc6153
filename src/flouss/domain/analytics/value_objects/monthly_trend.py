"""Monthly cash-flow totals."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MonthlyTrend:
    """Income, expenses and savings of one calendar month."""

    month: str  # localized short month label
    income: float
    expenses: float
    savings: float
