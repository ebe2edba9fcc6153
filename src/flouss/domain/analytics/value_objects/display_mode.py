"""Display modes and reporting periods of the analytics screen."""

from __future__ import annotations

from datetime import date, timedelta
from enum import Enum

from flouss.domain.analytics.value_objects.palettes import (
    EXPENSE_PALETTE,
    INCOME_PALETTE,
)


class DisplayMode(str, Enum):
    """Which side of the cash flow the breakdown chart shows."""

    EXPENSES = "expenses"
    INCOME = "income"

    @property
    def palette(self) -> tuple[str, ...]:
        if self is DisplayMode.INCOME:
            return INCOME_PALETTE
        return EXPENSE_PALETTE


class Period(str, Enum):
    """Reporting window selectable on the analytics screen."""

    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"

    def window_start(self, today: date, lookback_months: int = 6) -> date:
        """First day included in the window ending `today`.

        Monthly windows cover `lookback_months` calendar months including the
        current one; yearly windows cover twelve.
        """
        if self is Period.WEEKLY:
            return today - timedelta(days=7)
        months = 12 if self is Period.YEARLY else lookback_months
        return first_of_month(today, -(months - 1))


def first_of_month(day: date, month_offset: int = 0) -> date:
    """First day of the month `month_offset` months away from `day`."""
    month_index = day.year * 12 + (day.month - 1) + month_offset
    return date(month_index // 12, month_index % 12 + 1, 1)
