"""Monthly income / expense trends."""

from __future__ import annotations

from datetime import date
from typing import Iterable

from flouss.domain.analytics.value_objects import (
    MonthlyTrend,
    TransactionRecord,
    first_of_month,
)
from flouss.domain.localization import Language, month_name

DEFAULT_TREND_MONTHS = 6


class MonthlyTrendCalculator:
    """Per-month totals over the last few calendar months."""

    @staticmethod
    def calculate(
        transactions: Iterable[TransactionRecord],
        language: Language,
        today: date,
        months: int = DEFAULT_TREND_MONTHS,
    ) -> list[MonthlyTrend]:
        """Return `months` trends ending with the month of `today`, oldest first.

        Transactions outside the window, and transactions that are neither
        income nor expense, are ignored.
        """
        keys = [first_of_month(today, -offset) for offset in range(months - 1, -1, -1)]
        income = dict.fromkeys(keys, 0.0)
        expenses = dict.fromkeys(keys, 0.0)

        for transaction in transactions:
            key = first_of_month(transaction.transaction_date)
            if key not in income:
                continue
            if transaction.is_income:
                income[key] += transaction.amount
            elif transaction.is_expense:
                expenses[key] += transaction.amount

        return [
            MonthlyTrend(
                month=month_name(key.month - 1, language),
                income=income[key],
                expenses=expenses[key],
                savings=income[key] - expenses[key],
            )
            for key in keys
        ]

    @staticmethod
    def empty_month(today: date, language: Language) -> MonthlyTrend:
        return MonthlyTrend(
            month=month_name(today.month - 1, language),
            income=0.0,
            expenses=0.0,
            savings=0.0,
        )
