"""Supabase implementation of AnalyticsReadPort."""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Callable, Iterable, Mapping

from flouss.application.dtos.analytics import AnalyticsData
from flouss.domain.analytics import (
    CategoryAmount,
    CategorySpendingCalculator,
    MonthlyTrendCalculator,
    Period,
    TransactionRecord,
    total_amount,
)
from flouss.domain.analytics.value_objects import first_of_month
from flouss.domain.localization import Language
from flouss.infrastructure.supabase.client import SupabaseClient

logger = logging.getLogger(__name__)


class SupabaseAnalyticsReadAdapter:
    """Compute analytics read models from Supabase transaction rows."""

    def __init__(
        self,
        client: SupabaseClient,
        lookback_months: int = 6,
        top_categories: int = 6,
        today: Callable[[], date] = date.today,
    ):
        self._client = client
        self._lookback_months = lookback_months
        self._top_categories = top_categories
        self._today = today

    async def fetch_category_totals(
        self,
        *,
        user_id: str,
        period: Period,
        language: Language = Language.EN,
    ) -> list[CategoryAmount]:
        since = period.window_start(self._today(), self._lookback_months)
        records = await self._fetch_records(user_id, since)
        return CategorySpendingCalculator.calculate(
            records,
            language,
            top_n=self._top_categories,
        )

    async def fetch_analytics_data(
        self,
        *,
        user_id: str,
        language: Language = Language.EN,
        period: Period = Period.MONTHLY,
    ) -> AnalyticsData:
        today = self._today()
        period_start = period.window_start(today, self._lookback_months)
        trend_start = first_of_month(today, -(self._lookback_months - 1))

        records = await self._fetch_records(user_id, min(period_start, trend_start))

        spending = CategorySpendingCalculator.calculate(
            (r for r in records if r.transaction_date >= period_start),
            language,
            top_n=self._top_categories,
        )
        trends = MonthlyTrendCalculator.calculate(
            records,
            language,
            today,
            months=self._lookback_months,
        )
        current_month = (
            trends[-1] if trends else MonthlyTrendCalculator.empty_month(today, language)
        )

        logger.info(
            "Analytics computed for user=%s: %d categories, %d months",
            user_id,
            len(spending),
            len(trends),
        )
        return AnalyticsData(
            spending_by_category=spending,
            monthly_trends=trends,
            total_expenses=total_amount(spending),
            current_month=current_month,
        )

    async def _fetch_records(self, user_id: str, since: date) -> list[TransactionRecord]:
        rows = await self._client.fetch_transactions(user_id, since)
        logger.info("Fetched %d transactions for user=%s", len(rows), user_id)
        return list(_parse_rows(rows))


def _parse_rows(rows: Iterable[Any]) -> Iterable[TransactionRecord]:
    for row in rows:
        if not isinstance(row, Mapping):
            logger.warning("Skipping non-object transaction row: %r", row)
            continue
        try:
            yield TransactionRecord.from_row(row)
        except ValueError as e:
            logger.warning("Skipping malformed transaction row %s: %s", row.get("id"), e)
