"""Fetch category totals via analytics port."""

from __future__ import annotations

from flouss.application.ports.analytics import AnalyticsReadPort
from flouss.domain.analytics import CategoryAmount, Period
from flouss.domain.localization import Language


class CategoryTotalsQuery:
    """Return expense totals per category for a period."""

    def __init__(self, analytics_read_port: AnalyticsReadPort):
        self._analytics = analytics_read_port

    async def execute(
        self,
        user_id: str,
        period: Period = Period.MONTHLY,
        language: Language = Language.EN,
    ) -> list[CategoryAmount]:
        return await self._analytics.fetch_category_totals(
            user_id=user_id,
            period=period,
            language=language,
        )
