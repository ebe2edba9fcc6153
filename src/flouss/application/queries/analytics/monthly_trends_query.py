"""Fetch monthly income/expense trends."""

from __future__ import annotations

from flouss.application.context import UIContext
from flouss.application.dtos.analytics import MonthlyTrendsResult
from flouss.application.ports.analytics import AnalyticsReadPort
from flouss.application.services import AnalyticsLoader


class MonthlyTrendsQuery:
    """Return monthly trends and the current month summary."""

    def __init__(self, analytics_read_port: AnalyticsReadPort):
        self._loader = AnalyticsLoader(analytics_read_port)

    async def execute(self, user_id: str, ui_context: UIContext) -> MonthlyTrendsResult:
        loaded = await self._loader.load(user_id, ui_context.language)
        trends = loaded.data.monthly_trends
        max_value = max(
            (max(t.income, t.expenses, t.savings) for t in trends),
            default=0.0,
        )
        return MonthlyTrendsResult(
            trends=trends,
            current_month=loaded.data.current_month,
            max_value=max_value,
            is_fallback=loaded.is_fallback,
        )
