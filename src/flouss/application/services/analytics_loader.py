"""Load analytics data through the read port, with a static fallback."""

from __future__ import annotations

import logging

from flouss.application.dtos.analytics import LoadedAnalytics
from flouss.application.ports.analytics import AnalyticsReadPort
from flouss.application.services.fallback_analytics import fallback_analytics_data
from flouss.domain.analytics import AnalyticsDataUnavailableError, Period
from flouss.domain.localization import Language

logger = logging.getLogger(__name__)


class AnalyticsLoader:
    """Fetch analytics data; on a data-source failure use the fallback set."""

    def __init__(self, analytics_read_port: AnalyticsReadPort):
        self._analytics = analytics_read_port

    async def load(
        self,
        user_id: str,
        language: Language,
        period: Period = Period.MONTHLY,
    ) -> LoadedAnalytics:
        try:
            data = await self._analytics.fetch_analytics_data(
                user_id=user_id,
                language=language,
                period=period,
            )
        except AnalyticsDataUnavailableError as e:
            logger.warning(
                "Analytics data unavailable for user=%s, using fallback data: %s",
                user_id,
                e,
            )
            return LoadedAnalytics(data=fallback_analytics_data(), is_fallback=True)

        return LoadedAnalytics(data=data)
