"""Analytics read port.

The only seam between the analytics core and the backend. Implementations
fetch rows and return application DTOs; the core never does networking.
"""

from __future__ import annotations

from typing import Protocol

from flouss.application.dtos.analytics import AnalyticsData
from flouss.domain.analytics import CategoryAmount, Period
from flouss.domain.localization import Language


class AnalyticsReadPort(Protocol):
    """Report-like analytics read interface.

    Implementations raise AnalyticsDataUnavailableError when the backend
    cannot be reached or returns an error.
    """

    async def fetch_category_totals(
        self,
        *,
        user_id: str,
        period: Period,
        language: Language = Language.EN,
    ) -> list[CategoryAmount]:
        """Expense totals per category for the period, largest first."""
        ...

    async def fetch_analytics_data(
        self,
        *,
        user_id: str,
        language: Language = Language.EN,
        period: Period = Period.MONTHLY,
    ) -> AnalyticsData:
        """Category spending, monthly trends and current-month totals."""
        ...
