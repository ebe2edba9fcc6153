"""Analytics DTOs - data transfer objects for charts."""

from flouss.application.dtos.analytics.analytics_dto import (
    AnalyticsData,
    DonutChartResult,
    LoadedAnalytics,
    MonthlyTrendsResult,
)

__all__ = [
    "AnalyticsData",
    "DonutChartResult",
    "LoadedAnalytics",
    "MonthlyTrendsResult",
]
