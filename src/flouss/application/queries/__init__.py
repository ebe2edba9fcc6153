"""Application queries (read side)."""

from flouss.application.queries.analytics import (
    CategoryTotalsQuery,
    DonutChartQuery,
    MonthlyTrendsQuery,
)

__all__ = [
    "CategoryTotalsQuery",
    "DonutChartQuery",
    "MonthlyTrendsQuery",
]
