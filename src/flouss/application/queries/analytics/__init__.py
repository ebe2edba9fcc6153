"""Analytics queries for the analytics screen."""

from flouss.application.queries.analytics.category_totals_query import (
    CategoryTotalsQuery,
)
from flouss.application.queries.analytics.donut_chart_query import DonutChartQuery
from flouss.application.queries.analytics.monthly_trends_query import (
    MonthlyTrendsQuery,
)

__all__ = [
    "CategoryTotalsQuery",
    "DonutChartQuery",
    "MonthlyTrendsQuery",
]
