"""Analytics domain - category breakdowns and donut chart geometry."""

from flouss.domain.analytics.exceptions import AnalyticsDataUnavailableError
from flouss.domain.analytics.services import (
    CategoryAggregator,
    CategorySpendingCalculator,
    DonutGeometryBuilder,
    MonthlyTrendCalculator,
    SelectionController,
    SelectionMode,
    estimate_income_sources,
    index_of_largest,
    total_amount,
)
from flouss.domain.analytics.value_objects import (
    CategoryAmount,
    CategoryInput,
    DisplayMode,
    DonutLayout,
    MonthlyTrend,
    Period,
    RingSegment,
    TransactionRecord,
)

__all__ = [
    "AnalyticsDataUnavailableError",
    "CategoryAggregator",
    "CategoryAmount",
    "CategoryInput",
    "CategorySpendingCalculator",
    "DisplayMode",
    "DonutGeometryBuilder",
    "DonutLayout",
    "MonthlyTrend",
    "MonthlyTrendCalculator",
    "Period",
    "RingSegment",
    "SelectionController",
    "SelectionMode",
    "TransactionRecord",
    "estimate_income_sources",
    "index_of_largest",
    "total_amount",
]
