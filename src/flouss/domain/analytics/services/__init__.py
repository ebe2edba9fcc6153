"""Analytics domain services (pure computation, no I/O)."""

from flouss.domain.analytics.services.category_aggregator import (
    CategoryAggregator,
    total_amount,
)
from flouss.domain.analytics.services.category_spending_calculator import (
    CategorySpendingCalculator,
)
from flouss.domain.analytics.services.donut_geometry_builder import (
    DonutGeometryBuilder,
    describe_ring_segment,
    polar_to_cartesian,
)
from flouss.domain.analytics.services.income_split import estimate_income_sources
from flouss.domain.analytics.services.monthly_trend_calculator import (
    MonthlyTrendCalculator,
)
from flouss.domain.analytics.services.selection_controller import (
    SelectionController,
    SelectionMode,
    index_of_largest,
)

__all__ = [
    "CategoryAggregator",
    "CategorySpendingCalculator",
    "DonutGeometryBuilder",
    "MonthlyTrendCalculator",
    "SelectionController",
    "SelectionMode",
    "describe_ring_segment",
    "estimate_income_sources",
    "index_of_largest",
    "polar_to_cartesian",
    "total_amount",
]
