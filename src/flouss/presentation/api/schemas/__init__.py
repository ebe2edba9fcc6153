"""API request/response schemas."""

from flouss.presentation.api.schemas.analytics import (
    CategoryAmountResponse,
    DonutCenterResponse,
    DonutChartResponse,
    MonthlyTrendResponse,
    MonthlyTrendsResponse,
    RingSegmentResponse,
)

__all__ = [
    "CategoryAmountResponse",
    "DonutCenterResponse",
    "DonutChartResponse",
    "MonthlyTrendResponse",
    "MonthlyTrendsResponse",
    "RingSegmentResponse",
]
