"""Analytics DTOs for the analytics screen.

These DTOs carry everything a rendering surface needs: category rows for
the list, ring segments for the donut, and the center label.
"""

from dataclasses import dataclass

from flouss.domain.analytics import (
    CategoryAmount,
    DisplayMode,
    MonthlyTrend,
    RingSegment,
    SelectionMode,
)


@dataclass
class AnalyticsData:
    """Analytics source data for one user, as fetched from the backend."""

    spending_by_category: list[CategoryAmount]
    monthly_trends: list[MonthlyTrend]
    total_expenses: float
    current_month: MonthlyTrend


@dataclass
class LoadedAnalytics:
    """Analytics data plus whether it is the static fallback."""

    data: AnalyticsData
    is_fallback: bool = False


@dataclass
class DonutChartResult:
    """Result for the breakdown donut chart.

    `selected_index` may point past the end of `categories` when the list is
    empty; `center_detail` is empty in that case.
    """

    mode: DisplayMode
    categories: list[CategoryAmount]
    segments: list[RingSegment]
    total: float
    currency: str
    selected_index: int
    selection_mode: SelectionMode
    center_title: str  # "Expenses" / "Income" (localized)
    center_total: str  # formatted total, e.g. "950 TND"
    center_detail: str  # "Food • 47.4%"
    size: float
    outer_radius: float
    inner_radius: float
    is_rtl: bool = False
    is_fallback: bool = False


@dataclass
class MonthlyTrendsResult:
    """Result for the monthly trend chart."""

    trends: list[MonthlyTrend]
    current_month: MonthlyTrend
    max_value: float = 0.0  # for chart scaling
    is_fallback: bool = False
