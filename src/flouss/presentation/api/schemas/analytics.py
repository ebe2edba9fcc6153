"""Pydantic schemas for analytics endpoints.

These schemas define the API response structure for chart data, ready to
be drawn by an SVG-capable client without further math.
"""

from pydantic import BaseModel, ConfigDict, Field


class CategoryAmountResponse(BaseModel):
    """One category row of a breakdown (list row and donut slice)."""

    category: str = Field(description="Display label (localized)")
    amount: float = Field(description="Total amount in currency units")
    percentage: float = Field(description="Share of the total, 0-100, one decimal")
    color: str = Field(description="Hex display color")
    icon: str = Field(description="Display glyph")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "category": "Food",
                "amount": 450.0,
                "percentage": 47.4,
                "color": "#EF4444",
                "icon": "🍽️",
            }
        }
    )


class RingSegmentResponse(BaseModel):
    """Drawable donut segment (SVG path in chart coordinates)."""

    index: int = Field(description="Index into the categories list")
    path: str = Field(description="SVG path data of the annulus wedge")
    color: str
    is_selected: bool
    start_angle: float = Field(description="Drawn start angle in degrees")
    end_angle: float = Field(description="Drawn end angle in degrees")
    sweep: float = Field(description="Drawn sweep in degrees (never negative)")
    transform: str = Field(description="SVG transform for selection emphasis")
    opacity: float


class DonutCenterResponse(BaseModel):
    """Text shown inside the donut hole."""

    title: str = Field(description="Localized 'Expenses' / 'Income'")
    total: str = Field(description="Formatted total, e.g. '950 TND'")
    detail: str = Field(description="Selected category and share, e.g. 'Food • 47.4%'")


class DonutChartResponse(BaseModel):
    """Response for the breakdown donut chart.

    **Rendering:**
    - Draw each segment's `path` with its `transform` and `opacity`
    - Draw an inner circle of `inner_radius` at (`size`/2, `size`/2)
    - Render `categories` as the legend / list
    """

    mode: str = Field(description="'expenses' or 'income'")
    categories: list[CategoryAmountResponse]
    segments: list[RingSegmentResponse]
    total: float
    currency: str
    selected_index: int = Field(
        description="Selected row; meaningless when categories is empty",
    )
    selection_mode: str = Field(description="'default' or 'user_selected'")
    center: DonutCenterResponse
    size: float = Field(description="Canvas width and height")
    outer_radius: float
    inner_radius: float
    is_rtl: bool
    is_fallback: bool = Field(description="True when static demo data is shown")


class MonthlyTrendResponse(BaseModel):
    month: str = Field(description="Localized short month label")
    income: float
    expenses: float
    savings: float


class MonthlyTrendsResponse(BaseModel):
    """Monthly income/expenses/savings, oldest first."""

    trends: list[MonthlyTrendResponse]
    current_month: MonthlyTrendResponse
    max_value: float = Field(description="Highest value across series (chart scaling)")
    is_fallback: bool
