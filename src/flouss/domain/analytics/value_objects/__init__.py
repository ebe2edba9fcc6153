"""Value objects for analytics charts."""

from flouss.domain.analytics.value_objects.category_amount import (
    CategoryAmount,
    CategoryInput,
)
from flouss.domain.analytics.value_objects.display_mode import (
    DisplayMode,
    Period,
    first_of_month,
)
from flouss.domain.analytics.value_objects.donut_layout import DonutLayout
from flouss.domain.analytics.value_objects.monthly_trend import MonthlyTrend
from flouss.domain.analytics.value_objects.palettes import (
    DEFAULT_CATEGORY_COLOR,
    DEFAULT_ICON,
    EXPENSE_PALETTE,
    INCOME_PALETTE,
)
from flouss.domain.analytics.value_objects.ring_segment import (
    RingSegment,
    format_number,
)
from flouss.domain.analytics.value_objects.transaction_record import (
    CategoryRef,
    TransactionRecord,
    coerce_amount,
)

__all__ = [
    "DEFAULT_CATEGORY_COLOR",
    "DEFAULT_ICON",
    "EXPENSE_PALETTE",
    "INCOME_PALETTE",
    "CategoryAmount",
    "CategoryInput",
    "CategoryRef",
    "DisplayMode",
    "DonutLayout",
    "MonthlyTrend",
    "Period",
    "RingSegment",
    "TransactionRecord",
    "coerce_amount",
    "first_of_month",
    "format_number",
]
