"""Chart palettes and display fallbacks."""

EXPENSE_PALETTE: tuple[str, ...] = (
    "#F43F5E",
    "#F97316",
    "#F59E0B",
    "#10B981",
    "#3B82F6",
    "#8B5CF6",
    "#A855F7",
)

INCOME_PALETTE: tuple[str, ...] = (
    "#22C55E",
    "#06B6D4",
    "#8B5CF6",
    "#A855F7",
    "#3B82F6",
)

DEFAULT_ICON = "💸"
DEFAULT_CATEGORY_COLOR = "#6B7280"  # neutral gray for uncolored backend categories
