"""Estimated income sources for the income view of the breakdown chart.

The backend does not track income sources, so the current month's income is
split over fixed shares.
"""

from __future__ import annotations

from flouss.domain.analytics.value_objects import INCOME_PALETTE, CategoryInput
from flouss.domain.localization import Language, MessageKey, translate

INCOME_SHARES: tuple[tuple[MessageKey, float, str], ...] = (
    (MessageKey.SALARY, 0.60, "💼"),
    (MessageKey.FREELANCE, 0.25, "🧑‍💻"),
    (MessageKey.GIFT, 0.15, "🎁"),
)


def estimate_income_sources(income_total: float, language: Language) -> list[CategoryInput]:
    return [
        CategoryInput(
            category=translate(key, language),
            amount=income_total * share,
            icon=icon,
            color=INCOME_PALETTE[i % len(INCOME_PALETTE)],
        )
        for i, (key, share, icon) in enumerate(INCOME_SHARES)
    ]
