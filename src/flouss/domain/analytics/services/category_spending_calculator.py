"""Group expense transactions into per-category spending."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from flouss.domain.analytics.services._utils import round_half_up
from flouss.domain.analytics.value_objects import (
    DEFAULT_CATEGORY_COLOR,
    DEFAULT_ICON,
    CategoryAmount,
    TransactionRecord,
)
from flouss.domain.localization import Language, MessageKey, translate

DEFAULT_TOP_CATEGORIES = 6


@dataclass
class _Bucket:
    amount: float
    icon: str
    color: str


class CategorySpendingCalculator:
    """Spending by category for the analytics screen."""

    @staticmethod
    def calculate(
        transactions: Iterable[TransactionRecord],
        language: Language,
        top_n: int = DEFAULT_TOP_CATEGORIES,
    ) -> list[CategoryAmount]:
        """Return the `top_n` largest expense categories, largest first.

        Categories are keyed by their localized name. Icon and color come from
        the first transaction seen for a category. Percentages here are whole
        numbers of the total spending.
        """
        buckets: dict[str, _Bucket] = {}

        for transaction in transactions:
            if not transaction.is_expense:
                continue
            ref = transaction.category
            name = (ref.localized_name(language) if ref else None) or translate(
                MessageKey.OTHER, language
            )
            bucket = buckets.get(name)
            if bucket is None:
                bucket = _Bucket(
                    amount=0.0,
                    icon=(ref.icon if ref else None) or DEFAULT_ICON,
                    color=(ref.color if ref else None) or DEFAULT_CATEGORY_COLOR,
                )
                buckets[name] = bucket
            bucket.amount += transaction.amount

        total = sum(b.amount for b in buckets.values())

        items = [
            CategoryAmount(
                category=name,
                amount=bucket.amount,
                percentage=float(round_half_up(bucket.amount / total * 100))
                if total > 0
                else 0.0,
                color=bucket.color,
                icon=bucket.icon,
            )
            for name, bucket in buckets.items()
        ]
        items.sort(key=lambda item: item.amount, reverse=True)
        return items[:top_n]
