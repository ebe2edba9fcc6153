"""Numeric helpers shared by analytics services."""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return math.floor(value + 0.5)


def share_percentage(amount: float, total: float) -> float:
    """Share of `amount` in `total` on a 0-100 scale, one decimal place."""
    return round_half_up(amount / total * 1000) / 10
