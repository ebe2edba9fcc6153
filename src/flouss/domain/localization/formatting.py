"""Display formatting for amounts."""

from __future__ import annotations

from decimal import Decimal


def format_currency(amount: float | Decimal | int, currency: str = "TND") -> str:
    """Format an amount with grouped thousands, e.g. ``"1,234.5 TND"``.

    At most three fraction digits are shown and trailing zeros are dropped.
    """
    text = f"{float(amount):,.3f}".rstrip("0").rstrip(".")
    if text == "-0":
        text = "0"
    return f"{text} {currency}"
