"""Localization: languages, typed messages and display formatting."""

from flouss.domain.localization.formatting import format_currency
from flouss.domain.localization.language import Language
from flouss.domain.localization.messages import (
    MESSAGES,
    MONTH_NAMES,
    MessageKey,
    month_name,
    translate,
)

__all__ = [
    "MESSAGES",
    "MONTH_NAMES",
    "Language",
    "MessageKey",
    "format_currency",
    "month_name",
    "translate",
]
