"""Typed message catalog.

Every language must define every MessageKey and twelve month names. The
catalog is checked when this module is imported, so a missing translation
fails at startup instead of rendering a raw key.
"""

from __future__ import annotations

from enum import Enum

from flouss.domain.localization.language import Language


class MessageKey(str, Enum):
    """Keys of user-facing strings used by the analytics screen."""

    EXPENSES = "expenses"
    INCOME = "income"
    SALARY = "salary"
    FREELANCE = "freelance"
    GIFT = "gift"
    OTHER = "other"
    NO_DATA = "no_data"


MESSAGES: dict[Language, dict[MessageKey, str]] = {
    Language.EN: {
        MessageKey.EXPENSES: "Expenses",
        MessageKey.INCOME: "Income",
        MessageKey.SALARY: "Salary",
        MessageKey.FREELANCE: "Freelance",
        MessageKey.GIFT: "Gift",
        MessageKey.OTHER: "Other",
        MessageKey.NO_DATA: "No analytics data available",
    },
    Language.FR: {
        MessageKey.EXPENSES: "Dépenses",
        MessageKey.INCOME: "Revenus",
        MessageKey.SALARY: "Salaire",
        MessageKey.FREELANCE: "Freelance",
        MessageKey.GIFT: "Cadeau",
        MessageKey.OTHER: "Autre",
        MessageKey.NO_DATA: "Aucune donnée analytique disponible",
    },
    Language.TN: {
        MessageKey.EXPENSES: "المصاريف",
        MessageKey.INCOME: "المدخول",
        MessageKey.SALARY: "الشهرية",
        MessageKey.FREELANCE: "فريلانس",
        MessageKey.GIFT: "هدية",
        MessageKey.OTHER: "أخرى",
        MessageKey.NO_DATA: "ما فماش معطيات",
    },
}

MONTH_NAMES: dict[Language, tuple[str, ...]] = {
    Language.EN: (
        "Jan", "Feb", "Mar", "Apr", "May", "Jun",
        "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
    ),
    Language.FR: (
        "Jan", "Fév", "Mar", "Avr", "Mai", "Jun",
        "Jul", "Aoû", "Sep", "Oct", "Nov", "Déc",
    ),
    Language.TN: (
        "جانفي", "فيفري", "مارس", "أفريل", "ماي", "جوان",
        "جويلية", "أوت", "سبتمبر", "أكتوبر", "نوفمبر", "ديسمبر",
    ),
}


def _validate_catalog() -> None:
    for language in Language:
        messages = MESSAGES.get(language)
        if messages is None:
            msg = f"No messages defined for language {language.value!r}"
            raise RuntimeError(msg)
        missing = [key.value for key in MessageKey if not messages.get(key)]
        if missing:
            msg = f"Missing translations for {language.value!r}: {missing}"
            raise RuntimeError(msg)
        if len(MONTH_NAMES.get(language, ())) != 12:
            msg = f"Expected 12 month names for {language.value!r}"
            raise RuntimeError(msg)


_validate_catalog()


def translate(key: MessageKey, language: Language) -> str:
    """Return the message for `key` in `language`, falling back to English."""
    return MESSAGES[language].get(key) or MESSAGES[Language.EN][key]


def month_name(month_index: int, language: Language) -> str:
    """Short month name for a zero-based month index (0 = January)."""
    return MONTH_NAMES[language][month_index]
