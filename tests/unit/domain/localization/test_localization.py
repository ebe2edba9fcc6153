"""Tests for languages, the message catalog and amount formatting."""

import pytest

from flouss.domain.localization import (
    MESSAGES,
    MONTH_NAMES,
    Language,
    MessageKey,
    format_currency,
    month_name,
    translate,
)
from flouss.domain.shared import ErrorCode, ValidationError


class TestLanguage:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [("en", Language.EN), ("FR", Language.FR), (" tn ", Language.TN)],
    )
    def test_parse(self, value, expected):
        assert Language.parse(value) is expected

    def test_parse_passes_language_through(self):
        assert Language.parse(Language.FR) is Language.FR

    def test_parse_unknown_language(self):
        with pytest.raises(ValidationError) as exc_info:
            Language.parse("de")

        assert exc_info.value.code is ErrorCode.INVALID_LANGUAGE
        assert exc_info.value.details["supported"] == ["en", "fr", "tn"]

    def test_only_tunisian_is_right_to_left(self):
        assert Language.TN.is_rtl
        assert not Language.EN.is_rtl
        assert not Language.FR.is_rtl


class TestCatalog:
    @pytest.mark.parametrize("language", list(Language))
    def test_every_key_is_translated(self, language):
        assert all(MESSAGES[language].get(key) for key in MessageKey)
        assert len(MONTH_NAMES[language]) == 12

    def test_translate(self):
        assert translate(MessageKey.EXPENSES, Language.EN) == "Expenses"
        assert translate(MessageKey.EXPENSES, Language.FR) == "Dépenses"
        assert translate(MessageKey.INCOME, Language.TN) != "Income"

    def test_month_name(self):
        assert month_name(0, Language.EN) == "Jan"
        assert month_name(11, Language.FR) == "Déc"


class TestFormatCurrency:
    @pytest.mark.parametrize(
        ("amount", "expected"),
        [
            (950, "950 TND"),
            (1234.5, "1,234.5 TND"),
            (0.125, "0.125 TND"),
            (0, "0 TND"),
            (1000000, "1,000,000 TND"),
        ],
    )
    def test_format(self, amount, expected):
        assert format_currency(amount) == expected

    def test_currency_suffix(self):
        assert format_currency(12.5, "EUR") == "12.5 EUR"
