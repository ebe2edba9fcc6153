"""Supported display languages."""

from __future__ import annotations

from enum import Enum

from flouss.domain.shared.exceptions import ErrorCode, ValidationError


class Language(str, Enum):
    """UI language of the application."""

    EN = "en"
    FR = "fr"
    TN = "tn"  # Tunisian Arabic

    @property
    def is_rtl(self) -> bool:
        return self in _RTL_LANGUAGES

    @classmethod
    def parse(cls, value: str | Language) -> Language:
        if isinstance(value, Language):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            msg = f"Unsupported language: {value!r}"
            raise ValidationError(
                msg,
                code=ErrorCode.INVALID_LANGUAGE,
                details={"supported": [lang.value for lang in cls]},
            ) from None


_RTL_LANGUAGES = frozenset({Language.TN})
