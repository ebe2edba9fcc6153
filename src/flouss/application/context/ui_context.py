"""Display context passed explicitly to queries and services."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Literal

from flouss.domain.localization import Language

if TYPE_CHECKING:
    from flouss_config import Settings

Theme = Literal["light", "dark", "auto"]


@dataclass(frozen=True)
class UIContext:
    """
    Immutable display preferences of the current user.

    Created once per request (or per screen session) and handed down to
    whatever needs language, currency or theme.
    """

    language: Language = Language.TN
    currency: str = "TND"
    theme: Theme = "light"

    @property
    def is_rtl(self) -> bool:
        return self.language.is_rtl

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        language: Language | str | None = None,
    ) -> UIContext:
        return cls(
            language=Language.parse(language or settings.default_language),
            currency=settings.default_currency,
        )

    def with_language(self, language: Language) -> UIContext:
        return replace(self, language=language)

    def __str__(self) -> str:
        return f"UIContext({self.language.value}, {self.currency})"
