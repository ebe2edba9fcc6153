"""Stateful breakdown chart for one analytics screen."""

from __future__ import annotations

import logging

from flouss.application.context import UIContext
from flouss.application.dtos.analytics import DonutChartResult, LoadedAnalytics
from flouss.application.services.analytics_loader import AnalyticsLoader
from flouss.application.services.donut_chart_assembler import DonutChartAssembler
from flouss.domain.analytics import (
    CategoryAmount,
    DisplayMode,
    Period,
    SelectionController,
)
from flouss.domain.localization import Language

logger = logging.getLogger(__name__)


class AnalyticsChartSession:
    """Holds loaded data, display mode and selection between interactions.

    Every reload and every mode switch counts as a data change and resets the
    selection to the largest category; taps persist until then.
    """

    def __init__(
        self,
        loader: AnalyticsLoader,
        assembler: DonutChartAssembler,
        user_id: str,
        ui_context: UIContext,
        period: Period = Period.MONTHLY,
        mode: DisplayMode = DisplayMode.EXPENSES,
    ):
        self._loader = loader
        self._assembler = assembler
        self._user_id = user_id
        self._ui_context = ui_context
        self._period = period
        self._mode = mode
        self._selection = SelectionController()
        self._loaded: LoadedAnalytics | None = None
        self._categories: list[CategoryAmount] = []

    @property
    def mode(self) -> DisplayMode:
        return self._mode

    @property
    def ui_context(self) -> UIContext:
        return self._ui_context

    @property
    def selected_index(self) -> int:
        return self._selection.selected_index

    @property
    def categories(self) -> list[CategoryAmount]:
        return list(self._categories)

    @property
    def is_loaded(self) -> bool:
        return self._loaded is not None

    async def load(self) -> None:
        loaded = await self._loader.load(
            self._user_id,
            self._ui_context.language,
            self._period,
        )
        self._loaded = loaded
        self._refresh_categories(loaded)

    async def change_language(self, language: Language) -> None:
        """Switch language; category labels are localized, so data is reloaded."""
        self._ui_context = self._ui_context.with_language(language)
        await self.load()

    def set_mode(self, mode: DisplayMode) -> None:
        self._mode = mode
        if self._loaded is not None:
            self._refresh_categories(self._loaded)

    def tap(self, index: int) -> None:
        if not 0 <= index < len(self._categories):
            logger.debug(
                "Ignoring tap on index %d (%d categories)",
                index,
                len(self._categories),
            )
            return
        self._selection.user_tap(index)

    def chart(self) -> DonutChartResult:
        if self._loaded is None:
            msg = "Analytics session has not been loaded"
            raise RuntimeError(msg)
        return self._assembler.assemble(
            categories=self._categories,
            mode=self._mode,
            selection=self._selection,
            ui_context=self._ui_context,
            is_fallback=self._loaded.is_fallback,
        )

    def _refresh_categories(self, loaded: LoadedAnalytics) -> None:
        self._categories = self._assembler.categories_for(
            loaded.data,
            self._mode,
            self._ui_context.language,
        )
        self._selection.data_changed(self._categories)
