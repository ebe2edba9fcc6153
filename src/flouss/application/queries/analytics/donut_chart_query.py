"""Build the breakdown donut chart for a user."""

from __future__ import annotations

import logging

from flouss.application.context import UIContext
from flouss.application.dtos.analytics import DonutChartResult
from flouss.application.ports.analytics import AnalyticsReadPort
from flouss.application.services import AnalyticsLoader, DonutChartAssembler
from flouss.domain.analytics import (
    DisplayMode,
    DonutLayout,
    Period,
    SelectionController,
)

logger = logging.getLogger(__name__)


class DonutChartQuery:
    """Return the donut chart (segments, rows, center label) for one request.

    Without `selected_index` the largest category is selected. An explicit
    index acts as a tap; an index outside the category list is ignored.
    """

    def __init__(
        self,
        analytics_read_port: AnalyticsReadPort,
        layout: DonutLayout,
    ):
        self._loader = AnalyticsLoader(analytics_read_port)
        self._assembler = DonutChartAssembler(layout)

    async def execute(
        self,
        user_id: str,
        ui_context: UIContext,
        mode: DisplayMode = DisplayMode.EXPENSES,
        period: Period = Period.MONTHLY,
        selected_index: int | None = None,
    ) -> DonutChartResult:
        loaded = await self._loader.load(user_id, ui_context.language, period)
        categories = self._assembler.categories_for(
            loaded.data,
            mode,
            ui_context.language,
        )

        selection = SelectionController()
        selection.data_changed(categories)
        if selected_index is not None:
            if 0 <= selected_index < len(categories):
                selection.user_tap(selected_index)
            else:
                logger.info(
                    "Selected index %d out of range for %d categories, "
                    "keeping default selection",
                    selected_index,
                    len(categories),
                )

        return self._assembler.assemble(
            categories=categories,
            mode=mode,
            selection=selection,
            ui_context=ui_context,
            is_fallback=loaded.is_fallback,
        )
