"""Assemble the donut chart view from analytics data and a selection."""

from __future__ import annotations

from typing import Sequence

from flouss.application.context import UIContext
from flouss.application.dtos.analytics import AnalyticsData, DonutChartResult
from flouss.domain.analytics import (
    CategoryAggregator,
    CategoryAmount,
    CategoryInput,
    DisplayMode,
    DonutGeometryBuilder,
    DonutLayout,
    SelectionController,
    estimate_income_sources,
    total_amount,
)
from flouss.domain.analytics.value_objects import format_number
from flouss.domain.localization import (
    Language,
    MessageKey,
    format_currency,
    translate,
)

_MODE_TITLES = {
    DisplayMode.EXPENSES: MessageKey.EXPENSES,
    DisplayMode.INCOME: MessageKey.INCOME,
}


class DonutChartAssembler:
    """Glue between aggregation, selection and geometry."""

    def __init__(self, layout: DonutLayout):
        self._builder = DonutGeometryBuilder(layout)

    @property
    def layout(self) -> DonutLayout:
        return self._builder.layout

    @staticmethod
    def categories_for(
        data: AnalyticsData,
        mode: DisplayMode,
        language: Language,
    ) -> list[CategoryAmount]:
        """Category rows of the chart for the given display mode."""
        if mode is DisplayMode.EXPENSES:
            records = [
                CategoryInput(
                    category=c.category,
                    amount=c.amount,
                    color=c.color,
                    icon=c.icon,
                )
                for c in data.spending_by_category
            ]
        else:
            records = estimate_income_sources(data.current_month.income, language)
        return CategoryAggregator(mode.palette).aggregate(records)

    def assemble(
        self,
        *,
        categories: Sequence[CategoryAmount],
        mode: DisplayMode,
        selection: SelectionController,
        ui_context: UIContext,
        is_fallback: bool = False,
    ) -> DonutChartResult:
        layout = self.layout
        index = selection.selected_index
        total = total_amount(categories)

        center_detail = ""
        if 0 <= index < len(categories):
            selected = categories[index]
            center_detail = f"{selected.category} • {format_number(selected.percentage)}%"

        return DonutChartResult(
            mode=mode,
            categories=list(categories),
            segments=self._builder.build(categories, index),
            total=total,
            currency=ui_context.currency,
            selected_index=index,
            selection_mode=selection.mode,
            center_title=translate(_MODE_TITLES[mode], ui_context.language),
            center_total=format_currency(total, ui_context.currency),
            center_detail=center_detail,
            size=layout.size,
            outer_radius=layout.outer_radius,
            inner_radius=layout.inner_radius,
            is_rtl=ui_context.is_rtl,
            is_fallback=is_fallback,
        )
