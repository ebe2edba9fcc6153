"""Analytics router for the analytics screen.

Provides the category breakdown donut chart (geometry included) and the
monthly trend series.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Query

from flouss.application.context import UIContext
from flouss.application.dtos.analytics import DonutChartResult
from flouss.domain.analytics import CategoryAmount, DisplayMode, MonthlyTrend, Period
from flouss.domain.localization import Language
from flouss.presentation.api.dependencies import (
    AppSettings,
    CategoryTotalsQueryDep,
    DonutChartQueryDep,
    MonthlyTrendsQueryDep,
)
from flouss.presentation.api.schemas.analytics import (
    CategoryAmountResponse,
    DonutCenterResponse,
    DonutChartResponse,
    MonthlyTrendResponse,
    MonthlyTrendsResponse,
    RingSegmentResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()

LanguageParam = Annotated[
    str | None,
    Query(pattern=r"^(en|fr|tn)$", description="UI language (defaults to settings)"),
]
ModeParam = Annotated[
    DisplayMode,
    Query(description="Show expense categories or income sources"),
]
PeriodParam = Annotated[
    Period,
    Query(description="Reporting window"),
]
SelectedParam = Annotated[
    int | None,
    Query(ge=0, description="Tapped category index (omit for the largest)"),
]


@router.get(
    "/users/{user_id}/donut",
    summary="Get the category breakdown donut chart",
    responses={
        200: {"description": "Category rows, ring segments and center label"},
    },
)
async def get_donut_chart(
    user_id: str,
    query: DonutChartQueryDep,
    settings: AppSettings,
    mode: ModeParam = DisplayMode.EXPENSES,
    period: PeriodParam = Period.MONTHLY,
    language: LanguageParam = None,
    selected: SelectedParam = None,
) -> DonutChartResponse:
    """
    Get the donut chart for the analytics screen.

    The largest category is selected unless `selected` names a valid row.
    When the data source is unreachable, static demo data is returned with
    `is_fallback=true`.
    """
    ui_context = UIContext.from_settings(settings, language)
    result = await query.execute(
        user_id=user_id,
        ui_context=ui_context,
        mode=mode,
        period=period,
        selected_index=selected,
    )
    return _to_donut_response(result)


@router.get(
    "/users/{user_id}/categories",
    summary="Get expense totals per category",
    responses={
        200: {"description": "Top expense categories, largest first"},
        503: {"description": "Analytics data source unavailable"},
    },
)
async def get_category_totals(
    user_id: str,
    query: CategoryTotalsQueryDep,
    settings: AppSettings,
    period: PeriodParam = Period.MONTHLY,
    language: LanguageParam = None,
) -> list[CategoryAmountResponse]:
    """Get raw category totals without fallback data."""
    categories = await query.execute(
        user_id=user_id,
        period=period,
        language=Language.parse(language or settings.default_language),
    )
    return [_to_category_response(c) for c in categories]


@router.get(
    "/users/{user_id}/trends",
    summary="Get monthly income and expense trends",
    responses={
        200: {"description": "Monthly totals for the lookback window"},
    },
)
async def get_monthly_trends(
    user_id: str,
    query: MonthlyTrendsQueryDep,
    settings: AppSettings,
    language: LanguageParam = None,
) -> MonthlyTrendsResponse:
    """Get monthly income, expenses and savings, oldest month first."""
    result = await query.execute(
        user_id=user_id,
        ui_context=UIContext.from_settings(settings, language),
    )
    return MonthlyTrendsResponse(
        trends=[_to_trend_response(t) for t in result.trends],
        current_month=_to_trend_response(result.current_month),
        max_value=result.max_value,
        is_fallback=result.is_fallback,
    )


def _to_category_response(category: CategoryAmount) -> CategoryAmountResponse:
    return CategoryAmountResponse(
        category=category.category,
        amount=category.amount,
        percentage=category.percentage,
        color=category.color,
        icon=category.icon,
    )


def _to_trend_response(trend: MonthlyTrend) -> MonthlyTrendResponse:
    return MonthlyTrendResponse(
        month=trend.month,
        income=trend.income,
        expenses=trend.expenses,
        savings=trend.savings,
    )


def _to_donut_response(result: DonutChartResult) -> DonutChartResponse:
    return DonutChartResponse(
        mode=result.mode.value,
        categories=[_to_category_response(c) for c in result.categories],
        segments=[
            RingSegmentResponse(
                index=s.index,
                path=s.path_descriptor,
                color=s.color,
                is_selected=s.is_selected,
                start_angle=s.start_angle,
                end_angle=s.end_angle,
                sweep=s.sweep,
                transform=s.transform,
                opacity=s.opacity,
            )
            for s in result.segments
        ],
        total=result.total,
        currency=result.currency,
        selected_index=result.selected_index,
        selection_mode=result.selection_mode.value,
        center=DonutCenterResponse(
            title=result.center_title,
            total=result.center_total,
            detail=result.center_detail,
        ),
        size=result.size,
        outer_radius=result.outer_radius,
        inner_radius=result.inner_radius,
        is_rtl=result.is_rtl,
        is_fallback=result.is_fallback,
    )
