"""FastAPI dependency injection for the Flouss API.

Provides dependencies for:
- Settings
- The Supabase client and the analytics read port
- Donut chart layout
- Queries
"""

import logging
from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from flouss.application.ports.analytics import AnalyticsReadPort
from flouss.application.queries import (
    CategoryTotalsQuery,
    DonutChartQuery,
    MonthlyTrendsQuery,
)
from flouss.domain.analytics import DonutLayout
from flouss.infrastructure.supabase import SupabaseAnalyticsReadAdapter, SupabaseClient
from flouss_config.settings import Settings, get_settings

logger = logging.getLogger(__name__)


@lru_cache()
def get_supabase_client() -> SupabaseClient:
    """Shared Supabase client (one connection pool per process)."""
    settings = get_settings()
    api_key = (
        settings.supabase_anon_key.get_secret_value()
        if settings.supabase_anon_key
        else None
    )
    if api_key is None:
        logger.warning("SUPABASE_ANON_KEY is not set; requests are unauthenticated")
    return SupabaseClient(
        base_url=settings.supabase_rest_url,
        api_key=api_key,
        timeout=settings.supabase_timeout,
    )


def get_app_settings() -> Settings:
    return get_settings()


AppSettings = Annotated[Settings, Depends(get_app_settings)]


def get_analytics_read_port(settings: AppSettings) -> AnalyticsReadPort:
    return SupabaseAnalyticsReadAdapter(
        client=get_supabase_client(),
        lookback_months=settings.analytics_lookback_months,
        top_categories=settings.analytics_top_categories,
    )


AnalyticsPort = Annotated[AnalyticsReadPort, Depends(get_analytics_read_port)]


def get_donut_layout(settings: AppSettings) -> DonutLayout:
    return DonutLayout.from_settings(settings)


def get_donut_chart_query(
    port: AnalyticsPort,
    layout: Annotated[DonutLayout, Depends(get_donut_layout)],
) -> DonutChartQuery:
    return DonutChartQuery(port, layout)


def get_monthly_trends_query(port: AnalyticsPort) -> MonthlyTrendsQuery:
    return MonthlyTrendsQuery(port)


def get_category_totals_query(port: AnalyticsPort) -> CategoryTotalsQuery:
    return CategoryTotalsQuery(port)


DonutChartQueryDep = Annotated[DonutChartQuery, Depends(get_donut_chart_query)]
MonthlyTrendsQueryDep = Annotated[MonthlyTrendsQuery, Depends(get_monthly_trends_query)]
CategoryTotalsQueryDep = Annotated[
    CategoryTotalsQuery,
    Depends(get_category_totals_query),
]
