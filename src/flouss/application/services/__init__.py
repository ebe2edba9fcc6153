"""Application services."""

from flouss.application.services.analytics_chart_session import AnalyticsChartSession
from flouss.application.services.analytics_loader import AnalyticsLoader
from flouss.application.services.donut_chart_assembler import DonutChartAssembler
from flouss.application.services.fallback_analytics import fallback_analytics_data

__all__ = [
    "AnalyticsChartSession",
    "AnalyticsLoader",
    "DonutChartAssembler",
    "fallback_analytics_data",
]
