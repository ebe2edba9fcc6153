"""Application ports (interfaces implemented by infrastructure)."""

from flouss.application.ports.analytics import AnalyticsReadPort

__all__ = ["AnalyticsReadPort"]
