"""Analytics ports (read side)."""

from flouss.application.ports.analytics.analytics_read_port import AnalyticsReadPort

__all__ = ["AnalyticsReadPort"]
