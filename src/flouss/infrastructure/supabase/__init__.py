"""Supabase data access."""

from flouss.infrastructure.supabase.analytics_read_adapter import (
    SupabaseAnalyticsReadAdapter,
)
from flouss.infrastructure.supabase.client import SupabaseClient

__all__ = ["SupabaseAnalyticsReadAdapter", "SupabaseClient"]
