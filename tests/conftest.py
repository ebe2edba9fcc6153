"""Root pytest configuration and shared fixtures.

Test Structure:
    tests/
    ├── unit/              # Fast, isolated tests (no network)
    │   ├── config/
    │   ├── domain/
    │   ├── application/
    │   └── infrastructure/
    └── integration/       # HTTP API through FastAPI's TestClient
"""

from unittest.mock import AsyncMock

import pytest

from flouss.application.context import UIContext
from flouss.application.dtos.analytics import AnalyticsData
from flouss.domain.analytics import CategoryAmount, DonutLayout, MonthlyTrend
from flouss.domain.localization import Language
from flouss_config import clear_settings_cache


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch):
    """Keep settings independent of the developer's environment."""
    for name in (
        "FLOUSS_ENV_FILE",
        "LOG_LEVEL",
        "DEFAULT_LANGUAGE",
        "DEFAULT_CURRENCY",
        "SUPABASE_URL",
        "SUPABASE_ANON_KEY",
        "DONUT_GAP_DEGREES",
        "DONUT_SIZE",
    ):
        monkeypatch.delenv(name, raising=False)
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def sample_analytics_data() -> AnalyticsData:
    """Three expense categories (total 950) and three months of trends."""
    trends = [
        MonthlyTrend(month="Jan", income=2500.0, expenses=1800.0, savings=700.0),
        MonthlyTrend(month="Feb", income=2000.0, expenses=1900.0, savings=100.0),
        MonthlyTrend(month="Mar", income=3000.0, expenses=950.0, savings=2050.0),
    ]
    return AnalyticsData(
        spending_by_category=[
            CategoryAmount("Rent", 200.0, 21.0, "#111111", "🏠"),
            CategoryAmount("Food", 450.0, 47.0, "#222222", "🍽️"),
            CategoryAmount("Transport", 300.0, 32.0, "", ""),
        ],
        monthly_trends=trends,
        total_expenses=950.0,
        current_month=trends[-1],
    )


@pytest.fixture
def mock_analytics_port(sample_analytics_data) -> AsyncMock:
    port = AsyncMock()
    port.fetch_analytics_data.return_value = sample_analytics_data
    port.fetch_category_totals.return_value = sample_analytics_data.spending_by_category
    return port


@pytest.fixture
def layout() -> DonutLayout:
    return DonutLayout.for_size(240)


@pytest.fixture
def ui_context() -> UIContext:
    return UIContext(language=Language.EN, currency="TND")
