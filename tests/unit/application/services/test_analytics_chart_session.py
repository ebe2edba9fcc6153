"""Tests for AnalyticsLoader and AnalyticsChartSession."""

from unittest.mock import AsyncMock

import pytest

from flouss.application.services import (
    AnalyticsChartSession,
    AnalyticsLoader,
    DonutChartAssembler,
    fallback_analytics_data,
)
from flouss.domain.analytics import (
    AnalyticsDataUnavailableError,
    DisplayMode,
    Period,
    SelectionMode,
)
from flouss.domain.localization import Language


@pytest.fixture
def session(mock_analytics_port, layout, ui_context) -> AnalyticsChartSession:
    return AnalyticsChartSession(
        loader=AnalyticsLoader(mock_analytics_port),
        assembler=DonutChartAssembler(layout),
        user_id="user-1",
        ui_context=ui_context,
    )


class TestAnalyticsLoader:
    """Tests for loading analytics with fallback."""

    @pytest.mark.asyncio
    async def test_returns_port_data(self, mock_analytics_port, sample_analytics_data):
        loaded = await AnalyticsLoader(mock_analytics_port).load("user-1", Language.EN)

        assert loaded.data is sample_analytics_data
        assert loaded.is_fallback is False

    @pytest.mark.asyncio
    async def test_uses_fallback_when_unavailable(self):
        port = AsyncMock()
        port.fetch_analytics_data.side_effect = AnalyticsDataUnavailableError()

        loaded = await AnalyticsLoader(port).load("user-1", Language.EN, Period.YEARLY)

        assert loaded.is_fallback is True
        assert loaded.data == fallback_analytics_data()
        port.fetch_analytics_data.assert_awaited_once_with(
            user_id="user-1",
            language=Language.EN,
            period=Period.YEARLY,
        )

    @pytest.mark.asyncio
    async def test_other_errors_propagate(self):
        port = AsyncMock()
        port.fetch_analytics_data.side_effect = RuntimeError("bug")

        with pytest.raises(RuntimeError):
            await AnalyticsLoader(port).load("user-1", Language.EN)


class TestAnalyticsChartSession:
    """Tests for the stateful chart session."""

    def test_chart_before_load_raises(self, session):
        assert session.is_loaded is False

        with pytest.raises(RuntimeError):
            session.chart()

    @pytest.mark.asyncio
    async def test_load_selects_largest_category(self, session):
        await session.load()

        chart = session.chart()
        assert session.is_loaded is True
        assert session.selected_index == 1
        assert chart.center_detail == "Food • 47.4%"

    @pytest.mark.asyncio
    async def test_tap_persists_across_renders(self, session):
        await session.load()

        session.tap(0)

        assert session.chart().selected_index == 0
        assert session.chart().selection_mode is SelectionMode.USER_SELECTED
        assert session.chart().center_detail == "Rent • 21.1%"

    @pytest.mark.asyncio
    async def test_out_of_range_tap_is_ignored(self, session):
        await session.load()

        session.tap(3)
        session.tap(-1)

        assert session.selected_index == 1
        assert session.chart().selection_mode is SelectionMode.DEFAULT

    @pytest.mark.asyncio
    async def test_mode_switch_resets_selection(self, session):
        await session.load()
        session.tap(2)

        session.set_mode(DisplayMode.INCOME)

        assert session.mode is DisplayMode.INCOME
        assert session.selected_index == 0
        assert [c.category for c in session.categories] == ["Salary", "Freelance", "Gift"]

    @pytest.mark.asyncio
    async def test_reload_resets_selection(self, session):
        await session.load()
        session.tap(0)

        await session.load()

        assert session.selected_index == 1

    @pytest.mark.asyncio
    async def test_change_language_reloads(self, session, mock_analytics_port):
        await session.load()

        await session.change_language(Language.FR)

        assert session.ui_context.language is Language.FR
        assert session.chart().center_title == "Dépenses"
        assert mock_analytics_port.fetch_analytics_data.await_count == 2
        mock_analytics_port.fetch_analytics_data.assert_awaited_with(
            user_id="user-1",
            language=Language.FR,
            period=Period.MONTHLY,
        )

    @pytest.mark.asyncio
    async def test_fallback_flag_reaches_chart(self, layout, ui_context):
        port = AsyncMock()
        port.fetch_analytics_data.side_effect = AnalyticsDataUnavailableError()
        session = AnalyticsChartSession(
            loader=AnalyticsLoader(port),
            assembler=DonutChartAssembler(layout),
            user_id="user-1",
            ui_context=ui_context,
        )

        await session.load()

        assert session.chart().is_fallback is True

    def test_mode_switch_before_load_only_records_mode(self, session, mock_analytics_port):
        session.set_mode(DisplayMode.INCOME)

        assert session.mode is DisplayMode.INCOME
        assert session.categories == []
        assert session.is_loaded is False
        mock_analytics_port.fetch_analytics_data.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_load_after_mode_switch_uses_new_mode(self, session):
        session.set_mode(DisplayMode.INCOME)

        await session.load()

        assert session.chart().center_title == "Income"
        assert session.selected_index == 0
