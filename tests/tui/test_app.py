"""Tests for the TUI application."""

from __future__ import annotations

from pathlib import Path

import pytest
from textual.widgets import DataTable, SelectionList, Static

from runviz.exceptions import FormatError
from runviz.state import AppState
from runviz.tui.app import RunvizTUIApp
from runviz.tui.screens import ExplorerScreen, SummaryScreen
from runviz.tui.screens.summary import format_cell
from runviz.tui.widgets import SeriesChartWidget


class TestRunvizTUIApp:
    """Tests for RunvizTUIApp class."""

    def test_app_loads_table(self, table_file: Path) -> None:
        """Test that the table is loaded when the app is created."""
        app = RunvizTUIApp(table_file)

        assert app.path == table_file
        assert app.state.data_ready is True
        assert app.state.index.experiment_ids == ["run1", "run2", "run3"]
        assert app.sub_title == "metrics.csv"

    def test_app_uses_given_state(self, table_file: Path) -> None:
        state = AppState()
        app = RunvizTUIApp(table_file, state=state)
        assert app.state is state

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            RunvizTUIApp(tmp_path / "missing.csv")

    def test_table_without_header(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.csv"
        path.write_text("run1,loss,1,0.5\n")

        with pytest.raises(FormatError):
            RunvizTUIApp(path)

    def test_app_has_required_bindings(self, table_file: Path) -> None:
        app = RunvizTUIApp(table_file)
        binding_keys = [b.key for b in app.BINDINGS]
        assert "q" in binding_keys


class TestExplorerScreen:
    """Tests for ExplorerScreen."""

    @pytest.mark.asyncio
    async def test_screen_lists_experiments(self, table_file: Path) -> None:
        app = RunvizTUIApp(table_file)
        async with app.run_test() as pilot:
            await pilot.pause()
            assert isinstance(app.screen, ExplorerScreen)
            selection_list = app.screen.query_one("#experiments", SelectionList)
            assert selection_list.option_count == 3

    @pytest.mark.asyncio
    async def test_no_charts_without_selection(self, table_file: Path) -> None:
        app = RunvizTUIApp(table_file)
        async with app.run_test() as pilot:
            await pilot.pause()
            assert len(app.screen.query(SeriesChartWidget)) == 0
            assert isinstance(app.screen.query_one("#empty-message"), Static)

    @pytest.mark.asyncio
    async def test_select_all_charts_every_metric(self, table_file: Path) -> None:
        app = RunvizTUIApp(table_file)
        async with app.run_test() as pilot:
            await pilot.pause()
            app.screen.action_select_all()
            await pilot.pause()
            await pilot.pause()

            assert app.state.selection == ["run1", "run2", "run3"]
            charts = list(app.screen.query(SeriesChartWidget))
            assert [c.metric_name for c in charts] == ["loss", "accuracy", "lr"]

    @pytest.mark.asyncio
    async def test_clear_selection_removes_charts(self, table_file: Path) -> None:
        app = RunvizTUIApp(table_file)
        async with app.run_test() as pilot:
            await pilot.pause()
            app.screen.action_select_all()
            await pilot.pause()
            app.screen.action_clear_selection()
            await pilot.pause()
            await pilot.pause()

            assert app.state.selection == []
            assert len(app.screen.query(SeriesChartWidget)) == 0


class TestSummaryScreen:
    """Tests for SummaryScreen."""

    @pytest.mark.asyncio
    async def test_summary_rows_follow_selection(self, table_file: Path) -> None:
        app = RunvizTUIApp(table_file)
        async with app.run_test() as pilot:
            await pilot.pause()
            app.screen.action_select_all()
            await pilot.pause()
            await pilot.press("s")
            await pilot.pause()

            assert isinstance(app.screen, SummaryScreen)
            table = app.screen.query_one("#summary-table", DataTable)
            assert table.row_count == 4

            await pilot.press("escape")
            await pilot.pause()
            assert isinstance(app.screen, ExplorerScreen)

    def test_format_cell(self) -> None:
        assert format_cell(None) == "-"
        assert format_cell(float("nan")) == "NaN"
        assert format_cell(0.123456) == "0.1235"
        assert format_cell(3) == "3"
        assert format_cell("run1") == "run1"
