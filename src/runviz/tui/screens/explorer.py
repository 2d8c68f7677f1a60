"""
Explorer Screen

Experiment selection on the left, one chart per metric of the selection on the right.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import VerticalScroll
from textual.screen import Screen
from textual.widgets import Footer, Header, SelectionList, Static

from runviz.tui.screens.summary import SummaryScreen
from runviz.tui.widgets import SeriesChartWidget

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from runviz.tui.app import RunvizTUIApp


class ExplorerScreen(Screen[None]):
    """Screen listing experiments and charting the selected ones."""

    BINDINGS = [
        Binding("a", "select_all", "Select All", show=True),
        Binding("c", "clear_selection", "Clear", show=True),
        Binding("s", "show_summary", "Summary", show=True),
    ]

    @property
    def tui_app(self) -> RunvizTUIApp:
        """Get the typed app instance."""
        from runviz.tui.app import RunvizTUIApp

        assert isinstance(self.app, RunvizTUIApp)
        return self.app

    def compose(self) -> ComposeResult:
        """Compose the screen layout."""
        state = self.tui_app.state
        yield Header()
        yield SelectionList[str](
            *[(experiment_id, experiment_id, experiment_id in state.selection) for experiment_id in state.index.experiment_ids],
            id="experiments",
        )
        yield VerticalScroll(id="charts")
        yield Footer()

    async def on_mount(self) -> None:
        """Handle mount event - draw the initial selection."""
        await self._refresh_charts()

    async def on_selection_list_selected_changed(self, event: SelectionList.SelectedChanged) -> None:
        """Store the new selection and redraw the charts."""
        self.tui_app.state.select(event.selection_list.selected)
        await self._refresh_charts()

    async def _refresh_charts(self) -> None:
        """Replace the chart widgets with the current selection's charts."""
        state = self.tui_app.state
        container = self.query_one("#charts", VerticalScroll)
        await container.remove_children()

        metric_names = state.metric_names()
        if not metric_names:
            await container.mount(Static("Select experiments to chart their metrics.", id="empty-message"))
            return

        logger.debug("Charting %d metrics for %d experiments", len(metric_names), len(state.selection))
        await container.mount_all([SeriesChartWidget(state.series(name)) for name in metric_names])

    def action_select_all(self) -> None:
        """Select every experiment."""
        self.query_one("#experiments", SelectionList).select_all()

    def action_clear_selection(self) -> None:
        """Deselect every experiment."""
        self.query_one("#experiments", SelectionList).deselect_all()

    def action_show_summary(self) -> None:
        """Show summary statistics of the selection."""
        self.app.push_screen(SummaryScreen())
