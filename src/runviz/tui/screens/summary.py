"""
Summary Screen

Per-metric statistics of the selected experiments.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Container
from textual.screen import ModalScreen
from textual.widgets import DataTable, Static

from runviz.aggregate import SUMMARY_SCHEMA

if TYPE_CHECKING:
    from runviz.tui.app import RunvizTUIApp


def format_cell(value: object) -> str:
    """Format one summary cell for display."""
    if value is None:
        return "-"
    if isinstance(value, float):
        return "NaN" if math.isnan(value) else f"{value:.4g}"
    return str(value)


class SummaryScreen(ModalScreen[None]):
    """Modal screen with one row per (experiment, metric) of the selection."""

    BINDINGS = [
        Binding("escape", "dismiss", "Close", show=True),
        Binding("s", "dismiss", "Close", show=False),
    ]

    DEFAULT_CSS = """
    SummaryScreen {
        align: center middle;
    }

    SummaryScreen > Container {
        width: 90%;
        height: 80%;
        background: $surface;
        border: solid $primary;
        padding: 1 2;
    }

    #summary-table {
        height: 1fr;
    }
    """

    @property
    def tui_app(self) -> RunvizTUIApp:
        """Get the typed app instance."""
        from runviz.tui.app import RunvizTUIApp

        assert isinstance(self.app, RunvizTUIApp)
        return self.app

    def compose(self) -> ComposeResult:
        """Compose the summary screen."""
        yield Container(
            Static("[bold]Summary[/bold] (Esc to close)"),
            DataTable(id="summary-table", cursor_type="row"),
        )

    def on_mount(self) -> None:
        """Handle mount event - fill the table."""
        table = self.query_one("#summary-table", DataTable)
        table.add_columns(*SUMMARY_SCHEMA)
        for row in self.tui_app.state.summary().iter_rows():
            table.add_row(*[format_cell(v) for v in row])
        table.focus()

    async def action_dismiss(self, result: None = None) -> None:
        """Dismiss the summary screen."""
        self.dismiss(result)
