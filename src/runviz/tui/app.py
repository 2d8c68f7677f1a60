"""
Runviz TUI Application

Main application class for the terminal-based viewer.
"""

from __future__ import annotations

from pathlib import Path

from textual.app import App
from textual.binding import Binding
from textual.theme import Theme

from runviz.state import AppState

# Runviz theme (matching web dashboard color palette)
RUNVIZ_THEME = Theme(
    name="runviz",
    primary="#2C2520",
    secondary="#8B7F75",
    accent="#CC785C",
    foreground="#2C2520",
    background="#F5F3F0",
    surface="#FDFCFB",
    panel="#E6E3E0",
    success="#5A8B6F",
    error="#C84C3C",
    warning="#D4864E",
)


class RunvizTUIApp(App[None]):
    """Runviz Terminal UI Application.

    Loads one metrics table at startup and charts the selected experiments.
    """

    TITLE = "Runviz TUI"
    CSS_PATH = "styles/app.tcss"

    BINDINGS = [
        Binding("q", "quit", "Quit", show=True, priority=True),
    ]

    def __init__(self, path: str | Path, state: AppState | None = None) -> None:
        """Initialize the TUI application.

        Args:
            path: Metrics table to load.
            state: Application state. Defaults to a fresh state.

        Raises:
            OSError: If the table cannot be read
            FormatError: If the table has no recognizable header
        """
        super().__init__()
        self._path = Path(path)
        self._state = state if state is not None else AppState()
        self._state.load_file(self._path)
        self.sub_title = self._path.name

        # Register and apply runviz theme
        self.register_theme(RUNVIZ_THEME)
        self.theme = "runviz"

    @property
    def path(self) -> Path:
        """Get the loaded table path."""
        return self._path

    @property
    def state(self) -> AppState:
        """Get the application state."""
        return self._state

    def on_mount(self) -> None:
        """Handle mount event - push the initial screen."""
        from runviz.tui.screens import ExplorerScreen

        self.push_screen(ExplorerScreen())

    async def action_quit(self) -> None:
        """Quit the application."""
        self.exit()
