"""
Runviz Terminal UI

A terminal-based viewer using the Textual framework: pick experiments from a
loaded table and view one chart per metric.
"""

from __future__ import annotations

from pathlib import Path


def run_tui(path: str | Path) -> None:
    """Run the runviz TUI application.

    Args:
        path: Metrics table to load.
    """
    from runviz.tui.app import RunvizTUIApp

    app = RunvizTUIApp(path)
    app.run()


__all__ = ["run_tui"]
