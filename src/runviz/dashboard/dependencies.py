"""
FastAPI dependency injection for the runviz dashboard.

This module provides the process-wide AppState shared by all routes.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends

from runviz.state import AppState

# One state per process; replaced wholesale by configure_app_state()
_app_state: list[AppState] = [AppState()]


def get_app_state() -> AppState:
    """Get the AppState instance."""
    return _app_state[0]


def configure_app_state(state: AppState | None = None) -> AppState:
    """Install a new AppState.

    Args:
        state: State to install. If None, installs a fresh empty state.

    Returns:
        The installed state.
    """
    _app_state[0] = state if state is not None else AppState()
    return _app_state[0]


AppStateDep = Annotated[AppState, Depends(get_app_state)]
