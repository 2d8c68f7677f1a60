"""
Runviz TUI Screens
"""

from .explorer import ExplorerScreen
from .summary import SummaryScreen

__all__ = ["ExplorerScreen", "SummaryScreen"]
