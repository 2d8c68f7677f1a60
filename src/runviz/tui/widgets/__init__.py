"""
Runviz TUI Widgets

Custom widget classes for the TUI application.
"""

from .series_chart import SeriesChartWidget, hue_to_rgb

__all__ = ["SeriesChartWidget", "hue_to_rgb"]
