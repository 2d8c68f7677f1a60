"""
Aggregation of measurement records into the experiment index.

The index groups samples by experiment and metric and answers the chart
queries used by the presentation layers.
"""

from .colors import HUE_STEP, series_color, series_hue
from .index import ExperimentIndex, build
from .summary import SUMMARY_SCHEMA, summarize

__all__ = [
    "HUE_STEP",
    "SUMMARY_SCHEMA",
    "ExperimentIndex",
    "build",
    "series_color",
    "series_hue",
    "summarize",
]
