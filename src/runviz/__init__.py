"""
Runviz - Line charts of experiment metrics from a single uploaded table.

Examples:
    >>> import runviz
    >>> index = runviz.build(runviz.parse(open("metrics.csv").read()))
    >>> index.metric_names_for(["run1", "run2"])
    ['loss']
    >>> chart = index.series_for(["run1", "run2"], "loss")
"""

from runviz.aggregate import ExperimentIndex, build, series_color, series_hue, summarize
from runviz.exceptions import FormatError, InvalidNumberError, RunvizError
from runviz.ingest import parse, parse_text
from runviz.state import AppState

__version__ = "0.1.0"
__all__ = [
    "AppState",
    "ExperimentIndex",
    "FormatError",
    "InvalidNumberError",
    "RunvizError",
    "build",
    "parse",
    "parse_text",
    "series_color",
    "series_hue",
    "summarize",
]
