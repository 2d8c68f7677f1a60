"""
Runviz data models package.

This package contains the data models shared by ingestion, aggregation and
the presentation layers.
"""

from runviz.models.entities import Experiment, Metric, Sample
from runviz.models.record import MeasurementRecord
from runviz.models.series import ChartSeries, SeriesEntry

__all__ = [
    "ChartSeries",
    "Experiment",
    "MeasurementRecord",
    "Metric",
    "Sample",
    "SeriesEntry",
]
