"""
ExperimentIndex - in-memory index of experiments, metrics and samples.

The index is built once per uploaded table and never updated in place;
a new upload builds a new index.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

import polars as pl

from runviz.config import NumericPolicy, get_settings
from runviz.models import ChartSeries, Experiment, MeasurementRecord, Metric, Sample, SeriesEntry
from runviz.utils import format_step, parse_number

from .colors import series_color, series_hue

__all__ = ["ExperimentIndex", "build"]


class ExperimentIndex:
    """Mapping from experiment id to Experiment, in first-seen order.

    Query methods are pure reads: they never mutate the index.
    """

    def __init__(self, experiments: dict[str, Experiment] | None = None) -> None:
        self._experiments: dict[str, Experiment] = experiments if experiments is not None else {}

    def __len__(self) -> int:
        return len(self._experiments)

    def __contains__(self, experiment_id: object) -> bool:
        return experiment_id in self._experiments

    def __iter__(self) -> Iterator[str]:
        return iter(self._experiments)

    def __repr__(self) -> str:
        return f"ExperimentIndex(experiments={list(self._experiments)})"

    def get(self, experiment_id: str) -> Experiment | None:
        """Get an experiment by id, or None if unknown."""
        return self._experiments.get(experiment_id)

    @property
    def experiment_ids(self) -> list[str]:
        """Experiment ids in first-seen order."""
        return list(self._experiments)

    @property
    def experiments(self) -> list[Experiment]:
        return list(self._experiments.values())

    def get_metric(self, experiment_id: str, metric_name: str) -> Metric | None:
        """Get one experiment's metric, or None if either is unknown."""
        experiment = self._experiments.get(experiment_id)
        if experiment is None:
            return None
        return experiment.metrics.get(metric_name)

    def metric_names_for(self, selected: Iterable[str]) -> list[str]:
        """Union of the metric names of the selected experiments.

        Unknown experiment ids are ignored.

        Args:
            selected: Selected experiment ids

        Returns:
            Metric names without duplicates, in order of first appearance
        """
        names: dict[str, None] = {}
        for experiment_id in selected:
            experiment = self._experiments.get(experiment_id)
            if experiment is None:
                continue
            for name in experiment.metrics:
                names.setdefault(name, None)
        return list(names)

    def series_for(self, selected: Sequence[str], metric_name: str) -> ChartSeries:
        """Project the selection onto one metric's chart.

        Each selected experiment gets one entry, in selection order, with its
        values in step order. An experiment without this metric (or unknown to
        the index) gets an empty entry.

        Labels are the steps of the first selected experiment that has samples
        for the metric; all experiments on the chart are assumed to share that
        step axis.

        Args:
            selected: Selected experiment ids, in display order
            metric_name: Metric to chart

        Returns:
            ChartSeries for the metric
        """
        labels: list[str] = []
        entries: list[SeriesEntry] = []

        for i, experiment_id in enumerate(selected):
            metric = self.get_metric(experiment_id, metric_name)
            samples = metric.samples if metric is not None else []

            if not labels and samples:
                labels = [format_step(s.step) for s in samples]

            entries.append(
                SeriesEntry(
                    experiment_id=experiment_id,
                    values=[s.value for s in samples],
                    hue=series_hue(i),
                    color=series_color(i),
                )
            )

        return ChartSeries(metric=metric_name, labels=labels, series=entries)

    def to_frame(self) -> pl.DataFrame:
        """Flatten the index into a long-format DataFrame.

        Returns:
            Polars DataFrame with schema:
            - experiment_id: Utf8
            - metric_name: Utf8
            - step: Float64
            - value: Float64
        """
        rows = [
            {
                "experiment_id": experiment.id,
                "metric_name": metric.name,
                "step": sample.step,
                "value": sample.value,
            }
            for experiment in self._experiments.values()
            for metric in experiment.metrics.values()
            for sample in metric.samples
        ]
        return pl.DataFrame(
            rows,
            schema={
                "experiment_id": pl.Utf8,
                "metric_name": pl.Utf8,
                "step": pl.Float64,
                "value": pl.Float64,
            },
        )


def build(records: Iterable[MeasurementRecord], policy: NumericPolicy | None = None) -> ExperimentIndex:
    """Group measurement records into an index.

    Records are consumed in input order. Repeated (experiment, metric) pairs
    append to the same metric; samples sharing a step are all kept. Once every
    record is consumed, each metric's samples are sorted by step (stable).

    Args:
        records: Parsed measurement records
        policy: Numeric policy for step/value. Defaults to the configured policy.

    Returns:
        A new ExperimentIndex

    Raises:
        InvalidNumberError: If a step or value is not numeric under the strict policy
    """
    if policy is None:
        policy = get_settings().numeric_policy

    experiments: dict[str, Experiment] = {}
    for record in records:
        experiment = experiments.get(record.experiment_id)
        if experiment is None:
            experiment = Experiment(id=record.experiment_id)
            experiments[record.experiment_id] = experiment

        metric = experiment.get_or_create_metric(record.metric_name)
        metric.samples.append(
            Sample(
                step=parse_number(record.step, policy, field="step", line=record.line),
                value=parse_number(record.value, policy, field="value", line=record.line),
            )
        )

    for experiment in experiments.values():
        for metric in experiment.metrics.values():
            metric.sort_samples()

    return ExperimentIndex(experiments)
