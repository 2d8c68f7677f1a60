"""
Experiment hierarchy held by the index.

An Experiment owns its Metrics, keyed by name; each Metric owns a step-sorted
sequence of Samples.
"""

import math

from pydantic import BaseModel, Field


class Sample(BaseModel):
    """One (step, value) observation of a metric."""

    step: float
    value: float


def sample_sort_key(sample: Sample) -> tuple[bool, float]:
    """Sort key ordering samples by step, NaN steps last."""
    if math.isnan(sample.step):
        return (True, 0.0)
    return (False, sample.step)


class Metric(BaseModel):
    """A named scalar quantity tracked across steps within one experiment."""

    name: str
    samples: list[Sample] = Field(default_factory=list)

    def sort_samples(self) -> None:
        """Sort samples ascending by step. The sort is stable."""
        self.samples.sort(key=sample_sort_key)

    @property
    def steps(self) -> list[float]:
        return [s.step for s in self.samples]

    @property
    def values(self) -> list[float]:
        return [s.value for s in self.samples]


class Experiment(BaseModel):
    """A named run producing one or more metrics."""

    id: str
    metrics: dict[str, Metric] = Field(default_factory=dict)

    def get_or_create_metric(self, name: str) -> Metric:
        """Get the metric with this name, creating it on first use."""
        metric = self.metrics.get(name)
        if metric is None:
            metric = Metric(name=name)
            self.metrics[name] = metric
        return metric

    @property
    def metric_names(self) -> list[str]:
        return list(self.metrics)
