"""
Chart-ready series returned by index queries.

Note: NaN values are serialized as null by model_dump_json.
"""

from pydantic import BaseModel, Field


class SeriesEntry(BaseModel):
    """Values of one experiment on one chart."""

    experiment_id: str
    values: list[float] = Field(default_factory=list)
    hue: float = Field(..., description="Hue in degrees, from the experiment's position in the selection")
    color: str = Field(..., description="CSS hsl() color")


class ChartSeries(BaseModel):
    """One metric's chart: shared x-axis labels plus one entry per selected experiment."""

    metric: str
    labels: list[str] = Field(default_factory=list)
    series: list[SeriesEntry] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        """True when no selected experiment has samples for this metric."""
        return not any(entry.values for entry in self.series)
