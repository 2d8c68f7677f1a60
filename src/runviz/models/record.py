"""
Raw measurement record produced by ingestion.

Numeric fields stay textual here; conversion happens when the index is built.
"""

from pydantic import BaseModel, Field


class MeasurementRecord(BaseModel):
    """One data row of an uploaded table, looked up by header name."""

    experiment_id: str = Field(..., description="Experiment (run) identifier")
    metric_name: str = Field(..., description="Metric name")
    step: str = Field(..., description="Step as written in the source")
    value: str = Field(..., description="Value as written in the source")
    line: int | None = Field(default=None, description="1-based source line number (optional)")

    def __str__(self) -> str:
        """String representation of the measurement record."""
        return f"MeasurementRecord(experiment_id={self.experiment_id}, metric_name={self.metric_name}, step={self.step!r}, value={self.value!r})"
