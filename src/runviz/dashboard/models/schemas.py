"""
Request and response models for the dashboard API.
"""

from pydantic import BaseModel, Field

__all__ = [
    "SelectionRequest",
    "SelectionResponse",
    "StateResponse",
    "SummaryResponse",
    "SummaryRow",
]


class StateResponse(BaseModel):
    """Current upload and selection state."""

    file_name: str | None = None
    data_ready: bool = False
    experiments: list[str] = []
    selection: list[str] = []
    error: str | None = None
    skipped_rows: int = 0


class SelectionRequest(BaseModel):
    """Request model for replacing the selection."""

    experiments: list[str] = Field(default_factory=list)


class SelectionResponse(BaseModel):
    """Stored selection and the metrics to chart for it."""

    selection: list[str]
    metrics: list[str]


class SummaryRow(BaseModel):
    """Statistics of one experiment's metric."""

    experiment_id: str
    metric_name: str
    count: int
    first_step: float | None
    last_step: float | None
    min: float | None
    max: float | None
    last: float | None


class SummaryResponse(BaseModel):
    rows: list[SummaryRow]
