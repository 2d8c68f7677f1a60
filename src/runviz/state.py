"""
Application state shared by the presentation layers.

Holds the current index, selection and upload outcome. Every upload resets
the whole state before parsing, so readers never see a half-built index.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Any

import polars as pl

from runviz.aggregate import ExperimentIndex, build, summarize
from runviz.exceptions import RunvizError
from runviz.ingest import decode_upload, parse_text
from runviz.logger import logger
from runviz.models import ChartSeries


class AppState:
    """Current index, selection and upload status."""

    def __init__(self) -> None:
        self.index = ExperimentIndex()
        self.selection: list[str] = []
        self.file_name: str | None = None
        self.data_ready = False
        self.error: str | None = None
        self.skipped_rows = 0

    def reset(self) -> None:
        """Discard the index and selection."""
        self.index = ExperimentIndex()
        self.selection = []
        self.file_name = None
        self.data_ready = False
        self.error = None
        self.skipped_rows = 0

    def load_text(self, text: str, file_name: str | None = None) -> ExperimentIndex:
        """Replace the state with a new table.

        Args:
            text: Table text
            file_name: Name shown for the loaded table

        Returns:
            The new index

        Raises:
            FormatError: If the table has no recognizable header
            InvalidNumberError: If a step or value is not numeric under the strict policy
        """
        self.reset()
        self.file_name = file_name

        try:
            result = parse_text(text)
            index = build(result.records)
        except RunvizError as e:
            self.error = str(e)
            logger.warning(f"Failed to load {file_name or 'upload'}: {e}")
            raise

        self.index = index
        self.skipped_rows = len(result.skipped_lines)
        self.data_ready = True
        logger.info(f"Loaded {file_name or 'upload'}: {len(index)} experiments from {len(result.records)} rows")
        return index

    def load_bytes(self, data: bytes, file_name: str | None = None) -> ExperimentIndex:
        """Replace the state with an uploaded table.

        Raises:
            FormatError: If the bytes are not UTF-8 or the table has no header
            InvalidNumberError: If a step or value is not numeric under the strict policy
        """
        try:
            text = decode_upload(data)
        except RunvizError as e:
            self.reset()
            self.file_name = file_name
            self.error = str(e)
            raise
        return self.load_text(text, file_name)

    def load_file(self, path: str | Path) -> ExperimentIndex:
        """Replace the state with a table read from disk."""
        path = Path(path)
        return self.load_bytes(path.read_bytes(), path.name)

    def select(self, experiment_ids: Iterable[str]) -> list[str]:
        """Set the selection.

        Ids unknown to the index are dropped; order is kept and duplicates removed.

        Returns:
            The stored selection
        """
        selection = dict.fromkeys(e for e in experiment_ids if e in self.index)
        self.selection = list(selection)
        return self.selection

    def metric_names(self) -> list[str]:
        """Metric names of the selected experiments."""
        return self.index.metric_names_for(self.selection)

    def series(self, metric_name: str) -> ChartSeries:
        """Chart series of one metric for the selected experiments."""
        return self.index.series_for(self.selection, metric_name)

    def summary(self) -> pl.DataFrame:
        """Summary statistics of the selected experiments."""
        return summarize(self.index, self.selection)

    def to_dict(self) -> dict[str, Any]:
        return {
            "file_name": self.file_name,
            "data_ready": self.data_ready,
            "experiments": self.index.experiment_ids,
            "selection": self.selection,
            "error": self.error,
            "skipped_rows": self.skipped_rows,
        }
