"""
Per-metric summary statistics.

Summaries are computed with Polars over the index's long-format frame.
"""

from __future__ import annotations

from collections.abc import Iterable

import polars as pl

from .index import ExperimentIndex

SUMMARY_SCHEMA = {
    "experiment_id": pl.Utf8,
    "metric_name": pl.Utf8,
    "count": pl.UInt32,
    "first_step": pl.Float64,
    "last_step": pl.Float64,
    "min": pl.Float64,
    "max": pl.Float64,
    "last": pl.Float64,
}


def summarize(index: ExperimentIndex, selected: Iterable[str] | None = None) -> pl.DataFrame:
    """Summarize every (experiment, metric) pair of the index.

    Samples are already step-sorted, so first/last follow step order and
    ``last`` is the value at the greatest step. Samples with a NaN step sort
    last and are left out of ``last_step`` and ``last``; both are null when
    no step of the pair is numeric.

    Args:
        index: Index to summarize
        selected: Optional experiment ids to restrict the summary to.
                  Unknown ids are ignored.

    Returns:
        DataFrame with one row per (experiment, metric) in index order and
        columns: experiment_id, metric_name, count, first_step, last_step,
        min, max, last
    """
    df = index.to_frame()
    if selected is not None:
        df = df.filter(pl.col("experiment_id").is_in(list(selected)))

    if len(df) == 0:
        return pl.DataFrame(schema=SUMMARY_SCHEMA)

    numeric_step = pl.col("step").is_not_nan()
    return (
        df.group_by(["experiment_id", "metric_name"], maintain_order=True)
        .agg(
            pl.len().cast(pl.UInt32).alias("count"),
            pl.col("step").first().alias("first_step"),
            pl.col("step").filter(numeric_step).last().alias("last_step"),
            pl.col("value").min().alias("min"),
            pl.col("value").max().alias("max"),
            pl.col("value").filter(numeric_step).last().alias("last"),
        )
        .select(list(SUMMARY_SCHEMA))
    )
