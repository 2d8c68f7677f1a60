"""
Series Chart Widget

Draws one metric of the selected experiments, one colored line per experiment.
"""

from __future__ import annotations

import colorsys
import math

from textual.app import ComposeResult
from textual.widget import Widget
from textual_plotext import PlotextPlot

from runviz.aggregate.colors import LIGHTNESS, SATURATION
from runviz.models import ChartSeries

# Number of step labels shown on the x axis
MAX_XTICKS = 5


def hue_to_rgb(hue: float) -> tuple[int, int, int]:
    """Convert a series hue to the RGB color plotext draws with."""
    r, g, b = colorsys.hls_to_rgb(hue / 360, LIGHTNESS / 100, SATURATION / 100)
    return (round(r * 255), round(g * 255), round(b * 255))


class SeriesChartWidget(Widget):
    """A chart of one metric across the selected experiments.

    Values are placed by position against the shared step labels.
    """

    def __init__(
        self,
        chart: ChartSeries,
        *,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        """Initialize the SeriesChartWidget.

        Args:
            chart: Series to draw.
            name: Widget name.
            id: Widget ID.
            classes: CSS classes.
        """
        super().__init__(name=name, id=id, classes=classes)
        self._chart = chart
        self._plot: PlotextPlot | None = None

    @property
    def metric_name(self) -> str:
        """Get the metric name."""
        return self._chart.metric

    def compose(self) -> ComposeResult:
        """Compose the widget layout."""
        self._plot = PlotextPlot()
        yield self._plot

    def on_mount(self) -> None:
        """Handle mount event - render the chart."""
        self._render_chart()

    def _lines(self) -> list[tuple[str, list[int], list[float], tuple[int, int, int]]]:
        """Drawable points of each experiment, skipping NaN values.

        Returns:
            List of (experiment_id, positions, values, rgb) with at least one point each.
        """
        lines = []
        for entry in self._chart.series:
            positions = [i for i, v in enumerate(entry.values) if not math.isnan(v)]
            if not positions:
                continue
            values = [entry.values[i] for i in positions]
            lines.append((entry.experiment_id, positions, values, hue_to_rgb(entry.hue)))
        return lines

    def _xticks(self) -> tuple[list[int], list[str]]:
        """Evenly spaced step labels for the x axis."""
        labels = self._chart.labels
        if not labels:
            return [], []
        if len(labels) <= MAX_XTICKS:
            positions = list(range(len(labels)))
        else:
            stride = (len(labels) - 1) / (MAX_XTICKS - 1)
            positions = sorted({round(i * stride) for i in range(MAX_XTICKS)})
        return positions, [labels[i] for i in positions]

    def _render_chart(self) -> None:
        """Render the chart with current data."""
        if self._plot is None:
            return

        plt = self._plot.plt
        plt.clear_figure()

        lines = self._lines()
        if not lines:
            plt.title(f"{self.metric_name} (no data)")
            self._plot.refresh()
            return

        plt.title(self.metric_name)
        for experiment_id, positions, values, color in lines:
            plt.plot(positions, values, label=experiment_id, color=color)

        positions, labels = self._xticks()
        if positions:
            plt.xticks(positions, labels)

        self._plot.refresh()
