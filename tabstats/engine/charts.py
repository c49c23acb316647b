"""Renderer-agnostic chart payloads."""

import logging

from tabstats.engine.binning import chart_histogram
from tabstats.engine.coercion import numeric_values
from tabstats.engine.correlation import paired_values
from tabstats.engine.inference import infer_column_type
from tabstats.engine.models import ChartData, ChartPayload, ChartSeries, ColumnType, ScatterPoint
from tabstats.engine.profiler import Dataset, column_names, column_values
from tabstats.engine.regression import fit_line

log = logging.getLogger(__name__)

HISTOGRAM_KINDS = ("histogram", "bar")
SCATTER_KIND = "scatter"
CHART_KINDS = (*HISTOGRAM_KINDS, SCATTER_KIND)

_BAR_FILL = "rgba(54, 162, 235, 0.6)"
_BAR_BORDER = "rgba(54, 162, 235, 1)"
_SCATTER_FILL = "rgba(255, 99, 132, 0.6)"
_SCATTER_BORDER = "rgba(255, 99, 132, 1)"


def _histogram_chart(dataset: Dataset, column: str) -> ChartPayload | None:
    values = column_values(dataset, column)
    if infer_column_type(values) != ColumnType.NUMERIC:
        return None
    numbers = numeric_values(values)
    bins = chart_histogram(numbers)
    return ChartPayload(
        type="bar",
        title=f"Distribution of {column}",
        data=ChartData(
            labels=[b.label for b in bins],
            datasets=[
                ChartSeries(
                    label="Frequency",
                    data=[b.count for b in bins],
                    background_color=_BAR_FILL,
                    border_color=_BAR_BORDER,
                )
            ],
        ),
        options={"x_axis": column, "y_axis": "Frequency"},
    )


def _scatter_chart(dataset: Dataset, x_column: str, y_column: str) -> ChartPayload:
    xs, ys = paired_values(dataset, x_column, y_column)
    options: dict = {"x_axis": x_column, "y_axis": y_column}
    trend = fit_line(xs, ys)
    if trend is not None:
        options["trendline"] = trend.model_dump()
    return ChartPayload(
        type="scatter",
        title=f"{x_column} vs {y_column}",
        data=ChartData(
            labels=[f"Point {i + 1}" for i in range(len(xs))],
            datasets=[
                ChartSeries(
                    label="Data Points",
                    data=[ScatterPoint(x=x, y=y) for x, y in zip(xs, ys)],
                    background_color=_SCATTER_FILL,
                    border_color=_SCATTER_BORDER,
                )
            ],
        ),
        options=options,
    )


def build_chart(
    dataset: Dataset,
    kind: str,
    x_column: str | None = None,
    y_column: str | None = None,
) -> ChartPayload | None:
    """Chart payload for ``kind``, or None when it cannot be built.

    Histograms need a numeric ``x_column``; scatter plots need both columns.
    Column names missing from the dataset yield no chart.
    """
    known = column_names(dataset)
    if any(name and name not in known for name in (x_column, y_column)):
        log.debug("Unknown chart column among %s, %s", x_column, y_column)
        return None
    if kind in HISTOGRAM_KINDS:
        if not x_column:
            return None
        return _histogram_chart(dataset, x_column)
    if kind == SCATTER_KIND:
        if not x_column or not y_column:
            return None
        return _scatter_chart(dataset, x_column, y_column)
    log.debug("Unsupported chart kind: %s", kind)
    return None
