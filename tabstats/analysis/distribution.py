"""Histogram and summary statistics for one numeric column."""

from tabstats.analysis import register, require_column
from tabstats.analysis.models import AnalysisResult
from tabstats.engine.binning import distribution_histogram
from tabstats.engine.coercion import numeric_values
from tabstats.engine.models import ColumnType
from tabstats.engine.profiler import Dataset, column_values, profile_column

_VALUE_SAMPLE_SIZE = 100


@register("distribution")
def distribution_analysis(dataset: Dataset, params: dict) -> AnalysisResult:
    column = require_column(dataset, params, "column")
    title = f"Distribution Analysis - {column}"

    profile = profile_column(dataset, column)
    if profile.type != ColumnType.NUMERIC:
        return AnalysisResult(
            type="distribution",
            title=title,
            description="Distribution analysis is only available for numeric columns",
            data={"message": "Column must be numeric for distribution analysis"},
        )

    values = numeric_values(column_values(dataset, column))

    return AnalysisResult(
        type="distribution",
        title=title,
        description=f"Histogram and distribution statistics for {column}",
        data={
            "column": column,
            "statistics": profile.statistics.model_dump(mode="json"),
            "histogram": distribution_histogram(values),
            "values": values[:_VALUE_SAMPLE_SIZE],
        },
    )
