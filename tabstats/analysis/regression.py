"""Least-squares line between two numeric columns."""

from tabstats.analysis import register, require_column
from tabstats.analysis.models import AnalysisResult
from tabstats.engine.profiler import Dataset
from tabstats.engine.regression import linear_regression


@register("regression")
def regression_analysis(dataset: Dataset, params: dict) -> AnalysisResult:
    x_column = require_column(dataset, params, "x_column")
    y_column = require_column(dataset, params, "y_column")
    title = f"Linear Regression - {y_column} on {x_column}"

    result = linear_regression(dataset, x_column, y_column)
    if result is None:
        return AnalysisResult(
            type="regression",
            title=title,
            description="Not enough paired numeric values to fit a line",
            data={"message": "At least 2 rows with numeric, non-constant x values are required"},
        )

    return AnalysisResult(
        type="regression",
        title=title,
        description=f"Ordinary least squares fit of {y_column} = slope * {x_column} + intercept",
        data={"x_column": x_column, "y_column": y_column, **result.model_dump()},
    )
