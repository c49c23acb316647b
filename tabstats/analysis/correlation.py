"""Correlation matrix across all numeric columns."""

import logging

from tabstats.analysis import register
from tabstats.analysis.models import AnalysisResult
from tabstats.engine.correlation import correlation_matrix
from tabstats.engine.profiler import Dataset, numeric_columns

log = logging.getLogger(__name__)


@register("correlation")
def correlation_analysis(dataset: Dataset, params: dict) -> AnalysisResult:
    columns = numeric_columns(dataset)

    if len(columns) < 2:
        log.debug("Only %d numeric column(s), skipping correlation", len(columns))
        return AnalysisResult(
            type="correlation",
            title="Correlation Analysis",
            description="Not enough numeric columns for correlation analysis",
            data={"message": "At least 2 numeric columns required for correlation analysis"},
        )

    return AnalysisResult(
        type="correlation",
        title="Correlation Analysis",
        description="Correlation matrix for all numeric columns",
        data={
            "matrix": correlation_matrix(dataset, columns),
            "columns": columns,
        },
    )
