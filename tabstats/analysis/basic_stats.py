"""Dataset overview: column types, null/unique counts and numeric statistics."""

import logging

from tabstats.analysis import register
from tabstats.analysis.models import AnalysisResult
from tabstats.engine.models import ColumnType
from tabstats.engine.profiler import Dataset, profile_dataset

log = logging.getLogger(__name__)


@register("basic_stats")
def basic_stats_analysis(dataset: Dataset, params: dict) -> AnalysisResult:
    if params.get("columns"):
        # TODO: restrict the profile to params["columns"]; the full dataset is profiled for now
        log.debug("Column filter %s ignored, profiling every column", params["columns"])

    profile = profile_dataset(dataset)
    numeric = [c for c in profile.columns if c.type == ColumnType.NUMERIC]
    categorical = [c for c in profile.columns if c.type == ColumnType.STRING]

    summary = {
        "dataset": profile.model_dump(mode="json"),
        "numeric_columns": [
            {"name": c.name, "statistics": c.statistics.model_dump(mode="json") if c.statistics else None}
            for c in numeric
        ],
        "categorical_columns": [
            {
                "name": c.name,
                "unique_count": c.unique_count,
                "null_count": c.null_count,
                "sample_values": c.sample_values,
            }
            for c in categorical
        ],
    }

    return AnalysisResult(
        type="basic_stats",
        title="Basic Statistics Summary",
        description="Overview of dataset structure and basic statistics for all columns",
        data=summary,
    )
