"""Chart-ready payloads (bar histogram, scatter)."""

from tabstats.analysis import register
from tabstats.analysis.errors import InvalidInputError
from tabstats.analysis.models import AnalysisResult
from tabstats.engine.charts import CHART_KINDS, build_chart
from tabstats.engine.profiler import Dataset


@register("chart")
def chart_analysis(dataset: Dataset, params: dict) -> AnalysisResult:
    chart_type = params.get("chart_type")
    if not chart_type:
        raise InvalidInputError("chart_type is required")
    if chart_type not in CHART_KINDS:
        raise InvalidInputError(
            f"Unsupported chart type: {chart_type}. Available: {', '.join(CHART_KINDS)}"
        )

    x_column = params.get("x_column")
    y_column = params.get("y_column")
    payload = build_chart(dataset, chart_type, x_column, y_column)
    if payload is None:
        raise InvalidInputError(
            f"Unable to generate {chart_type} chart for x_column={x_column!r}, y_column={y_column!r}"
        )

    return AnalysisResult(
        type="chart",
        title=payload.title,
        description=f"{payload.type.capitalize()} chart data ready for rendering",
        data=payload.model_dump(mode="json"),
    )
