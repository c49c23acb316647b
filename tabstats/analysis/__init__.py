import importlib
import logging
import time
from collections.abc import Callable, Mapping
from datetime import datetime, timezone
from typing import Any

from tabstats.analysis.errors import InvalidInputError
from tabstats.analysis.models import AnalysisMetadata, AnalysisResult
from tabstats.engine.profiler import Dataset, column_names

log = logging.getLogger(__name__)

_REGISTRY: dict[str, Callable[[Dataset, dict], AnalysisResult]] = {}

# All analysis module names, imported at bottom to auto-register
_MODULES = [
    "tabstats.analysis.basic_stats",
    "tabstats.analysis.correlation",
    "tabstats.analysis.distribution",
    "tabstats.analysis.chart",
    "tabstats.analysis.regression",
]


def register(name: str):
    """Decorator to register an analysis function."""

    def decorator(fn):
        _REGISTRY[name] = fn
        return fn

    return decorator


def available_analyses() -> list[str]:
    return sorted(_REGISTRY)


def require_column(dataset: Dataset, params: Mapping[str, Any], key: str) -> str:
    """Fetch a required column-name parameter and check the dataset has it."""
    name = params.get(key)
    if not name:
        raise InvalidInputError(f"{key} is required")
    if name not in column_names(dataset):
        raise InvalidInputError(f"Unknown column: {name}")
    return name


def validate_dataset(data: Any) -> Dataset:
    if data is None:
        raise InvalidInputError("data is required")
    if isinstance(data, (str, bytes)) or not isinstance(data, (list, tuple)):
        raise InvalidInputError("data must be a list of rows")
    for index, row in enumerate(data):
        if not isinstance(row, Mapping):
            raise InvalidInputError(f"Row {index} is not an object of column -> value")
    return data


def run_analysis(analysis_type: str, data: Any, params: dict | None = None) -> AnalysisResult:
    """Dispatch to the registered analysis function and stamp execution metadata."""
    fn = _REGISTRY.get(analysis_type)
    if not fn:
        raise InvalidInputError(
            f"Unknown analysis type: {analysis_type}. "
            f"Available: {', '.join(available_analyses())}"
        )
    dataset = validate_dataset(data)
    params = dict(params or {})

    log.info("Running analysis: %s with params %s", analysis_type, params)
    t0 = time.perf_counter()
    result = fn(dataset, params)
    elapsed_ms = (time.perf_counter() - t0) * 1000

    result.metadata = AnalysisMetadata(
        execution_time_ms=round(elapsed_ms, 3),
        timestamp=datetime.now(timezone.utc).isoformat(),
        parameters=params,
    )
    log.info("Analysis %s finished in %.1f ms (%d rows)", analysis_type, elapsed_ms, len(dataset))
    return result


# Auto-import modules to trigger @register decorators
for _mod in _MODULES:
    importlib.import_module(_mod)
