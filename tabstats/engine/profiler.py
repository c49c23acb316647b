"""Per-column and whole-dataset profiles."""

from collections.abc import Mapping, Sequence
from typing import Any

from tabstats.engine.coercion import MISSING, coerce, normalize
from tabstats.engine.descriptive import summarize
from tabstats.engine.inference import infer_column_type
from tabstats.engine.models import ColumnProfile, ColumnType, DatasetProfile

Row = Mapping[str, Any]
Dataset = Sequence[Row]

MAX_SAMPLE_VALUES = 5


def column_names(dataset: Dataset) -> list[str]:
    """Columns in the key order of the first row."""
    if not dataset:
        return []
    return list(dataset[0].keys())


def column_values(dataset: Dataset, name: str) -> list[Any]:
    return [row.get(name) for row in dataset]


def profile_column(dataset: Dataset, name: str) -> ColumnProfile:
    values = column_values(dataset, name)
    column_type = infer_column_type(values)

    distinct: dict[str, Any] = {}
    non_missing = 0
    for value in values:
        if coerce(value) is MISSING:
            continue
        non_missing += 1
        distinct.setdefault(normalize(value), value)

    return ColumnProfile(
        name=name,
        type=column_type,
        null_count=len(values) - non_missing,
        unique_count=len(distinct),
        sample_values=list(distinct.values())[:MAX_SAMPLE_VALUES],
        statistics=summarize(values) if column_type == ColumnType.NUMERIC else None,
    )


def profile_dataset(dataset: Dataset) -> DatasetProfile:
    names = column_names(dataset)
    return DatasetProfile(
        total_rows=len(dataset),
        total_columns=len(names),
        columns=[profile_column(dataset, name) for name in names],
    )


def numeric_columns(dataset: Dataset) -> list[str]:
    return [
        name for name in column_names(dataset)
        if infer_column_type(column_values(dataset, name)) == ColumnType.NUMERIC
    ]
