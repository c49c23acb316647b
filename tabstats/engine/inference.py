"""Column type inference by majority vote over coerced values."""

from collections.abc import Iterable
from typing import Any

from tabstats.engine.coercion import MISSING, Number, coerce, is_boolean_like, is_date_like
from tabstats.engine.models import ColumnType

MAJORITY_THRESHOLD = 0.8
MIXED_THRESHOLD = 0.3


def infer_column_type(values: Iterable[Any]) -> ColumnType:
    cells = [(v, coerce(v)) for v in values]
    present = [(v, cell) for v, cell in cells if cell is not MISSING]
    if not present:
        return ColumnType.STRING

    total = len(present)
    numeric_ratio = sum(1 for _, cell in present if isinstance(cell, Number)) / total
    date_ratio = sum(1 for v, _ in present if is_date_like(v)) / total
    boolean_ratio = sum(1 for v, _ in present if is_boolean_like(v)) / total

    if numeric_ratio > MAJORITY_THRESHOLD:
        return ColumnType.NUMERIC
    if date_ratio > MAJORITY_THRESHOLD:
        return ColumnType.DATE
    if boolean_ratio > MAJORITY_THRESHOLD:
        return ColumnType.BOOLEAN
    if max(numeric_ratio, date_ratio, boolean_ratio) > MIXED_THRESHOLD:
        return ColumnType.MIXED
    return ColumnType.STRING
