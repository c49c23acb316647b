"""Pairwise Pearson correlation across numeric columns."""

import logging
import math
from collections.abc import Sequence

import numpy as np
from scipy import stats

from tabstats.engine.coercion import Number, coerce
from tabstats.engine.profiler import Dataset

log = logging.getLogger(__name__)


def paired_values(dataset: Dataset, x: str, y: str) -> tuple[list[float], list[float]]:
    """Numeric (x, y) values from rows where both cells are numeric.

    Rows are kept or dropped as a whole so each pair stays on its own row.
    """
    xs: list[float] = []
    ys: list[float] = []
    for row in dataset:
        x_cell = coerce(row.get(x))
        y_cell = coerce(row.get(y))
        if not (isinstance(x_cell, Number) and isinstance(y_cell, Number)):
            continue
        xs.append(x_cell.value)
        ys.append(y_cell.value)
    return xs, ys


def pearson(xs: Sequence[float], ys: Sequence[float]) -> float | None:
    """Sample Pearson r, or None when undefined (short, unequal or constant input)."""
    if len(xs) != len(ys) or len(xs) < 2:
        return None
    x = np.asarray(xs, dtype=float)
    y = np.asarray(ys, dtype=float)
    if np.all(x == x[0]) or np.all(y == y[0]):
        return None
    r, _ = stats.pearsonr(x, y)
    r = float(r)
    if not math.isfinite(r):
        return None
    return max(-1.0, min(1.0, r))


def correlation_coefficient(dataset: Dataset, a: str, b: str) -> float:
    if a == b:
        return 1.0
    # r is symmetric; a fixed argument order keeps matrix[a][b] == matrix[b][a] exactly
    first, second = sorted((a, b))
    xs, ys = paired_values(dataset, first, second)
    r = pearson(xs, ys)
    if r is None:
        log.debug("Correlation %s/%s undefined over %d pairs, using 0", a, b, len(xs))
        return 0.0
    return r


def correlation_matrix(dataset: Dataset, columns: Sequence[str]) -> dict[str, dict[str, float]]:
    return {
        a: {b: correlation_coefficient(dataset, a, b) for b in columns}
        for a in columns
    }
