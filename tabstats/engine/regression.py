"""Single-predictor ordinary least squares."""

import logging

import numpy as np
from scipy import stats

from tabstats.engine.correlation import paired_values
from tabstats.engine.models import RegressionResult
from tabstats.engine.profiler import Dataset

log = logging.getLogger(__name__)


def fit_line(xs: list[float], ys: list[float]) -> RegressionResult | None:
    if len(xs) != len(ys) or len(xs) < 2:
        return None
    if len(set(xs)) < 2:
        # slope is undefined for a vertical line
        return None

    x = np.asarray(xs, dtype=float)
    y = np.asarray(ys, dtype=float)
    fit = stats.linregress(x, y)
    slope = float(fit.slope)
    intercept = float(fit.intercept)

    # R² against the fitted line; a constant response is explained exactly
    residual = float(np.sum((y - (slope * x + intercept)) ** 2))
    total = float(np.sum((y - y.mean()) ** 2))
    r_squared = 1.0 if total == 0 else 1.0 - residual / total

    return RegressionResult(slope=slope, intercept=intercept, r_squared=r_squared, n_points=len(xs))


def linear_regression(dataset: Dataset, x_column: str, y_column: str) -> RegressionResult | None:
    xs, ys = paired_values(dataset, x_column, y_column)
    result = fit_line(xs, ys)
    if result is None:
        log.debug("Regression %s -> %s unavailable over %d pairs", x_column, y_column, len(xs))
    return result
