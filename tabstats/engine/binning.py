"""Equal-width histogram binning."""

import logging
import math
from collections.abc import Sequence

from pydantic import BaseModel

log = logging.getLogger(__name__)

DISTRIBUTION_MAX_BINS = 20
DISTRIBUTION_LABEL_PRECISION = 2
CHART_MAX_BINS = 10
CHART_LABEL_PRECISION = 1


class HistogramBin(BaseModel):
    start: float
    end: float
    count: int = 0
    label: str


def bin_count_for(n_values: int, max_bins: int) -> int:
    if n_values == 0:
        return 0
    return min(max_bins, math.ceil(math.sqrt(n_values)))


def _label(start: float, end: float, precision: int) -> str:
    return f"{start:.{precision}f}-{end:.{precision}f}"


def histogram_bins(values: Sequence[float], max_bins: int, precision: int) -> list[HistogramBin]:
    """Partition values into [start, end) bins; the last bin also holds the maximum.

    A constant column has no extent to divide, so it gets a single
    zero-width bin holding every value. A spread too wide for a float
    (e.g. -1e308..1e308) is binned on halved values and scaled back.
    """
    n_bins = bin_count_for(len(values), max_bins)
    if n_bins == 0:
        return []

    lo = min(values)
    hi = max(values)
    scale = 1.0 if math.isfinite(hi - lo) else 0.5
    width = (hi * scale - lo * scale) / n_bins
    if hi == lo or width <= 0:
        log.debug("Degenerate extent %s..%s, emitting a single bin", lo, hi)
        return [HistogramBin(start=lo, end=hi, count=len(values), label=_label(lo, hi, precision))]

    bins = []
    for i in range(n_bins):
        start = (lo * scale + i * width) / scale
        end = (lo * scale + (i + 1) * width) / scale
        bins.append(HistogramBin(start=start, end=end, label=_label(start, end, precision)))

    for value in values:
        index = min(int(math.floor((value * scale - lo * scale) / width)), n_bins - 1)
        bins[max(index, 0)].count += 1
    return bins


def bin_values(values: Sequence[float], max_bins: int, precision: int) -> dict[str, int]:
    """Histogram as an ordered label -> count mapping."""
    histogram: dict[str, int] = {}
    for b in histogram_bins(values, max_bins, precision):
        # bins narrower than the label precision share a label
        histogram[b.label] = histogram.get(b.label, 0) + b.count
    return histogram


def distribution_histogram(values: Sequence[float]) -> dict[str, int]:
    return bin_values(values, DISTRIBUTION_MAX_BINS, DISTRIBUTION_LABEL_PRECISION)


def chart_histogram(values: Sequence[float]) -> list[HistogramBin]:
    return histogram_bins(values, CHART_MAX_BINS, CHART_LABEL_PRECISION)
