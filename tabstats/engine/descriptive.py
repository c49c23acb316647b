"""Descriptive statistics for a single column."""

from collections import Counter
from collections.abc import Iterable
from typing import Any

import numpy as np

from tabstats.engine.coercion import MISSING, coerce, normalize, numeric_values
from tabstats.engine.models import Quartiles, StatisticalSummary


def mode_of(values: Iterable[Any]) -> Any:
    """Most frequent present value, compared by normalized string form.

    Ties go to the key that appeared first in the column; the returned value
    is the first original cell seen for that key.
    """
    counts: Counter[str] = Counter()
    first_seen: dict[str, Any] = {}
    for value in values:
        if coerce(value) is MISSING:
            continue
        key = normalize(value)
        counts[key] += 1
        first_seen.setdefault(key, value)
    if not counts:
        return None
    # most_common keeps first-encountered order among equal counts
    key, _ = counts.most_common(1)[0]
    return first_seen[key]


def summarize(values: Iterable[Any]) -> StatisticalSummary:
    present = [v for v in values if coerce(v) is not MISSING]
    summary = StatisticalSummary(count=len(present))
    if not present:
        return summary

    summary.mode = mode_of(present)

    numbers = numeric_values(present)
    if not numbers:
        return summary

    arr = np.asarray(numbers, dtype=float)
    q1, q2, q3 = (float(q) for q in np.percentile(arr, [25, 50, 75], method="linear"))
    lo = float(arr.min())
    hi = float(arr.max())

    summary.mean = float(arr.mean())
    summary.median = q2
    summary.std_dev = float(arr.std(ddof=1)) if arr.size >= 2 else None
    summary.min = lo
    summary.max = hi
    summary.range = hi - lo
    summary.quartiles = Quartiles(q1=q1, q2=q2, q3=q3)
    return summary
