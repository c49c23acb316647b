import pytest

from tabstats.engine.binning import (
    bin_count_for,
    bin_values,
    chart_histogram,
    distribution_histogram,
    histogram_bins,
)


def test_bin_count_caps():
    assert bin_count_for(0, 20) == 0
    assert bin_count_for(10, 20) == 4
    assert bin_count_for(500, 20) == 20
    assert bin_count_for(500, 10) == 10


def test_distribution_labels_use_two_decimals():
    histogram = distribution_histogram([float(v) for v in range(9)])
    assert histogram == {"0.00-2.67": 3, "2.67-5.33": 3, "5.33-8.00": 3}


def test_chart_labels_use_one_decimal():
    bins = chart_histogram([float(v) for v in range(9)])
    assert [b.label for b in bins] == ["0.0-2.7", "2.7-5.3", "5.3-8.0"]
    assert [b.count for b in bins] == [3, 3, 3]


def test_half_open_bins_and_max_in_last_bin():
    bins = histogram_bins([float(v) for v in range(1, 11)], 20, 2)
    assert [b.label for b in bins] == ["1.00-3.25", "3.25-5.50", "5.50-7.75", "7.75-10.00"]
    assert [b.count for b in bins] == [3, 2, 2, 3]


@pytest.mark.parametrize(
    "values",
    [
        [0.1, 0.2, 0.3, 0.7, 0.9, 1.1, 5.5],
        [-3.0, -1.5, 0.0, 2.25, 2.25, 9.75],
        [float(v) / 7 for v in range(200)],
    ],
)
def test_every_value_lands_in_exactly_one_bin(values):
    bins = histogram_bins(values, 20, 2)
    assert sum(b.count for b in bins) == len(values)
    assert sum(distribution_histogram(values).values()) == len(values)
    top = max(values)
    assert bins[-1].start <= top
    assert bins[-1].count >= values.count(top)


def test_constant_values_get_a_single_bin():
    assert distribution_histogram([5.0, 5.0, 5.0, 5.0]) == {"5.00-5.00": 4}
    bins = chart_histogram([5.0, 5.0, 5.0, 5.0])
    assert len(bins) == 1
    assert bins[0].count == 4


def test_no_values_no_bins():
    assert histogram_bins([], 20, 2) == []
    assert bin_values([], 10, 1) == {}


def test_spread_wider_than_a_float_still_bins():
    values = [-1e308, 1e308, 0.0, 1.0]
    bins = histogram_bins(values, 20, 2)
    assert [b.count for b in bins] == [1, 3]
    assert bins[0].start == -1e308
    assert bins[1].start == 0.0
    assert bins[-1].end == 1e308
    assert sum(distribution_histogram(values).values()) == 4
