import math

import pytest

from tabstats.engine.coercion import (
    MISSING,
    Number,
    Text,
    coerce,
    is_boolean_like,
    is_date_like,
    is_missing,
    normalize,
    numeric_values,
    to_number,
)


@pytest.mark.parametrize("raw", [None, ""])
def test_missing_values(raw):
    assert is_missing(raw)
    assert coerce(raw) is MISSING
    assert to_number(raw) is None


def test_whitespace_only_is_present_text():
    assert not is_missing("  ")
    assert coerce("  ") == Text("  ")


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("42", 42.0),
        (" 42 ", 42.0),
        ("-3.5", -3.5),
        ("+.5", 0.5),
        ("1e3", 1000.0),
        (7, 7.0),
        (2.25, 2.25),
    ],
)
def test_to_number_accepts_plain_decimals(raw, expected):
    assert to_number(raw) == expected


@pytest.mark.parametrize("raw", ["1,000", "1_000", "12abc", "abc", "inf", "nan", "-Infinity", True, math.nan])
def test_to_number_rejects_everything_else(raw):
    assert to_number(raw) is None


def test_coerce_variants():
    assert coerce("3") == Number(3.0)
    assert coerce("abc") == Text("abc")
    assert coerce(False) == Text("false")


@pytest.mark.parametrize("raw", ["true", "FALSE", "Yes", "no", "1", "0", 1, 0])
def test_boolean_like(raw):
    assert is_boolean_like(raw)


@pytest.mark.parametrize("raw", ["2", "maybe", "", None, 1.5])
def test_not_boolean_like(raw):
    assert not is_boolean_like(raw)


@pytest.mark.parametrize("raw", ["2024-01-15", "2024-01-15T10:30:00", "1999-12-31 garbage", "March 3, 2021", "15/01/2024"])
def test_date_like(raw):
    assert is_date_like(raw)


@pytest.mark.parametrize("raw", ["hello", "NYC", "abc", "", None])
def test_not_date_like(raw):
    assert not is_date_like(raw)


def test_checks_are_independent():
    assert to_number("1") == 1.0
    assert is_boolean_like("1")


def test_normalize():
    assert normalize(5.0) == "5"
    assert normalize(5) == "5"
    assert normalize(2.5) == "2.5"
    assert normalize("5.0") == "5.0"


def test_numeric_values_keeps_number_cells_in_order():
    assert numeric_values(["3", None, "x", "", " 4.5 ", 7, "1,000"]) == [3.0, 4.5, 7.0]
