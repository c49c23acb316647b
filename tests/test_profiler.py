from tabstats.engine.coercion import is_missing
from tabstats.engine.models import ColumnType
from tabstats.engine.profiler import (
    column_names,
    column_values,
    numeric_columns,
    profile_column,
    profile_dataset,
)


def test_people_scenario(people_rows):
    profile = profile_dataset(people_rows)
    assert profile.total_rows == 3
    assert profile.total_columns == 2

    age, city = profile.columns
    assert age.name == "age"
    assert age.type == ColumnType.MIXED
    assert age.statistics is None
    assert city.type == ColumnType.STRING
    assert city.unique_count == 2
    assert city.sample_values == ["NYC", "LA"]


def test_column_order_follows_first_row():
    rows = [{"b": "1", "a": "2"}, {"a": "3", "b": "4"}]
    assert column_names(rows) == ["b", "a"]


def test_empty_dataset():
    profile = profile_dataset([])
    assert profile.total_rows == 0
    assert profile.total_columns == 0
    assert profile.columns == []


def test_null_count_plus_present_equals_rows():
    rows = [
        {"a": "1", "b": "x"},
        {"a": None, "b": ""},
        {"a": "", "b": "y"},
        {"b": "z"},
    ]
    for name in column_names(rows):
        col = profile_column(rows, name)
        present = sum(1 for v in column_values(rows, name) if not is_missing(v))
        assert col.null_count + present == len(rows)
    assert profile_column(rows, "a").null_count == 3


def test_sample_values_first_five_distinct_in_order():
    rows = [{"c": v} for v in ["e", "d", "e", None, "c", "b", "a", "z", "d"]]
    col = profile_column(rows, "c")
    assert col.sample_values == ["e", "d", "c", "b", "a"]
    assert col.unique_count == 6


def test_numeric_column_carries_statistics(mixed_rows):
    col = profile_column(mixed_rows, "score")
    assert col.type == ColumnType.NUMERIC
    assert col.null_count == 1
    assert col.statistics.count == 5
    assert col.statistics.max == 4.8


def test_statistics_ignore_the_odd_non_numeric_cell():
    rows = [{"v": v} for v in ["1", "2", "3", "4", "5", "6", "oops"]]
    col = profile_column(rows, "v")
    assert col.type == ColumnType.NUMERIC
    assert col.statistics.count == 7
    assert col.statistics.mean == 3.5


def test_numeric_columns(mixed_rows):
    assert numeric_columns(mixed_rows) == ["id", "score", "height"]


def test_rows_are_not_mutated(mixed_rows):
    snapshot = [dict(r) for r in mixed_rows]
    profile_dataset(mixed_rows)
    assert mixed_rows == snapshot
