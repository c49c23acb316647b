from enum import Enum
from typing import Any

from pydantic import BaseModel


class ColumnType(str, Enum):
    NUMERIC = "numeric"
    STRING = "string"
    DATE = "date"
    BOOLEAN = "boolean"
    MIXED = "mixed"


class Quartiles(BaseModel):
    q1: float
    q2: float
    q3: float


class StatisticalSummary(BaseModel):
    count: int
    mean: float | None = None
    median: float | None = None
    mode: Any = None
    std_dev: float | None = None
    min: float | None = None
    max: float | None = None
    range: float | None = None
    quartiles: Quartiles | None = None


class ColumnProfile(BaseModel):
    name: str
    type: ColumnType
    null_count: int
    unique_count: int
    sample_values: list[Any] = []
    statistics: StatisticalSummary | None = None


class DatasetProfile(BaseModel):
    total_rows: int
    total_columns: int
    columns: list[ColumnProfile] = []


class RegressionResult(BaseModel):
    slope: float
    intercept: float
    r_squared: float
    n_points: int


# ── Chart payloads ──


class ScatterPoint(BaseModel):
    x: float
    y: float


class ChartSeries(BaseModel):
    label: str
    data: list[int] | list[ScatterPoint]
    background_color: str | None = None
    border_color: str | None = None


class ChartData(BaseModel):
    labels: list[str] = []
    datasets: list[ChartSeries] = []


class ChartPayload(BaseModel):
    type: str
    title: str
    data: ChartData
    options: dict[str, Any] = {}
