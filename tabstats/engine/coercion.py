"""Cell-level coercion of raw, loosely typed values.

Every other engine module sees cells through this module only. A raw cell
becomes one of three variants:

* ``Number`` - a finite decimal value
* ``Text`` - anything else that is present
* ``MISSING`` - ``None``, an absent key, or the empty string

The semantic checks (numeric, boolean-like, date-like) are independent of
each other; a value such as ``"1"`` is both numeric and boolean-like.
Precedence between them is decided per column in ``inference``.
"""

import math
import re
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from dateutil import parser as dateparser

# Plain decimal notation only. Thousands separators, underscores and the
# inf/nan spellings accepted by float() are rejected.
_DECIMAL_RE = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?$")
_ISO_DATE_PREFIX_RE = re.compile(r"^\d{4}-\d{2}-\d{2}")
_BOOLEAN_TOKENS = frozenset({"true", "false", "yes", "no", "1", "0"})
# Fixed fill-in for fields the text leaves out, so day-only strings like
# "31" parse the same way regardless of the current month.
_DATE_DEFAULT = datetime(2000, 1, 1)


@dataclass(frozen=True)
class Number:
    value: float


@dataclass(frozen=True)
class Text:
    value: str


class _Missing:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING = _Missing()

Cell = Number | Text | _Missing


def is_missing(raw: Any) -> bool:
    return raw is None or (isinstance(raw, str) and raw == "")


def _as_text(raw: Any) -> str:
    if isinstance(raw, bool):
        return "true" if raw else "false"
    return str(raw)


def to_number(raw: Any) -> float | None:
    """Parse a cell as a finite decimal number, or return None."""
    if is_missing(raw) or isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        value = float(raw)
        return value if math.isfinite(value) else None
    text = _as_text(raw).strip()
    if not _DECIMAL_RE.match(text):
        return None
    try:
        value = float(text)
    except (ValueError, OverflowError):
        return None
    return value if math.isfinite(value) else None


def coerce(raw: Any) -> Cell:
    if is_missing(raw):
        return MISSING
    number = to_number(raw)
    if number is not None:
        return Number(number)
    return Text(_as_text(raw))


def is_boolean_like(raw: Any) -> bool:
    if is_missing(raw):
        return False
    return _as_text(raw).strip().lower() in _BOOLEAN_TOKENS


def is_date_like(raw: Any) -> bool:
    if is_missing(raw) or isinstance(raw, bool):
        return False
    text = _as_text(raw).strip()
    if not text:
        return False
    if _ISO_DATE_PREFIX_RE.match(text):
        return True
    try:
        dateparser.parse(text, default=_DATE_DEFAULT)
    except (ValueError, OverflowError):
        return False
    return True


def normalize(raw: Any) -> str:
    """String identity of a present cell, used for uniqueness and mode.

    Integral floats collapse onto their integer spelling so that ``5`` and
    ``5.0`` are the same value.
    """
    if isinstance(raw, float) and math.isfinite(raw) and raw.is_integer():
        return str(int(raw))
    return _as_text(raw)


def numeric_values(values: Iterable[Any]) -> list[float]:
    """The ``Number`` cells of a column, in order; everything else is dropped."""
    return [cell.value for cell in map(coerce, values) if isinstance(cell, Number)]
