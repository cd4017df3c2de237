"""Lenient numeric coercion shared by the parsers and the aggregator."""

from __future__ import annotations

import math
import re

NAN = float("nan")

# Plain decimal or exponent notation, ASCII digits only
_NUMBER_PATTERN = re.compile(
    r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|[+-]?Infinity", re.ASCII
)


def to_number(text: str | None) -> float:
    """Coerce text to a float the way a lenient reader would.

    Surrounding whitespace is ignored and blank text counts as 0.
    Anything that is not a number becomes NaN instead of raising,
    including text float() would take such as "1_000" or "inf".
    """
    if text is None:
        return NAN
    text = text.strip()
    if not text:
        return 0.0
    if not _NUMBER_PATTERN.fullmatch(text):
        return NAN
    return float(text)


def round_half_up(value: float) -> int | float:
    """Round to the nearest integer, ties towards +inf. NaN passes through."""
    if not math.isfinite(value):
        return value
    return math.floor(value + 0.5)


def is_nan(value: float) -> bool:
    return isinstance(value, float) and math.isnan(value)


def format_number(value: float) -> str:
    """Render a value for reports: integers without a fraction, NaN as 'NaN'."""
    if is_nan(value):
        return "NaN"
    if float(value).is_integer():
        return str(int(value))
    return f"{value:g}"


def json_value(value):
    """NaN becomes None so JSON output stays strict; other values pass."""
    return None if is_nan(value) else value
