from __future__ import annotations
import math


def safe_divide(numerator: float, denominator: float) -> float:
    """Divide like IEEE floats do: x/0 is +/-inf and 0/0 is nan, never an exception."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def round_half_up(value: float) -> int | float:
    """Round to the nearest integer, halves away from -inf. Non-finite values pass through."""
    if not math.isfinite(value):
        return value
    return int(math.floor(value + 0.5))


def round_to_tenth(value: float) -> float:
    if not math.isfinite(value):
        return value
    return math.floor(value * 10 + 0.5) / 10


def format_number(value: float) -> str:
    """Render integral floats without a trailing '.0'."""
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return str(int(value))
    return str(value)
