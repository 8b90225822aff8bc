"""Numeric helpers shared by the scoring services.

Rounding goes through ``decimal.Decimal`` so that half values round away from
zero the way the browser calculator always displayed them, rather than with
Python's banker's rounding (``round(2.5) == 2``).
"""

from __future__ import annotations

from decimal import Decimal, ROUND_HALF_UP, ROUND_DOWN, ROUND_UP, ROUND_HALF_EVEN
from typing import TypeVar

__all__ = [
    "clamp",
    "safe_round",
    "round_half_up",
    "safe_div",
]


NumericT = TypeVar("NumericT", int, float, Decimal)

_ROUNDING_METHODS = {
    "half_up": ROUND_HALF_UP,
    "down": ROUND_DOWN,
    "up": ROUND_UP,
    "half_even": ROUND_HALF_EVEN,
}


def clamp(value: NumericT, min_value: NumericT, max_value: NumericT) -> NumericT:
    """Clamp a numeric value to be within the specified range.

    Example:
        >>> clamp(150, 0, 100)
        100
        >>> clamp(-5, 0, 100)
        0
    """
    if min_value > max_value:
        raise ValueError(f"min_value ({min_value}) must be <= max_value ({max_value})")
    return max(min_value, min(value, max_value))


def safe_round(value: float, decimals: int = 2, method: str = "half_up") -> float:
    """Round a float with controlled precision and rounding method.

    Example:
        >>> safe_round(2.555, 2)
        2.56
        >>> safe_round(2.125, 2, "half_even")
        2.12
    """
    if method not in _ROUNDING_METHODS:
        raise ValueError(f"Invalid rounding method: {method}. Use 'half_up', 'down', 'up', or 'half_even'.")

    quantizer = Decimal(10) ** -decimals
    rounded = Decimal(str(value)).quantize(quantizer, rounding=_ROUNDING_METHODS[method])
    return float(rounded)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up.

    Example:
        >>> round_half_up(94.5)
        95
        >>> round_half_up(2.4999)
        2
    """
    return int(safe_round(value, decimals=0, method="half_up"))


def safe_div(numerator: float, denominator: float, default: float = 0.0) -> float:
    """Perform division with protection against division by zero.

    Example:
        >>> safe_div(10, 2)
        5.0
        >>> safe_div(10, 0)
        0.0
    """
    if denominator == 0:
        return default
    return numerator / denominator
