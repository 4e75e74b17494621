"""
Mathematical utility functions for the control loop and the steppers.
"""

from typing import TypeVar

T = TypeVar("T")


def clamp(value: T, lower: T, upper: T) -> T:
    """
    Clamp a value between strictly ordered bounds.

    Works for any type with ordering comparisons. ``lower < upper`` is a
    precondition; violating it is a programming error.
    """
    assert lower < upper, f"clamp bounds out of order: {lower!r} >= {upper!r}"
    if value < lower:
        return lower
    if value > upper:
        return upper
    return value


def integer_ratio(numerator: float, denominator: float, tolerance: float = 1e-6) -> int:
    """
    Number of whole ``denominator`` periods in ``numerator``.

    Raises:
        ValueError: If the ratio is not within ``tolerance`` of a positive integer
    """
    if numerator <= 0 or denominator <= 0:
        raise ValueError("both periods must be positive")
    ratio = numerator / denominator
    n = int(round(ratio))
    if n < 1 or abs(ratio - n) > tolerance:
        raise ValueError(
            f"{denominator} does not evenly divide {numerator} (ratio {ratio})"
        )
    return n
