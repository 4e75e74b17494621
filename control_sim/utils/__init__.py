"""Utility functions and helpers."""

from control_sim.utils.validators import (
    validate_positive,
    validate_non_negative,
    validate_ordered,
    check_finite,
)
from control_sim.utils.math_utils import clamp, integer_ratio

__all__ = [
    "validate_positive",
    "validate_non_negative",
    "validate_ordered",
    "check_finite",
    "clamp",
    "integer_ratio",
]
