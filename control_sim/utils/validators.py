"""
Validation utilities for parameter and state checking.
Provides robust input validation with clear error messages.
"""

import math
import numbers

from control_sim.exceptions import InvariantViolation, ValidationError


def validate_positive(value: float, name: str) -> float:
    """
    Validate that a value is strictly positive.

    Args:
        value: The value to validate
        name: Parameter name for error messages

    Returns:
        The validated value

    Raises:
        ValidationError: If value is not positive
    """
    if not isinstance(value, numbers.Real):
        raise ValidationError(f"{name} must be a real number, got {type(value).__name__}")
    if not value > 0:
        raise ValidationError(f"{name} must be positive, got {value}")
    return float(value)


def validate_non_negative(value: float, name: str) -> float:
    """
    Validate that a value is non-negative (>= 0).

    Raises:
        ValidationError: If value is negative
    """
    if not isinstance(value, numbers.Real):
        raise ValidationError(f"{name} must be a real number, got {type(value).__name__}")
    if not value >= 0:
        raise ValidationError(f"{name} must be non-negative, got {value}")
    return float(value)


def validate_ordered(lower: float, upper: float, lower_name: str, upper_name: str) -> None:
    """
    Validate that two bounds are strictly ordered.

    Raises:
        ValidationError: If lower >= upper
    """
    if not lower < upper:
        raise ValidationError(f"{lower_name} must be less than {upper_name}, got {lower} >= {upper}")


def check_finite(value: float, name: str) -> float:
    """
    Check that a simulated quantity is finite.

    Raises:
        InvariantViolation: If value is NaN or infinite
    """
    if not math.isfinite(value):
        raise InvariantViolation(name, "a finite value", value)
    return value
