"""
Exceptions raised by the simulation core.
"""

from typing import Any


class ValidationError(ValueError):
    """Raised when a configuration value fails validation."""
    pass


class InvariantViolation(Exception):
    """
    A safety invariant of the simulated plant was breached.

    Raised by shims from ``assert_invariants``. It aborts the run: a breach
    means the controller or the model is defective.
    """

    def __init__(self, name: str, bound: str, value: Any):
        super().__init__(name, bound, value)
        self.name = name
        self.bound = bound
        self.value = value

    def __str__(self):
        return "Invariant '%s' violated: expected %s, got %r" % (
            self.name,
            self.bound,
            self.value,
        )
