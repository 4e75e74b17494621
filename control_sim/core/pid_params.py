"""
Elevator PID Loop Parameters Configuration.
Encapsulates the loop tuning in a validated, immutable-friendly structure.
"""

from dataclasses import dataclass, asdict
from typing import Dict, Any
from enum import Enum
import json

from control_sim.utils.validators import (
    validate_positive,
    validate_non_negative,
    validate_ordered,
)


class LoopState(Enum):
    """Control loop state. Transitions only move forward through the list."""
    UNINITIALIZED = "uninitialized"
    ZEROING = "zeroing"  # Creeping down until the limit switch fires
    RUNNING = "running"  # Holding the setpoint relative to the zero offset

    @property
    def order(self) -> int:
        return _LOOP_ORDER.index(self)


_LOOP_ORDER = (LoopState.UNINITIALIZED, LoopState.ZEROING, LoopState.RUNNING)


@dataclass
class ElevatorPIDParams:
    """
    Elevator position loop parameters.

    The algorithm is the same for every deployment; only these numbers change.
    All quantities are SI: metres, seconds, volts.
    """

    # Gains
    kp: float = 20.0  # Proportional gain (V/m)
    kd: float = 5.0   # Derivative gain (V*s/m)

    # Control period DT
    sample_time: float = 1.0 / 200.0

    # Creep speed of the zero goal while searching for the limit switch
    zeroing_speed: float = 0.04  # m/s

    # Travel bounds, relative to the zero offset
    min_height: float = -0.02
    max_height: float = 2.5

    # Symmetric output saturation
    output_limit: float = 12.0  # V

    def __post_init__(self):
        """Validate parameters after initialization."""
        self._validate()

    def _validate(self) -> None:
        validate_non_negative(self.kp, "kp")
        validate_non_negative(self.kd, "kd")
        validate_positive(self.sample_time, "sample_time")
        validate_positive(self.zeroing_speed, "zeroing_speed")
        validate_positive(self.output_limit, "output_limit")
        validate_ordered(self.min_height, self.max_height, "min_height", "max_height")

    def copy(self, **changes) -> 'ElevatorPIDParams':
        """
        Create a copy with optional parameter changes.

        Args:
            **changes: Parameters to override

        Returns:
            New ElevatorPIDParams instance
        """
        params = self.to_dict()
        params.update(changes)
        return ElevatorPIDParams(**params)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ElevatorPIDParams':
        return cls(**data)

    def to_json(self) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=2)

    @classmethod
    def from_json(cls, json_str: str) -> 'ElevatorPIDParams':
        """Create from JSON string."""
        return cls.from_dict(json.loads(json_str))

    def __str__(self) -> str:
        return (
            f"ElevatorPIDParams(Kp={self.kp:.4f}, Kd={self.kd:.4f}, "
            f"Ts={self.sample_time:.4f}s, creep={self.zeroing_speed:.3f}m/s, "
            f"travel=[{self.min_height}, {self.max_height}], "
            f"limit={self.output_limit}V)"
        )


class ElevatorPresets:
    """Tunings used on the lift so far."""

    @staticmethod
    def calibration() -> ElevatorPIDParams:
        """Slow, proportional-only loop used while bringing up the mechanism."""
        return ElevatorPIDParams(kp=0.8, kd=0.0, zeroing_speed=0.01)

    @staticmethod
    def tuned() -> ElevatorPIDParams:
        """PD loop with a faster homing creep."""
        return ElevatorPIDParams(kp=20.0, kd=5.0, zeroing_speed=0.04)
