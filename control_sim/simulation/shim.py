"""
Shims adapt plant state to a controller's inputs for the harness.
"""

from abc import ABC, abstractmethod
from typing import Optional

from control_sim.core.pid_controller import ElevatorPIDController
from control_sim.exceptions import InvariantViolation
from control_sim.logging.records import LogRecord
from control_sim.plants.base_plant import PlantState
from control_sim.utils.validators import check_finite


class StateShim(ABC):
    """
    Couples one controller to the simulated plant.

    Subclasses turn plant state into sensor readings, run the controller
    and return its output. Logging and invariant checks are optional.
    """

    @abstractmethod
    def update(self, state: PlantState) -> float:
        """
        Run the controller for one control period.

        Args:
            state: Current plant state

        Returns:
            Control output to hold over the next period
        """
        pass

    def log_record(self, state: PlantState, response: float, elapsed: float) -> Optional[LogRecord]:
        """Build a log record, or None to log nothing."""
        return None

    def assert_invariants(self, state: PlantState) -> None:
        """Raise InvariantViolation if the state breaches a safety bound."""
        pass


class ElevatorShim(StateShim):
    """
    Shim between the elevator plant and ``ElevatorPIDController``.

    The encoder reads the plant position shifted by an unknown offset; the
    limit switch closes when the carriage is at or below position zero.
    """

    def __init__(self, encoder_offset: float, controller: ElevatorPIDController):
        """
        Args:
            encoder_offset: Encoder reading when the carriage sits at position 0 (m)
            controller: Loop to drive
        """
        self._encoder_offset = encoder_offset
        self._controller = controller

    @property
    def controller(self) -> ElevatorPIDController:
        return self._controller

    @property
    def encoder_offset(self) -> float:
        return self._encoder_offset

    def update(self, state: PlantState) -> float:
        return self._controller.iterate(
            state.position + self._encoder_offset,
            state.position <= 0.0,
        )

    def log_record(self, state: PlantState, response: float, elapsed: float) -> LogRecord:
        return LogRecord(
            time=elapsed,
            position=state.position,
            velocity=state.velocity,
            voltage=response,
            setpoint=self._controller.get_goal(),
        )

    def assert_invariants(self, state: PlantState) -> None:
        params = self._controller.params
        if not state.position <= params.max_height:
            raise InvariantViolation("position", f"<= max_height {params.max_height}", state.position)
        if not state.position >= params.min_height:
            raise InvariantViolation("position", f">= min_height {params.min_height}", state.position)
        if __debug__:
            check_finite(state.position, "position")
            check_finite(state.velocity, "velocity")
