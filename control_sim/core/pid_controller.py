"""
Self-Zeroing Elevator PID Loop.

Features:
- Homing: creeps the commanded position down until the limit switch fires,
  then records the encoder reading there as the zero offset
- PD position control relative to that zero offset
- Setpoint clamped to the configured travel range
- Output saturation to a symmetric voltage range
- Derivative history reset on the homing transition (no derivative kick)
"""

from typing import Optional, Dict, Any
from dataclasses import dataclass

from control_sim import logger
from control_sim.core.pid_params import ElevatorPIDParams, LoopState
from control_sim.utils.math_utils import clamp


@dataclass
class ControllerState:
    """Snapshot of the latest loop iteration."""
    loop_state: LoopState = LoopState.UNINITIALIZED
    setpoint: float = 0.0
    filtered_goal: float = 0.0
    measurement: float = 0.0
    error: float = 0.0
    p_term: float = 0.0
    d_term: float = 0.0
    output: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'loop_state': self.loop_state.value,
            'setpoint': self.setpoint,
            'filtered_goal': self.filtered_goal,
            'measurement': self.measurement,
            'error': self.error,
            'p_term': self.p_term,
            'd_term': self.d_term,
            'output': self.output,
        }


class ElevatorPIDController:
    """
    Position loop for an elevator with a bottom limit switch.

    The encoder has no absolute reference, so the loop starts by homing:
    on the first call it takes the current reading as its goal and lowers
    that goal at ``zeroing_speed`` every period. Once the limit switch
    reports the carriage at the bottom, the reading becomes the zero offset
    and the loop switches to holding the setpoint.

    Example:
        >>> pid = ElevatorPIDController(ElevatorPIDParams(kp=20.0, kd=5.0))
        >>> pid.set_goal(1.0)
        >>> volts = pid.iterate(encoder_reading, limit_switch)
    """

    def __init__(self, params: Optional[ElevatorPIDParams] = None):
        """
        Initialize the loop in the UNINITIALIZED state.

        Args:
            params: Loop parameters (uses defaults if None)
        """
        self._params = params if params is not None else ElevatorPIDParams()

        self._state = LoopState.UNINITIALIZED
        self._setpoint: float = 0.0
        self._last_error: float = 0.0
        self._zero_offset: float = 0.0
        self._zero_goal: float = 0.0
        self._snapshot = ControllerState()

    @property
    def params(self) -> ElevatorPIDParams:
        """Get loop parameters."""
        return self._params

    @property
    def zero_goal(self) -> float:
        """Commanded position while homing."""
        return self._zero_goal

    @property
    def zero_offset(self) -> float:
        """Encoder reading captured when the limit switch fired."""
        return self._zero_offset

    @property
    def last_error(self) -> float:
        """Error of the previous iteration, used by the derivative term."""
        return self._last_error

    @property
    def snapshot(self) -> ControllerState:
        """State of the latest iteration."""
        return self._snapshot

    def current_state(self) -> LoopState:
        """Get the current loop state."""
        return self._state

    def set_goal(self, setpoint: float) -> None:
        """Set the target height in metres above the zero offset."""
        self._setpoint = setpoint

    def get_goal(self) -> float:
        """Get the target height above the zero offset."""
        return self._setpoint

    def iterate(self, sensor_reading: float, limit_switch_active: bool) -> float:
        """
        Run one control period.

        State transitions happen inside the same call: no time passes
        between leaving one state and evaluating the next.

        Args:
            sensor_reading: Raw encoder position (m)
            limit_switch_active: True when the carriage is at the bottom stop

        Returns:
            Motor voltage within [-output_limit, output_limit]
        """
        p = self._params

        while True:
            if self._state is LoopState.UNINITIALIZED:
                self._zero_goal = sensor_reading
                self._transition(LoopState.ZEROING)
                continue

            if self._state is LoopState.ZEROING:
                if limit_switch_active:
                    self._zero_offset = sensor_reading
                    self._last_error = 0.0
                    self._transition(LoopState.RUNNING)
                    continue
                self._zero_goal -= p.zeroing_speed * p.sample_time
                filtered_goal = self._zero_goal
            else:
                filtered_goal = clamp(self._setpoint, p.min_height, p.max_height)
            break

        measurement = sensor_reading - self._zero_offset
        error = filtered_goal - measurement

        p_term = error * p.kp
        d_term = ((error - self._last_error) / p.sample_time) * p.kd
        output = clamp(p_term + d_term, -p.output_limit, p.output_limit)

        self._last_error = error
        self._snapshot = ControllerState(
            loop_state=self._state,
            setpoint=self._setpoint,
            filtered_goal=filtered_goal,
            measurement=measurement,
            error=error,
            p_term=p_term,
            d_term=d_term,
            output=output,
        )
        return output

    def _transition(self, new_state: LoopState) -> None:
        assert new_state.order > self._state.order, (
            f"loop state cannot move from {self._state.value} to {new_state.value}"
        )
        logger.info(
            "Elevator loop %s -> %s (zero goal %.4f m, zero offset %.4f m)",
            self._state.value,
            new_state.value,
            self._zero_goal,
            self._zero_offset,
        )
        self._state = new_state

    def __repr__(self) -> str:
        return f"ElevatorPIDController({self._params}, state={self._state.value})"
