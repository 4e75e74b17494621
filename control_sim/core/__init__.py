"""Core control loop components."""

from control_sim.core.pid_controller import ElevatorPIDController, ControllerState
from control_sim.core.pid_params import ElevatorPIDParams, ElevatorPresets, LoopState

__all__ = [
    "ElevatorPIDController",
    "ControllerState",
    "ElevatorPIDParams",
    "ElevatorPresets",
    "LoopState",
]
