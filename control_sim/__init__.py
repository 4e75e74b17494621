"""
Control Loop Simulation Library
===============================

Closed-loop validation of a position controller against a simplified plant:
- Self-zeroing PID position loop for an elevator lift
- Gear-motor plant model with dual-rate (control / physics) stepping
- Generic RK4 integrator for vector-valued ODEs
- Simulation harness with safety invariants and decimated CSV logging

Author: control-sim developers
"""

import os
import logging

from rich.logging import RichHandler

# Package logger, created before the submodules that use it are imported
logger = logging.getLogger("control_sim")
logger.setLevel(os.environ.get("LOGLEVEL", "INFO").upper())

stream_handler = RichHandler()
logger.addHandler(stream_handler)

from control_sim.core.pid_controller import ElevatorPIDController  # noqa: E402
from control_sim.core.pid_params import ElevatorPIDParams, LoopState  # noqa: E402
from control_sim.plants.gear_motor import GearMotorPlant  # noqa: E402
from control_sim.plants.base_plant import PlantState  # noqa: E402
from control_sim.integration.rk4 import rk4  # noqa: E402
from control_sim.simulation.harness import SimulationHarness  # noqa: E402
from control_sim.simulation.shim import ElevatorShim  # noqa: E402

__version__ = "1.0.0"
__all__ = [
    "logger",
    "ElevatorPIDController",
    "ElevatorPIDParams",
    "LoopState",
    "GearMotorPlant",
    "PlantState",
    "rk4",
    "SimulationHarness",
    "ElevatorShim",
]
