"""Simulation framework for closed-loop controller testing."""

from control_sim.simulation.config import HarnessConfig
from control_sim.simulation.stepper import DualRateStepper
from control_sim.simulation.shim import StateShim, ElevatorShim
from control_sim.simulation.harness import SimulationHarness

__all__ = [
    "HarnessConfig",
    "DualRateStepper",
    "StateShim",
    "ElevatorShim",
    "SimulationHarness",
]
