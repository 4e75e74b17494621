"""Plant models for simulation and testing."""

from control_sim.plants.base_plant import BasePlant, PlantState
from control_sim.plants.gear_motor import GearMotorPlant, GearMotorParams

__all__ = [
    "BasePlant",
    "PlantState",
    "GearMotorPlant",
    "GearMotorParams",
]
