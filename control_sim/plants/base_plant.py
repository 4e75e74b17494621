"""
Base plant model abstract class.
Defines the acceleration law interface and the plant state it acts on.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import Dict, Any


@dataclass(frozen=True)
class PlantState:
    """
    Physical state of a single-axis plant.

    Immutable: steppers return a new state each control period.
    """
    position: float = 0.0  # m
    velocity: float = 0.0  # m/s
    voltage: float = 0.0   # V, control output currently held

    def evolve(self, **changes) -> 'PlantState':
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, float]:
        return {
            'position': self.position,
            'velocity': self.velocity,
            'voltage': self.voltage,
        }


class BasePlant(ABC):
    """
    Abstract base class for plant models.

    A plant is a pure acceleration law: it holds only constants, so one
    instance can be shared by any number of simulations.
    """

    @abstractmethod
    def acceleration(self, voltage: float, velocity: float) -> float:
        """
        Acceleration of the load.

        Args:
            voltage: Applied motor voltage (V)
            velocity: Current load velocity (m/s)

        Returns:
            Load acceleration (m/s^2)
        """
        pass

    @abstractmethod
    def get_info(self) -> Dict[str, Any]:
        """Get plant information/parameters."""
        pass
