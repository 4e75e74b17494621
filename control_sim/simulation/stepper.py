"""
Dual-rate physics stepping under a zero-order-held control output.
"""

from control_sim.plants.base_plant import BasePlant, PlantState
from control_sim.utils.math_utils import integer_ratio
from control_sim.utils.validators import validate_positive


class DualRateStepper:
    """
    Advances a plant across one control period with explicit-Euler sub-steps.

    The control output is held constant for the whole period. Accuracy is
    set by how many ``simul_dt`` sub-steps fit in the period.

    Example:
        >>> stepper = DualRateStepper(GearMotorPlant(), simul_dt=5e-6)
        >>> state = stepper.advance(PlantState(), 12.0, 0.005)
    """

    def __init__(self, plant: BasePlant, simul_dt: float):
        self._plant = plant
        self._dt = validate_positive(simul_dt, "simul_dt")

    @property
    def plant(self) -> BasePlant:
        return self._plant

    @property
    def simul_dt(self) -> float:
        return self._dt

    def advance(self, state: PlantState, applied_output: float, duration: float) -> PlantState:
        """
        Integrate the plant for ``duration`` seconds.

        Args:
            state: State at the start of the period
            applied_output: Voltage held for the whole period
            duration: Period length, an integer multiple of simul_dt

        Returns:
            New state, carrying the held voltage

        Raises:
            ValueError: If duration is not a positive multiple of simul_dt
        """
        n_substeps = integer_ratio(duration, self._dt)

        dt = self._dt
        acceleration = self._plant.acceleration
        position = state.position
        velocity = state.velocity

        for _ in range(n_substeps):
            velocity += acceleration(applied_output, velocity) * dt
            position += velocity * dt

        return PlantState(position=position, velocity=velocity, voltage=applied_output)
