"""
Gear-motor driven linear actuator (winch / drum elevator).

Acceleration law:
    a = G*Kt*(Kv*V*r - G*v) / (m*Kv*R*r^2)

Linear model via the python-control library:
    a = A*V - B*v,  A = G*Kt / (m*R*r),  B = G^2*Kt / (m*Kv*R*r^2)
"""

from dataclasses import dataclass, asdict
from typing import Dict, Any, Optional
import control as ct

from control_sim.plants.base_plant import BasePlant
from control_sim.utils.validators import validate_positive


@dataclass(frozen=True)
class GearMotorParams:
    """
    Motor datasheet values and mechanism geometry.

    Defaults describe the lift: a 12 V motor through a 20:1 reduction
    winding a 0.1524 m drum under a 5 kg load.
    """
    nominal_voltage: float = 12.0       # V
    stall_current: float = 133.0        # A
    stall_torque: float = 24.0          # N*m
    free_speed: float = 558.15629415    # rad/s
    gear_ratio: float = 20.0            # output is this much slower than the motor
    mass: float = 5.0                   # kg
    drum_radius: float = 0.1524         # m

    def __post_init__(self):
        for name, value in asdict(self).items():
            validate_positive(value, name)

    @property
    def resistance(self) -> float:
        """Winding resistance R (ohm)."""
        return self.nominal_voltage / self.stall_current

    @property
    def torque_constant(self) -> float:
        """Kt (N*m/A)."""
        return self.stall_torque / self.stall_current

    @property
    def velocity_constant(self) -> float:
        """Kv (rad/s/V)."""
        return self.free_speed / self.nominal_voltage


class GearMotorPlant(BasePlant):
    """
    Back-EMF limited DC motor driving a load through a gearbox and drum.

    For constant voltage the law is first order in velocity: the load
    accelerates towards a terminal velocity with time constant 1/B.

    Example:
        >>> plant = GearMotorPlant()
        >>> acc = plant.acceleration(12.0, 0.0)
        >>> plant.terminal_velocity(12.0)
    """

    def __init__(self, params: Optional[GearMotorParams] = None):
        self._params = params if params is not None else GearMotorParams()

        p = self._params
        self._G = p.gear_ratio
        self._Kt = p.torque_constant
        self._Kv = p.velocity_constant
        self._R = p.resistance
        self._m = p.mass
        self._r = p.drum_radius

        # Linearised coefficients, a = A*V - B*v
        self._A = (self._G * self._Kt) / (self._m * self._R * self._r)
        self._B = (self._G ** 2 * self._Kt) / (self._m * self._Kv * self._R * self._r ** 2)

    def acceleration(self, voltage: float, velocity: float) -> float:
        G, Kt, Kv, R, m, r = self._G, self._Kt, self._Kv, self._R, self._m, self._r
        return (G * Kt * (Kv * voltage * r - G * velocity)) / (m * Kv * R * r * r)

    def terminal_velocity(self, voltage: float) -> float:
        """Steady-state load velocity under a constant voltage (m/s)."""
        return self._A * voltage / self._B

    @property
    def params(self) -> GearMotorParams:
        return self._params

    @property
    def voltage_gain(self) -> float:
        """A: acceleration per volt at rest (m/s^2/V)."""
        return self._A

    @property
    def damping(self) -> float:
        """B: back-EMF damping (1/s)."""
        return self._B

    @property
    def time_constant(self) -> float:
        """Velocity time constant 1/B (s)."""
        return 1.0 / self._B

    @property
    def velocity_transfer_function(self) -> ct.TransferFunction:
        """V(s) -> velocity: A / (s + B)."""
        return ct.TransferFunction([self._A], [1.0, self._B])

    @property
    def position_transfer_function(self) -> ct.TransferFunction:
        """V(s) -> position: A / (s^2 + B*s)."""
        return ct.TransferFunction([self._A], [1.0, self._B, 0.0])

    def get_info(self) -> Dict[str, Any]:
        info = {'type': 'GearMotorPlant'}
        info.update(asdict(self._params))
        info.update({
            'resistance': self._R,
            'torque_constant': self._Kt,
            'velocity_constant': self._Kv,
            'time_constant': self.time_constant,
        })
        return info
