"""Fixed-step ODE integrators."""

from control_sim.integration.rk4 import rk4, rk4_trajectory, VectorLike

__all__ = [
    "rk4",
    "rk4_trajectory",
    "VectorLike",
]
