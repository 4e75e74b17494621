"""
Classical fourth-order Runge-Kutta integration for second-order systems.

Solves the coupled system
    dx/dt = v
    dv/dt = f(t, v)
one fixed step at a time. Values only need vector-space arithmetic, so
floats, numpy arrays and user-defined vector types all work.
"""

from typing import Callable, Protocol, Tuple, TypeVar
import numpy as np


class VectorLike(Protocol):
    """Anything closed under addition and scaling by a float."""

    def __add__(self, other): ...

    def __mul__(self, scalar: float): ...


V = TypeVar("V", bound=VectorLike)


def rk4(
    t: float,
    position: V,
    velocity: V,
    step: float,
    acceleration_fn: Callable[[float, V], V],
) -> Tuple[V, V]:
    """
    Advance position and velocity by one RK4 step.

    Stages are evaluated at t, t + h/2, t + h/2 and t + h and combined with
    weights (1, 2, 2, 1) / 6.

    Args:
        t: Time at the start of the step
        position: Position at t
        velocity: Velocity at t
        step: Step size h
        acceleration_fn: f(t, v) giving dv/dt

    Returns:
        (position, velocity) at t + h
    """
    half = step / 2.0

    k1_x = velocity
    k1_v = acceleration_fn(t, velocity)

    k2_x = velocity + k1_v * half
    k2_v = acceleration_fn(t + half, k2_x)

    k3_x = velocity + k2_v * half
    k3_v = acceleration_fn(t + half, k3_x)

    k4_x = velocity + k3_v * step
    k4_v = acceleration_fn(t + step, k4_x)

    new_position = position + (k1_x + k2_x * 2.0 + k3_x * 2.0 + k4_x) * (step / 6.0)
    new_velocity = velocity + (k1_v + k2_v * 2.0 + k3_v * 2.0 + k4_v) * (step / 6.0)
    return new_position, new_velocity


def rk4_trajectory(
    t0: float,
    position,
    velocity,
    step: float,
    n_steps: int,
    acceleration_fn: Callable,
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Integrate ``n_steps`` RK4 steps and collect the trajectory.

    Returns:
        (times, positions, velocities), each with n_steps + 1 rows; the
        first row is the initial condition.
    """
    if step <= 0:
        raise ValueError("step must be positive")
    if n_steps < 0:
        raise ValueError("n_steps must be non-negative")

    times = t0 + step * np.arange(n_steps + 1)
    positions = [position]
    velocities = [velocity]

    x, v = position, velocity
    for i in range(n_steps):
        x, v = rk4(times[i], x, v, step, acceleration_fn)
        positions.append(x)
        velocities.append(v)

    return times, np.asarray(positions, dtype=float), np.asarray(velocities, dtype=float)
