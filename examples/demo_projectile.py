#!/usr/bin/env python3
"""
RK4 Projectile Demo

Integrates a 2D projectile with quadratic drag using the generic RK4
integrator on numpy vectors, then plots the trajectory.
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

import numpy as np
import matplotlib.pyplot as plt

from control_sim.integration.rk4 import rk4_trajectory

GRAVITY = np.array([0.0, -9.81])
DRAG = 0.02  # 1/m


def acceleration(t, v):
    return GRAVITY - v * (DRAG * np.linalg.norm(v))


def main():
    times, positions, velocities = rk4_trajectory(
        0.0,
        np.array([0.0, 0.0]),
        np.array([30.0, 30.0]),
        step=0.01,
        n_steps=600,
        acceleration_fn=acceleration,
    )

    landed = np.nonzero(positions[1:, 1] < 0)[0]
    end = landed[0] + 1 if len(landed) else len(times)

    print(f"Flight time: {times[end - 1]:.2f} s")
    print(f"Range: {positions[end - 1, 0]:.2f} m")

    fig, ax = plt.subplots(figsize=(10, 5))
    ax.plot(positions[:end, 0], positions[:end, 1], '-', color='#3498db')
    ax.set_xlabel('x (m)')
    ax.set_ylabel('y (m)')
    ax.set_title('Projectile with quadratic drag (RK4)', fontweight='bold')
    ax.grid(True, alpha=0.3)
    plt.show()


if __name__ == "__main__":
    main()
