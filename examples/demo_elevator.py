#!/usr/bin/env python3
"""
Elevator Closed-Loop Demo

Demonstrates:
- Self-zeroing PID loop homing on the bottom limit switch
- Dual-rate simulation of the gear-motor lift
- CSV logging through the harness
- Tracking metrics and plotting
"""

import sys
from pathlib import Path

# Add parent to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from control_sim.core.pid_controller import ElevatorPIDController
from control_sim.core.pid_params import ElevatorPresets
from control_sim.plants.base_plant import PlantState
from control_sim.plants.gear_motor import GearMotorPlant
from control_sim.simulation.config import HarnessConfig
from control_sim.simulation.harness import SimulationHarness
from control_sim.simulation.shim import ElevatorShim
from control_sim.analyzer.metrics import compute_tracking_metrics
from control_sim.analyzer.plots import SimulationPlotter


def main():
    print("=" * 60)
    print("Elevator Closed-Loop Demo")
    print("=" * 60)

    plant = GearMotorPlant()
    params = ElevatorPresets.tuned()

    print(f"\nPlant: {plant.get_info()}")
    print(f"Controller: {params}")

    controller = ElevatorPIDController(params)
    controller.set_goal(1.0)

    # Encoder reads 1 m when the carriage is at the bottom stop
    shim = ElevatorShim(encoder_offset=1.0, controller=controller)
    config = HarnessConfig(control_dt=params.sample_time, log_every=20)

    with SimulationHarness(shim, plant, PlantState(position=0.1), config=config) as harness:
        harness.use_csv("output/elevator_demo.csv")
        final = harness.run_time(30.0)
        arrays = harness.to_arrays()

    print(f"\nFinal state: {final}")
    print(f"Controller state: {controller.current_state().value}")

    running = arrays['time'] > 5.0
    metrics = compute_tracking_metrics(
        arrays['time'][running], arrays['position'][running], controller.get_goal()
    )
    print("\nTracking metrics (after homing):")
    for name, value in metrics.to_dict().items():
        print(f"  {name}: {value:.4f}")

    plotter = SimulationPlotter()
    plotter.plot_log(
        arrays,
        travel_limits=(params.min_height, params.max_height),
        voltage_limit=params.output_limit,
    )
    plotter.show()


if __name__ == "__main__":
    main()
