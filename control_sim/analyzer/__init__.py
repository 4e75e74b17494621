"""Analysis and visualization of simulation logs."""

from control_sim.analyzer.metrics import TrackingMetrics, compute_tracking_metrics
from control_sim.analyzer.plots import SimulationPlotter

__all__ = [
    "TrackingMetrics",
    "compute_tracking_metrics",
    "SimulationPlotter",
]
