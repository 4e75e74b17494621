"""
Tracking metrics for logged simulation runs.
Uses numpy for vectorized calculations.
"""

from typing import Dict
from dataclasses import dataclass, asdict
import numpy as np
from numpy.typing import ArrayLike


@dataclass
class TrackingMetrics:
    """Step-tracking metrics of a position trace."""
    rise_time: float
    settling_time: float
    overshoot_percent: float
    peak_time: float
    peak_value: float
    steady_state_error: float

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


def compute_tracking_metrics(
    times: ArrayLike,
    positions: ArrayLike,
    setpoint: float,
    tolerance: float = 0.02
) -> TrackingMetrics:
    """
    Compute step-tracking metrics against a constant setpoint.

    Args:
        times: Sample times (s)
        positions: Position samples (m)
        setpoint: Target position (m)
        tolerance: Settling band as a fraction of the step size

    Returns:
        TrackingMetrics; settling_time is NaN if the trace never settles
    """
    t = np.asarray(times, dtype=float)
    y = np.asarray(positions, dtype=float)
    if len(t) < 2 or len(t) != len(y):
        raise ValueError("Need at least 2 matching time/position samples")

    y0 = y[0]
    delta = setpoint - y0
    if abs(delta) < 1e-12:
        delta = 1.0

    y_norm = (y - y0) / delta

    # Rise time 10% -> 90%
    above_10 = np.nonzero(y_norm >= 0.1)[0]
    above_90 = np.nonzero(y_norm >= 0.9)[0]
    if len(above_10) and len(above_90):
        rise_time = float(t[above_90[0]] - t[above_10[0]])
    else:
        rise_time = float('nan')

    # Settling: after the last sample outside the band
    band = tolerance * abs(delta)
    outside = np.nonzero(np.abs(y - setpoint) > band)[0]
    if len(outside) == 0:
        settling_time = float(t[0])
    elif outside[-1] == len(y) - 1:
        settling_time = float('nan')
    else:
        settling_time = float(t[outside[-1] + 1])

    peak_idx = int(np.argmax(y_norm))
    overshoot = max(0.0, float(y_norm[peak_idx] - 1.0) * 100.0)

    n_ss = max(1, len(y) // 10)
    steady_state_error = float(setpoint - np.mean(y[-n_ss:]))

    return TrackingMetrics(
        rise_time=rise_time,
        settling_time=settling_time,
        overshoot_percent=overshoot,
        peak_time=float(t[peak_idx]),
        peak_value=float(y[peak_idx]),
        steady_state_error=steady_state_error,
    )
