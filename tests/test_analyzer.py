"""
Unit tests for tracking metrics and plotting.
"""

import math

import pytest
import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from control_sim.analyzer.metrics import compute_tracking_metrics
from control_sim.analyzer.plots import SimulationPlotter


class TestTrackingMetrics:
    """Test suite for compute_tracking_metrics."""

    def test_first_order_response(self):
        """Test metrics of y = 1 - exp(-t) against closed forms."""
        t = np.linspace(0.0, 10.0, 10001)
        y = 1.0 - np.exp(-t)

        m = compute_tracking_metrics(t, y, 1.0)

        assert m.rise_time == pytest.approx(math.log(9.0), abs=0.002)
        assert m.settling_time == pytest.approx(math.log(50.0), abs=0.002)
        assert m.overshoot_percent == 0.0
        assert m.steady_state_error == pytest.approx(0.0, abs=1e-3)

    def test_overshoot(self):
        t = [0.0, 1.0, 2.0, 3.0, 4.0, 5.0]
        y = [0.0, 0.5, 1.2, 1.0, 1.0, 1.0]

        m = compute_tracking_metrics(t, y, 1.0)

        assert m.overshoot_percent == pytest.approx(20.0)
        assert m.peak_time == 2.0
        assert m.peak_value == 1.2
        assert m.settling_time == 3.0

    def test_downward_step(self):
        """Test metrics are normalised by the step direction."""
        t = [0.0, 1.0, 2.0, 3.0]
        y = [2.0, 1.5, 1.0, 1.0]

        m = compute_tracking_metrics(t, y, 1.0)

        assert m.overshoot_percent == 0.0
        assert m.rise_time == pytest.approx(1.0)

    def test_never_settles(self):
        t = np.linspace(0.0, 1.0, 11)
        m = compute_tracking_metrics(t, 0.5 * t, 1.0)
        assert math.isnan(m.settling_time)
        assert math.isnan(m.rise_time)

    def test_to_dict(self):
        m = compute_tracking_metrics([0.0, 1.0], [0.0, 1.0], 1.0)
        assert set(m.to_dict()) == {
            'rise_time', 'settling_time', 'overshoot_percent',
            'peak_time', 'peak_value', 'steady_state_error',
        }

    def test_invalid_input(self):
        with pytest.raises(ValueError):
            compute_tracking_metrics([0.0], [0.0], 1.0)
        with pytest.raises(ValueError):
            compute_tracking_metrics([0.0, 1.0], [0.0], 1.0)


class TestSimulationPlotter:
    """Test suite for SimulationPlotter."""

    def test_plot_log(self):
        t = np.linspace(0.0, 1.0, 50)
        arrays = {
            'time': t,
            'position': t,
            'velocity': np.ones_like(t),
            'voltage': np.full_like(t, 6.0),
            'setpoint': np.ones_like(t),
        }

        fig = SimulationPlotter().plot_log(arrays, travel_limits=(-0.02, 2.5), voltage_limit=12.0)

        assert len(fig.axes) == 3
        assert fig.axes[0].get_ylabel() == 'Position (m)'
        plt.close(fig)

    def test_save(self, tmp_path):
        t = np.linspace(0.0, 1.0, 10)
        arrays = {col: t for col in ('time', 'position', 'velocity', 'voltage', 'setpoint')}
        plotter = SimulationPlotter()
        fig = plotter.plot_log(arrays)

        path = tmp_path / "log.png"
        plotter.save(fig, str(path), dpi=50)
        plt.close(fig)

        assert path.exists()


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
