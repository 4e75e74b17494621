"""
Plotting utilities for harness logs.
"""

from typing import Dict, Optional, Tuple
import numpy as np
import matplotlib.pyplot as plt
import matplotlib.gridspec as gridspec
from matplotlib.figure import Figure


class SimulationPlotter:
    """
    Plots position, velocity and voltage traces from a harness log.

    Accepts the column arrays returned by ``SimulationHarness.to_arrays()``.
    """

    def __init__(self, style: str = 'seaborn-v0_8-whitegrid'):
        """
        Initialize plotter.

        Args:
            style: Matplotlib style to use
        """
        try:
            plt.style.use(style)
        except OSError:
            plt.style.use('default')

        self._colors = {
            'setpoint': '#2ecc71',
            'position': '#3498db',
            'velocity': '#e67e22',
            'voltage': '#9b59b6',
            'limit': '#7f8c8d',
        }

    def plot_log(
        self,
        arrays: Dict[str, np.ndarray],
        title: str = "Elevator Simulation",
        travel_limits: Optional[Tuple[float, float]] = None,
        voltage_limit: Optional[float] = None,
        figsize: Tuple[int, int] = (12, 9)
    ) -> Figure:
        """
        Three stacked panels sharing the time axis.

        Args:
            arrays: Column arrays keyed by LogRecord field name
            title: Overall title
            travel_limits: (min, max) height drawn as dotted lines
            voltage_limit: Saturation voltage drawn as dotted lines
            figsize: Figure size

        Returns:
            Matplotlib Figure
        """
        t = arrays['time']

        fig = plt.figure(figsize=figsize)
        gs = gridspec.GridSpec(3, 1, height_ratios=[2, 1, 1], hspace=0.3)

        ax1 = fig.add_subplot(gs[0])
        ax1.plot(t, arrays['setpoint'], '--', color=self._colors['setpoint'],
                 linewidth=2, label='Setpoint')
        ax1.plot(t, arrays['position'], '-', color=self._colors['position'],
                 linewidth=1.5, label='Position')
        if travel_limits is not None:
            for limit in travel_limits:
                ax1.axhline(y=limit, color=self._colors['limit'], linestyle=':', alpha=0.7)
        ax1.set_ylabel('Position (m)')
        ax1.set_title(title, fontsize=14, fontweight='bold')
        ax1.legend(loc='lower right')
        ax1.grid(True, alpha=0.3)

        ax2 = fig.add_subplot(gs[1], sharex=ax1)
        ax2.plot(t, arrays['velocity'], '-', color=self._colors['velocity'], linewidth=1.2)
        ax2.axhline(y=0, color='gray', linestyle=':', alpha=0.5)
        ax2.set_ylabel('Velocity (m/s)')
        ax2.grid(True, alpha=0.3)

        ax3 = fig.add_subplot(gs[2], sharex=ax1)
        ax3.plot(t, arrays['voltage'], '-', color=self._colors['voltage'], linewidth=1.2)
        ax3.fill_between(t, 0, arrays['voltage'], alpha=0.3, color=self._colors['voltage'])
        if voltage_limit is not None:
            ax3.axhline(y=voltage_limit, color=self._colors['limit'], linestyle=':', alpha=0.7)
            ax3.axhline(y=-voltage_limit, color=self._colors['limit'], linestyle=':', alpha=0.7)
        ax3.set_xlabel('Time (s)')
        ax3.set_ylabel('Voltage (V)')
        ax3.grid(True, alpha=0.3)

        return fig

    @staticmethod
    def show():
        """Display all plots."""
        plt.show()

    @staticmethod
    def save(fig: Figure, path: str, dpi: int = 150):
        """Save figure to file."""
        fig.savefig(path, dpi=dpi, bbox_inches='tight')
