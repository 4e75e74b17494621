"""
Closed-loop Simulation Harness.

Alternates controller and plant updates at the control rate, checks the
shim's safety invariants after every period and keeps a decimated log.
"""

from typing import Dict, List, Optional
import numpy as np

from control_sim import logger
from control_sim.exceptions import InvariantViolation
from control_sim.logging.csv_logger import CSVLogger, LogSink
from control_sim.logging.records import LogRecord
from control_sim.plants.base_plant import BasePlant, PlantState
from control_sim.simulation.config import HarnessConfig
from control_sim.simulation.shim import StateShim
from control_sim.simulation.stepper import DualRateStepper


class SimulationHarness:
    """
    Drives a shim/plant pair through simulated time.

    Log records are buffered in memory and written to the sink on
    ``flush()`` or ``close()``. Use the harness as a context manager so the
    sink is flushed on every exit path, including an invariant abort.

    Example:
        >>> shim = ElevatorShim(1.0, ElevatorPIDController())
        >>> with SimulationHarness(shim, GearMotorPlant(), PlantState(position=0.1)) as h:
        ...     h.use_csv("harness.csv")
        ...     h.shim.controller.set_goal(1.0)
        ...     h.run_time(30.0)
    """

    def __init__(
        self,
        shim: StateShim,
        plant: BasePlant,
        initial_state: PlantState,
        config: Optional[HarnessConfig] = None,
        log_every: Optional[int] = None
    ):
        """
        Initialize harness.

        Args:
            shim: Controller adapter
            plant: Plant acceleration law
            initial_state: Plant state at t = 0
            config: Timing configuration (defaults if None)
            log_every: Overrides config.log_every when given
        """
        config = config if config is not None else HarnessConfig()
        if log_every is not None:
            config = config.copy(log_every=log_every)

        self._config = config
        self._shim = shim
        self._stepper = DualRateStepper(plant, config.simul_dt)
        self._state = initial_state

        self._steps = 0
        self._log_counter = 0
        self._records: List[LogRecord] = []
        self._flushed = 0
        self._sink: Optional[LogSink] = None
        self._closed = False

    @property
    def config(self) -> HarnessConfig:
        return self._config

    @property
    def shim(self) -> StateShim:
        return self._shim

    @property
    def state(self) -> PlantState:
        """Current plant state."""
        return self._state

    @property
    def steps(self) -> int:
        """Control steps performed since creation."""
        return self._steps

    @property
    def elapsed(self) -> float:
        """Simulated time since creation (s)."""
        return self._steps * self._config.control_dt

    @property
    def records(self) -> List[LogRecord]:
        return list(self._records)

    @property
    def sink(self) -> Optional[LogSink]:
        return self._sink

    def set_sink(self, sink: Optional[LogSink]) -> None:
        """Attach the sink records are flushed to."""
        self._sink = sink

    def use_csv(self, file_path: str) -> CSVLogger:
        """Flush records to a CSV file."""
        sink = CSVLogger(file_path, columns=LogRecord.columns())
        self.set_sink(sink)
        return sink

    def run_time(self, duration: float) -> PlantState:
        """
        Simulate for ``duration`` seconds.

        Runs whole control periods until at least ``duration`` has passed,
        so the last period may overshoot it.

        Returns:
            Plant state at the end of the run

        Raises:
            InvariantViolation: If the shim reports a breached safety bound
        """
        if self._closed:
            raise RuntimeError("Harness is closed")

        dt = self._config.control_dt
        start_steps = self._steps
        logger.debug("Running %.4f s from t=%.4f s", duration, self.elapsed)

        while (self._steps - start_steps) * dt < duration:
            response = self._shim.update(self._state)
            self._state = self._stepper.advance(self._state, response, dt)

            try:
                self._shim.assert_invariants(self._state)
            except InvariantViolation as e:
                logger.error("Simulation aborted at t=%.4f s: %s", self.elapsed + dt, e)
                raise

            self._steps += 1
            self._log_counter += 1
            if self._log_counter >= self._config.log_every:
                record = self._shim.log_record(self._state, response, self.elapsed)
                if record is not None:
                    self._records.append(record)
                self._log_counter = 0

        logger.debug(
            "Stopped at t=%.4f s: position %.4f m, velocity %.4f m/s",
            self.elapsed,
            self._state.position,
            self._state.velocity,
        )
        return self._state

    def flush(self) -> None:
        """
        Write records not yet flushed to the sink.

        Sink errors are reported and never raised. Records from a failed
        write stay pending and are sent again by the next flush.
        """
        if self._sink is None or self._flushed >= len(self._records):
            return

        pending = self._records[self._flushed:]
        try:
            self._sink.write_records(pending)
        except Exception:
            logger.warning("Failed to flush %d log records", len(pending), exc_info=True)
            return
        self._flushed = len(self._records)

    def close(self) -> None:
        """Flush records and close the sink."""
        if self._closed:
            return
        self._closed = True

        self.flush()
        if self._sink is not None:
            try:
                self._sink.close()
            except Exception:
                logger.warning("Failed to close log sink", exc_info=True)

    def to_arrays(self) -> Dict[str, np.ndarray]:
        """Logged records as arrays keyed by column."""
        return {
            col: np.array([getattr(r, col) for r in self._records], dtype=float)
            for col in LogRecord.columns()
        }

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def __del__(self):
        """Destructor - flush pending records if close() was never called."""
        if not getattr(self, '_closed', True):
            self.close()

    def __repr__(self) -> str:
        return (
            f"SimulationHarness(t={self.elapsed:.4f}s, steps={self._steps}, "
            f"records={len(self._records)})"
        )
