"""A single simulation run: state machine, fixed-step physics loop, and sampling.

The run owns its OscillatorState and TimeSeriesBuffer. Physics advances by
exactly one fixed timestep per tick, independent of how often the host
delivers ticks, and the buffer is sampled on a coarser interval of simulated
time.

    Stopped --start()--> Running <--pause()/resume()--> Paused
    any     --reset()--> Stopped
"""
from __future__ import annotations

import logging
import math
from typing import Any, Callable

from spring_sim.errors import InvalidInput, NumericalDivergence
from spring_sim.physics.energy import total_energy
from spring_sim.physics.forces import AccelerationFn, acceleration_function
from spring_sim.physics.integrator import evaluate, rk4_step
from spring_sim.simulation.buffer import TimeSeriesBuffer
from spring_sim.simulation.scheduling import ManualScheduler, Scheduler
from spring_sim.types.simulation import (
    OscillatorState,
    RunMode,
    SimulationConfig,
    SystemParameters,
)

logger = logging.getLogger(__name__)

# Absorbs float accumulation so that sample_interval / timestep steps hit the interval.
_SAMPLE_EPS = 1e-9


class SimulationRun:
    """Owned handle for one damped oscillator run.

    Args:
        parameters: Physical parameters, fixed for the lifetime of the run.
        config: Loop timing. Defaults to 1/60 s steps, 100 ms sampling, 15 s window.
        scheduler: Host that delivers ticks. Defaults to a ManualScheduler.
        on_error: Called with the NumericalDivergence when a step fails.
        accel_fn: Override of a(x, v). Defaults to the spring + damping model.
    """

    def __init__(
        self,
        parameters: SystemParameters,
        config: SimulationConfig | None = None,
        scheduler: Scheduler | None = None,
        on_error: Callable[[NumericalDivergence], None] | None = None,
        accel_fn: AccelerationFn | None = None,
    ) -> None:
        self.parameters = parameters
        self.config = config or SimulationConfig()
        self.scheduler: Scheduler = scheduler if scheduler is not None else ManualScheduler()
        self.on_error = on_error
        self._accel = accel_fn or acceleration_function(parameters)
        self._state = OscillatorState()
        self._series = TimeSeriesBuffer(window=self.config.window_duration)
        self._last_sample_time = 0.0
        self._handle: Any = None
        self._error: NumericalDivergence | None = None

    # -- read-only views ---------------------------------------------------

    @property
    def state(self) -> OscillatorState:
        """Snapshot of the live state."""
        return self._state.snapshot()

    @property
    def run_mode(self) -> RunMode:
        return self._state.run_mode

    @property
    def series(self) -> TimeSeriesBuffer:
        return self._series

    @property
    def error(self) -> NumericalDivergence | None:
        """The divergence that paused this run, until the next reset()."""
        return self._error

    @property
    def tick_pending(self) -> bool:
        return self._handle is not None

    # -- lifecycle ---------------------------------------------------------

    def start(self) -> None:
        """Begin (or continue) integrating. Elapsed time and samples are kept."""
        if self._error is not None:
            raise RuntimeError("Run diverged; call reset() before starting again.")
        mode = self._state.run_mode
        if mode is RunMode.RUNNING:
            return
        if mode is RunMode.STOPPED:
            self._last_sample_time = self._state.elapsed_time
        self._set_mode(RunMode.RUNNING)
        self._schedule()

    def pause(self) -> None:
        """Freeze the state verbatim and drop the pending tick."""
        if self._state.run_mode is not RunMode.RUNNING:
            return
        self._cancel()
        self._set_mode(RunMode.PAUSED)

    def resume(self) -> None:
        """Continue from the frozen state with no discontinuity."""
        if self._state.run_mode is not RunMode.PAUSED:
            return
        if self._error is not None:
            raise RuntimeError("Run diverged; call reset() before resuming.")
        self._set_mode(RunMode.RUNNING)
        self._schedule()

    def reset(self) -> None:
        """Return to the initial Stopped state and clear every series."""
        self._cancel()
        self._state = OscillatorState()
        self._series.clear()
        self._last_sample_time = 0.0
        self._error = None
        logger.debug("Run reset")

    def set_displacement(self, position: float) -> None:
        """Place the mass at ``position`` at rest. The next step integrates from here."""
        if not math.isfinite(position):
            raise InvalidInput(f"displacement must be a finite number, got {position!r}")
        self._state.position = float(position)
        self._state.velocity = 0.0
        self._state.acceleration = 0.0

    # -- stepping ----------------------------------------------------------

    def advance(self) -> bool:
        """Perform one fixed physics step if Running.

        Returns True when a step was taken. A NumericalDivergence leaves the
        state untouched, pauses the run, and is reported through ``error``
        and ``on_error`` instead of being raised.
        """
        state = self._state
        if state.run_mode is not RunMode.RUNNING:
            return False

        dt = self.config.timestep
        elapsed = state.elapsed_time + dt
        due = elapsed - self._last_sample_time >= self.config.sample_interval - _SAMPLE_EPS
        try:
            position, velocity = rk4_step(state.position, state.velocity, dt, self._accel)
            accel = evaluate("acceleration", self._accel, position, velocity)
            energy = self._energy(position, velocity) if due else None
        except NumericalDivergence as exc:
            self._diverged(exc)
            return False

        state.position = position
        state.velocity = velocity
        state.acceleration = accel
        state.elapsed_time = elapsed

        if due:
            self._series.append(elapsed, position, velocity, accel, energy)
            self._last_sample_time = elapsed
        return True

    def step_many(self, n_steps: int) -> int:
        """Call advance() up to ``n_steps`` times; returns the number of steps taken."""
        taken = 0
        for _ in range(n_steps):
            if not self.advance():
                break
            taken += 1
        return taken

    def _energy(self, position: float, velocity: float) -> float:
        p = self.parameters
        energy = total_energy(p.mass, velocity, p.spring_constant, position)
        if not math.isfinite(energy):
            raise NumericalDivergence("total_energy", energy)
        return energy

    def _diverged(self, exc: NumericalDivergence) -> None:
        self._cancel()
        self._error = exc
        self._set_mode(RunMode.PAUSED)
        logger.error(f"Physics step diverged at t={self._state.elapsed_time:.4f}s: {exc}")
        if self.on_error is not None:
            self.on_error(exc)

    # -- scheduling --------------------------------------------------------

    def _tick(self) -> None:
        self._handle = None
        self.advance()
        if self._state.run_mode is RunMode.RUNNING:
            self._schedule()

    def _schedule(self) -> None:
        if self._handle is None:
            self._handle = self.scheduler.call_later(self.config.frame_interval, self._tick)

    def _cancel(self) -> None:
        if self._handle is not None:
            self.scheduler.cancel(self._handle)
            self._handle = None

    def _set_mode(self, mode: RunMode) -> None:
        if mode is not self._state.run_mode:
            logger.debug(f"Run mode {self._state.run_mode.value} -> {mode.value}")
            self._state.run_mode = mode
