"""Simulation loop, scheduling hosts, and sampled time-series storage."""

from spring_sim.simulation.buffer import CHANNELS, SampleSeries, TimeSeriesBuffer
from spring_sim.simulation.run import SimulationRun
from spring_sim.simulation.scheduling import AsyncioScheduler, ManualScheduler, Scheduler

__all__ = [
    "CHANNELS",
    "SampleSeries",
    "TimeSeriesBuffer",
    "SimulationRun",
    "Scheduler",
    "ManualScheduler",
    "AsyncioScheduler",
]
