"""Core data types for the spring-mass simulator."""

from spring_sim.types.simulation import (
    OscillatorState,
    RunMode,
    Sample,
    SimulationConfig,
    SystemParameters,
)
from spring_sim.types.validation import CheckResult, ValidationReport

__all__ = [
    # simulation
    "RunMode",
    "SystemParameters",
    "OscillatorState",
    "Sample",
    "SimulationConfig",
    # validation
    "CheckResult",
    "ValidationReport",
]
