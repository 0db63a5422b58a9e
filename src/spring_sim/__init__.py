"""spring-sim: real-time damped mass-spring oscillator with an RK4 physics core."""

__version__ = "0.1.0"

from spring_sim.errors import InvalidInput, NumericalDivergence
from spring_sim.simulation.run import SimulationRun
from spring_sim.types.simulation import OscillatorState, RunMode, SimulationConfig, SystemParameters

__all__ = [
    "InvalidInput",
    "NumericalDivergence",
    "OscillatorState",
    "RunMode",
    "SimulationConfig",
    "SimulationRun",
    "SystemParameters",
    "__version__",
]
