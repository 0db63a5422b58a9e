"""Parameter range validation and history checks."""

from spring_sim.verification.conservation import (
    check_energy_conservation,
    check_energy_monotonic,
    check_window_bound,
)
from spring_sim.verification.parameters import PARAMETER_LIMITS, validate_parameters

__all__ = [
    "PARAMETER_LIMITS",
    "validate_parameters",
    "check_energy_conservation",
    "check_energy_monotonic",
    "check_window_bound",
]
