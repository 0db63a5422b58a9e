"""Range checks for parameter records supplied by an input source.

The physics core only enforces finiteness and sign; these limits describe
the range the simulator is tuned for (stable at a 1/60 s step).
"""
from __future__ import annotations

import math
from typing import Any, Mapping

from spring_sim.types.validation import ValidationReport

# field -> (label, unit, minimum, maximum)
PARAMETER_LIMITS: dict[str, tuple[str, str, float, float]] = {
    "mass": ("Mass", "kg", 0.01, 100.0),
    "spring_constant": ("Spring constant", "N/m", 0.1, 1000.0),
    "natural_length": ("Natural length", "m", 0.1, 10.0),
    "damping_coefficient": ("Damping coefficient", "N·s/m", 0.0, 100.0),
}


def _check_field(name: str, value: Any) -> str | None:
    label, unit, low, high = PARAMETER_LIMITS[name]
    try:
        value = float(value)
    except (TypeError, ValueError):
        return f"{label} must be a number"
    if not math.isfinite(value):
        return f"{label} must be a finite number"
    if name == "damping_coefficient":
        if value < 0:
            return f"{label} must be non-negative"
    elif value <= 0:
        return f"{label} must be positive"
    if value < low:
        return f"{label} must be at least {low} {unit}"
    if value > high:
        return f"{label} must be at most {high} {unit}"
    return None


def validate_parameters(params: Mapping[str, Any]) -> ValidationReport:
    """Validate a raw parameter mapping, collecting one message per bad field."""
    report = ValidationReport()
    for name in PARAMETER_LIMITS:
        if name not in params:
            report.errors[name] = f"{PARAMETER_LIMITS[name][0]} is required"
            continue
        message = _check_field(name, params[name])
        if message is not None:
            report.errors[name] = message
    return report
