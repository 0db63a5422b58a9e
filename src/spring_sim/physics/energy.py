"""Mechanical energy of the oscillator: E = 0.5*m*v^2 + 0.5*k*x^2."""

from __future__ import annotations

import math

from spring_sim.errors import InvalidInput


def kinetic_energy(mass: float, velocity: float) -> float:
    if not (math.isfinite(mass) and math.isfinite(velocity)):
        raise InvalidInput("mass and velocity must be finite numbers")
    if mass <= 0:
        raise InvalidInput(f"mass must be positive, got {mass!r}")
    return 0.5 * mass * velocity * velocity


def potential_energy(spring_constant: float, position: float) -> float:
    if not (math.isfinite(spring_constant) and math.isfinite(position)):
        raise InvalidInput("spring_constant and position must be finite numbers")
    if spring_constant <= 0:
        raise InvalidInput(f"spring_constant must be positive, got {spring_constant!r}")
    return 0.5 * spring_constant * position * position


def total_energy(mass: float, velocity: float, spring_constant: float, position: float) -> float:
    """Kinetic plus elastic potential energy. Never negative for valid input."""
    return kinetic_energy(mass, velocity) + potential_energy(spring_constant, position)
