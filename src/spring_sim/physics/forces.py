"""Force model for a linear spring with viscous damping.

Sign convention: positive displacement and velocity point away from
equilibrium, so both forces are restoring (negative for positive arguments).

- Spring force (Hooke's law): F_s = -k*x
- Damping force: F_d = -c*v
- Newton's second law: a = F/m
"""
from __future__ import annotations

import math
from typing import Callable

from spring_sim.errors import InvalidInput
from spring_sim.types.simulation import SystemParameters

GRAVITY = 9.81

AccelerationFn = Callable[[float, float], float]


def _require_finite(**values: float) -> None:
    for name, value in values.items():
        if not math.isfinite(value):
            raise InvalidInput(f"{name} must be a finite number, got {value!r}")


def spring_force(displacement: float, spring_constant: float) -> float:
    """Restoring force of the spring, F = -k*x."""
    _require_finite(displacement=displacement, spring_constant=spring_constant)
    return -spring_constant * displacement


def damping_force(velocity: float, damping_coefficient: float) -> float:
    """Viscous damping force, F = -c*v."""
    _require_finite(velocity=velocity, damping_coefficient=damping_coefficient)
    if damping_coefficient < 0:
        raise InvalidInput(f"damping_coefficient must be non-negative, got {damping_coefficient!r}")
    return -damping_coefficient * velocity


def acceleration(total_force: float, mass: float) -> float:
    """Acceleration from net force, a = F/m."""
    _require_finite(total_force=total_force, mass=mass)
    if mass <= 0:
        raise InvalidInput(f"mass must be positive, got {mass!r}")
    return total_force / mass


def acceleration_of(position: float, velocity: float, params: SystemParameters) -> float:
    """Acceleration of the mass at (position, velocity): (-k*x - c*v)/m."""
    total = spring_force(position, params.spring_constant) + damping_force(
        velocity, params.damping_coefficient
    )
    return acceleration(total, params.mass)


def acceleration_function(params: SystemParameters) -> AccelerationFn:
    """Bind the parameters into the a(x, v) callable consumed by the integrator."""

    def _accel(position: float, velocity: float) -> float:
        return acceleration_of(position, velocity, params)

    return _accel


def equilibrium_position(mass: float, spring_constant: float, gravity: float = GRAVITY) -> float:
    """Static extension of a vertical spring under gravity, x_eq = m*g/k."""
    _require_finite(mass=mass, spring_constant=spring_constant, gravity=gravity)
    if mass <= 0 or spring_constant <= 0:
        raise InvalidInput("mass and spring_constant must be positive")
    return mass * gravity / spring_constant


def natural_frequency(params: SystemParameters) -> float:
    """Undamped angular frequency omega_0 = sqrt(k/m)."""
    return math.sqrt(params.spring_constant / params.mass)


def damping_ratio(params: SystemParameters) -> float:
    """zeta = c / (2*sqrt(k*m))."""
    return params.damping_coefficient / (2.0 * math.sqrt(params.spring_constant * params.mass))


def damped_frequency(params: SystemParameters) -> float:
    """omega_d = omega_0*sqrt(1 - zeta^2), zero when critically or over-damped."""
    zeta = damping_ratio(params)
    if zeta >= 1.0:
        return 0.0
    return natural_frequency(params) * math.sqrt(1.0 - zeta**2)


def period(params: SystemParameters) -> float:
    """Period of the (damped) oscillation; infinite when there is no oscillation."""
    omega_d = damped_frequency(params)
    if omega_d == 0:
        return math.inf
    return 2.0 * math.pi / omega_d
