"""Classical fourth-order Runge-Kutta step for x'' = a(x, v).

The second-order equation is integrated as the first-order system
dx/dt = v, dv/dt = a(x, v). Local truncation error is O(dt^5), global
error O(dt^4).
"""
from __future__ import annotations

import math

from spring_sim.errors import InvalidInput, NumericalDivergence
from spring_sim.physics.forces import AccelerationFn


def _finite(stage: str, value: float) -> float:
    if not math.isfinite(value):
        raise NumericalDivergence(stage, value)
    return value


def evaluate(stage: str, accel_fn: AccelerationFn, position: float, velocity: float) -> float:
    """Evaluate a(x, v) at finite arguments, treating any overflow as divergence.

    The force model rejects its own non-finite intermediates (such as -k*x
    overflowing) with InvalidInput; inside a step that is a divergence of the
    state, not a caller error.
    """
    try:
        value = accel_fn(position, velocity)
    except InvalidInput as exc:
        raise NumericalDivergence(stage, math.nan) from exc
    return _finite(stage, value)


def rk4_step(
    position: float,
    velocity: float,
    dt: float,
    accel_fn: AccelerationFn,
) -> tuple[float, float]:
    """Advance (position, velocity) by one step of size dt.

    Raises:
        InvalidInput: if the starting state or dt is non-finite, or dt <= 0.
        NumericalDivergence: as soon as any slope, stage argument or result
            is non-finite, or accel_fn rejects a stage with InvalidInput.
            Nothing is returned in that case.
    """
    x, v = position, velocity
    if not (math.isfinite(x) and math.isfinite(v) and math.isfinite(dt)):
        raise InvalidInput("position, velocity and dt must be finite numbers")
    if dt <= 0:
        raise InvalidInput(f"dt must be positive, got {dt!r}")

    half = 0.5 * dt

    k1x = v
    k1v = evaluate("k1v", accel_fn, x, v)

    k2x = _finite("k2x", v + k1v * half)
    k2v = evaluate("k2v", accel_fn, _finite("k2 position", x + k1x * half), k2x)

    k3x = _finite("k3x", v + k2v * half)
    k3v = evaluate("k3v", accel_fn, _finite("k3 position", x + k2x * half), k3x)

    k4x = _finite("k4x", v + k3v * dt)
    k4v = evaluate("k4v", accel_fn, _finite("k4 position", x + k3x * dt), k4x)

    new_x = _finite("position", x + (dt / 6.0) * (k1x + 2 * k2x + 2 * k3x + k4x))
    new_v = _finite("velocity", v + (dt / 6.0) * (k1v + 2 * k2v + 2 * k3v + k4v))
    return new_x, new_v
