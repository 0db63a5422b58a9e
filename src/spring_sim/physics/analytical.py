"""Closed-form free response of the underdamped oscillator.

x(t) = exp(-zeta*w0*t) * [x0*cos(wd*t) + (v0 + zeta*w0*x0)/wd * sin(wd*t)]

Used as a reference when verifying the numerical integrator.
"""
from __future__ import annotations

import numpy as np

from spring_sim.physics.forces import damped_frequency, damping_ratio, natural_frequency
from spring_sim.types.simulation import SystemParameters


def free_response(
    params: SystemParameters,
    t: float | np.ndarray,
    x_0: float,
    v_0: float = 0.0,
) -> tuple[float | np.ndarray, float | np.ndarray]:
    """Return (x(t), v(t)) for zeta < 1 and no external forcing."""
    z = damping_ratio(params)
    w0 = natural_frequency(params)
    wd = damped_frequency(params)

    if z >= 1.0 or wd == 0:
        raise ValueError("Analytical solution only for underdamped (zeta < 1)")

    b = (v_0 + z * w0 * x_0) / wd
    exp_term = np.exp(-z * w0 * t)
    cos_t = np.cos(wd * t)
    sin_t = np.sin(wd * t)

    x = exp_term * (x_0 * cos_t + b * sin_t)
    v = exp_term * (
        -z * w0 * (x_0 * cos_t + b * sin_t)
        - x_0 * wd * sin_t
        + b * wd * cos_t
    )
    if np.ndim(t) == 0:
        return float(x), float(v)
    return x, v
