"""Tests for the RK4 single-step integrator."""
from __future__ import annotations

import math

import numpy as np
import pytest

from spring_sim.errors import InvalidInput, NumericalDivergence
from spring_sim.physics.analytical import free_response
from spring_sim.physics.forces import acceleration_function
from spring_sim.physics.integrator import rk4_step
from spring_sim.types.simulation import SystemParameters

DT = 1.0 / 60.0


def _integrate(params: SystemParameters, x_0: float, n_steps: int, dt: float = DT):
    accel = acceleration_function(params)
    x, v = x_0, 0.0
    for _ in range(n_steps):
        x, v = rk4_step(x, v, dt, accel)
    return x, v


class TestRK4Step:
    def test_rest_at_equilibrium_stays(self):
        params = SystemParameters(mass=1.0, spring_constant=10.0)
        assert rk4_step(0.0, 0.0, DT, acceleration_function(params)) == (0.0, 0.0)

    def test_constant_acceleration_is_exact(self):
        """RK4 integrates a polynomial trajectory of degree <= 4 exactly."""
        x, v = rk4_step(1.0, 2.0, 0.5, lambda x, v: -9.81)
        assert x == pytest.approx(1.0 + 2.0 * 0.5 - 0.5 * 9.81 * 0.25)
        assert v == pytest.approx(2.0 - 9.81 * 0.5)

    def test_matches_analytical_underdamped(self):
        params = SystemParameters(mass=1.0, spring_constant=4.0, damping_coefficient=0.4)
        n_steps = 120
        x, v = _integrate(params, 1.0, n_steps)
        x_ref, v_ref = free_response(params, n_steps * DT, 1.0)
        assert abs(x - x_ref) < 1e-5
        assert abs(v - v_ref) < 1e-5

    def test_fourth_order_convergence(self):
        """Halving dt cuts the global error by roughly 2^4."""
        params = SystemParameters(mass=1.0, spring_constant=10.0)
        t_end = 1.0
        x_ref, _ = free_response(params, t_end, 0.5)
        errors = []
        for n in (20, 40, 80):
            x, _ = _integrate(params, 0.5, n, dt=t_end / n)
            errors.append(abs(x - x_ref))
        ratios = np.array(errors[:-1]) / np.array(errors[1:])
        assert np.all(ratios > 12.0)

    def test_invalid_inputs(self):
        accel = lambda x, v: -x
        with pytest.raises(InvalidInput):
            rk4_step(math.nan, 0.0, DT, accel)
        with pytest.raises(InvalidInput):
            rk4_step(0.0, 0.0, math.inf, accel)
        with pytest.raises(InvalidInput):
            rk4_step(0.0, 0.0, 0.0, accel)


class TestDivergence:
    def test_infinite_acceleration(self):
        with pytest.raises(NumericalDivergence) as exc_info:
            rk4_step(0.1, 0.0, DT, lambda x, v: math.inf)
        assert exc_info.value.stage == "k1v"

    def test_nan_at_later_stage_stops_evaluation(self):
        calls = []

        def accel(x, v):
            calls.append((x, v))
            return -x if len(calls) < 3 else math.nan

        with pytest.raises(NumericalDivergence) as exc_info:
            rk4_step(0.1, 0.0, DT, accel)
        assert exc_info.value.stage == "k3v"
        assert len(calls) == 3

    def test_overflowing_stage_is_divergence(self):
        with pytest.raises(NumericalDivergence):
            rk4_step(0.0, 1e308, 10.0, lambda x, v: 1e308)

    def test_force_model_overflow_is_divergence(self):
        accel = acceleration_function(SystemParameters(mass=1.0, spring_constant=10.0))
        with pytest.raises(NumericalDivergence) as exc_info:
            rk4_step(1e308, 0.0, DT, accel)
        assert exc_info.value.stage == "k1v"
        assert isinstance(exc_info.value.__cause__, InvalidInput)
