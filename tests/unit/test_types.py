"""Tests for Pydantic data types."""
from __future__ import annotations

import math

import pytest
from pydantic import ValidationError

from spring_sim.types import (
    CheckResult,
    OscillatorState,
    RunMode,
    Sample,
    SimulationConfig,
    SystemParameters,
    ValidationReport,
)


class TestSystemParameters:
    def test_defaults(self):
        p = SystemParameters()
        assert p.mass == 1.0
        assert p.spring_constant == 10.0
        assert p.damping_coefficient == 0.0

    @pytest.mark.parametrize(
        "field, value",
        [
            ("mass", 0.0),
            ("mass", -1.0),
            ("spring_constant", 0.0),
            ("natural_length", 0.0),
            ("damping_coefficient", -0.5),
            ("mass", math.nan),
            ("spring_constant", math.inf),
        ],
    )
    def test_invalid_rejected(self, field, value):
        with pytest.raises(ValidationError):
            SystemParameters(**{field: value})

    def test_frozen(self):
        p = SystemParameters()
        with pytest.raises(ValidationError):
            p.mass = 2.0


class TestOscillatorState:
    def test_initial(self):
        s = OscillatorState()
        assert (s.position, s.velocity, s.acceleration, s.elapsed_time) == (0.0, 0.0, 0.0, 0.0)
        assert s.run_mode == RunMode.STOPPED

    def test_snapshot_is_independent(self):
        s = OscillatorState(position=0.5)
        snap = s.snapshot()
        s.position = 0.1
        assert snap.position == 0.5

    def test_run_mode_values(self):
        assert RunMode("paused") is RunMode.PAUSED
        assert RunMode.RUNNING.value == "running"


class TestSimulationConfig:
    def test_defaults(self):
        c = SimulationConfig()
        assert c.timestep == pytest.approx(1 / 60)
        assert c.sample_interval == 0.1
        assert c.window_duration == 15.0

    def test_timestep_limited_to_stable_range(self):
        with pytest.raises(ValidationError):
            SimulationConfig(timestep=0.1)
        with pytest.raises(ValidationError):
            SimulationConfig(timestep=0.0)


class TestSmallTypes:
    def test_sample_frozen(self):
        s = Sample(time=0.1, value=2.0)
        with pytest.raises(ValidationError):
            s.value = 3.0

    def test_check_result(self):
        r = CheckResult(name="x", passed=True)
        assert r.value == 0.0
        assert r.message == ""

    def test_validation_report(self):
        assert ValidationReport().is_valid
        assert not ValidationReport(errors={"mass": "bad"}).is_valid
