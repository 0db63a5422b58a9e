"""Shared test fixtures for spring-sim."""

import pytest

from spring_sim.types.simulation import SystemParameters


@pytest.fixture
def undamped_params():
    """m=1 kg, k=10 N/m, no damping."""
    return SystemParameters(mass=1.0, spring_constant=10.0, damping_coefficient=0.0)
