"""Force model, energy evaluator and RK4 integrator."""

from spring_sim.physics.energy import kinetic_energy, potential_energy, total_energy
from spring_sim.physics.forces import (
    acceleration,
    acceleration_function,
    acceleration_of,
    damping_force,
    damping_ratio,
    equilibrium_position,
    natural_frequency,
    period,
    spring_force,
)
from spring_sim.physics.integrator import rk4_step

__all__ = [
    "spring_force",
    "damping_force",
    "acceleration",
    "acceleration_of",
    "acceleration_function",
    "equilibrium_position",
    "natural_frequency",
    "damping_ratio",
    "period",
    "kinetic_energy",
    "potential_energy",
    "total_energy",
    "rk4_step",
]
