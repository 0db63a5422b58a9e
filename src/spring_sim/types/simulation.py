"""System parameters, oscillator state, samples, and loop timing configuration."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class RunMode(str, Enum):
    STOPPED = "stopped"
    RUNNING = "running"
    PAUSED = "paused"


class SystemParameters(BaseModel):
    """Physical properties of the mass-spring system, fixed for the lifetime of a run.

    ``natural_length`` only scales the drawing; it never enters the integration.
    """

    model_config = {"frozen": True}

    mass: float = Field(1.0, gt=0, allow_inf_nan=False)
    spring_constant: float = Field(10.0, gt=0, allow_inf_nan=False)
    natural_length: float = Field(1.0, gt=0, allow_inf_nan=False)
    damping_coefficient: float = Field(0.0, ge=0, allow_inf_nan=False)


class OscillatorState(BaseModel):
    """Live state of a single run. Created Stopped with every numeric field at zero."""

    position: float = 0.0
    velocity: float = 0.0
    acceleration: float = 0.0
    elapsed_time: float = 0.0
    run_mode: RunMode = RunMode.STOPPED

    def snapshot(self) -> OscillatorState:
        """Independent copy for read-only consumers."""
        return self.model_copy()


class Sample(BaseModel):
    """One scalar observation of a channel."""

    model_config = {"frozen": True}

    time: float
    value: float


class SimulationConfig(BaseModel):
    """Timing of the physics loop.

    The physics step and the sampling interval are both measured in simulated
    time; ``frame_interval`` is only the delay requested from the scheduling host.
    """

    timestep: float = Field(1.0 / 60.0, gt=0, le=0.05)
    sample_interval: float = Field(0.1, gt=0)
    window_duration: float = Field(15.0, gt=0)
    frame_interval: float = Field(1.0 / 60.0, gt=0)
