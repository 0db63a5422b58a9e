"""Configuration loading and validation."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

from spring_sim.types.simulation import SimulationConfig, SystemParameters

# Default config directory relative to package root
_PACKAGE_ROOT = Path(__file__).resolve().parent.parent.parent.parent
_CONFIGS_DIR = _PACKAGE_ROOT / "configs"


class SpringSimConfig(BaseModel):
    """Top-level configuration for headless and real-time runs."""

    output_dir: str = "output"
    log_level: str = "INFO"
    initial_displacement: float = Field(0.5, allow_inf_nan=False)
    parameters: SystemParameters = Field(default_factory=SystemParameters)
    simulation: SimulationConfig = Field(default_factory=SimulationConfig)


def load_config(path: str | Path | None = None) -> SpringSimConfig:
    """Load config from a YAML file.

    Falls back to configs/default.yaml if no path is given, and to the
    built-in defaults if the file does not exist.
    """
    if path is None:
        path = _CONFIGS_DIR / "default.yaml"
    path = Path(path)

    if not path.exists():
        return SpringSimConfig()

    with open(path) as f:
        raw: dict[str, Any] = yaml.safe_load(f) or {}

    return SpringSimConfig(**raw)
