"""Fixed y-axis limits for the live graphs, estimated from early samples.

Locking the axes once data arrives keeps the plots from rescaling every frame.
This is a display heuristic; the physics never reads it.
"""
from __future__ import annotations

import math

import numpy as np

from spring_sim.simulation.buffer import TimeSeriesBuffer
from spring_sim.types.simulation import SystemParameters

PAD_FACTOR = 1.15
DEFAULT_AMPLITUDE = 0.5

YDomain = tuple[float, float]


def _max_abs(values: np.ndarray) -> float:
    return float(np.max(np.abs(values))) if values.size else 0.0


def lock_y_domains(
    buffer: TimeSeriesBuffer,
    parameters: SystemParameters,
    position: float = 0.0,
) -> dict[str, YDomain] | None:
    """Estimate symmetric axis limits for each channel from the amplitude seen so far.

    The amplitude is the largest of the current position, the largest sampled
    displacement, and the largest sampled velocity divided by omega. Velocity,
    acceleration and energy limits follow from that amplitude for an undamped
    oscillator. Returns None until the first sample exists.
    """
    if len(buffer.displacement) == 0:
        return None

    k = parameters.spring_constant
    omega = math.sqrt(max(1e-9, k / parameters.mass))

    observed_x = _max_abs(buffer.displacement.values())
    observed_v = _max_abs(buffer.velocity.values())

    amplitude = max(abs(position), observed_x, observed_v / omega)
    if amplitude == 0:
        amplitude = DEFAULT_AMPLITUDE

    v_max = amplitude * omega
    a_max = amplitude * omega * omega
    e_max = 0.5 * k * amplitude * amplitude

    return {
        "displacement": (-amplitude * PAD_FACTOR, amplitude * PAD_FACTOR),
        "velocity": (-v_max * PAD_FACTOR, v_max * PAD_FACTOR),
        "acceleration": (-a_max * PAD_FACTOR, a_max * PAD_FACTOR),
        "total_energy": (0.0, max(e_max * PAD_FACTOR, 1.0)),
    }
