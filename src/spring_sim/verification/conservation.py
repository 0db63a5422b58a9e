"""Energy and window checks over sampled run history."""

from __future__ import annotations

import numpy as np

from spring_sim.simulation.buffer import TimeSeriesBuffer
from spring_sim.types.validation import CheckResult


def check_energy_conservation(energies: np.ndarray, tolerance: float = 0.01) -> CheckResult:
    """Check that undamped energy stays within a band around its mean.

    The band is (max - min) / mean over the given samples.

    Args:
        energies: Total energy at each sample.
        tolerance: Maximum allowed relative band.
    """
    energies = np.asarray(energies, dtype=np.float64)
    if energies.size < 2:
        return CheckResult(
            name="energy_conservation",
            passed=True,
            value=0.0,
            threshold=tolerance,
            message="Fewer than two samples; trivially conserved.",
        )

    mean = float(np.mean(energies))
    spread = float(np.max(energies) - np.min(energies))
    band = spread / mean if mean > 0 else spread
    return CheckResult(
        name="energy_conservation",
        passed=bool(band <= tolerance),
        value=band,
        threshold=tolerance,
        message=f"Relative energy band: {band:.2e}",
    )


def check_energy_monotonic(energies: np.ndarray, tolerance: float = 1e-9) -> CheckResult:
    """Check that damped energy never increases between samples.

    An increase is tolerated up to ``tolerance`` relative to the first sample.
    """
    energies = np.asarray(energies, dtype=np.float64)
    if energies.size < 2:
        return CheckResult(
            name="energy_monotonic",
            passed=True,
            value=0.0,
            threshold=tolerance,
            message="Fewer than two samples.",
        )

    scale = max(abs(float(energies[0])), 1e-30)
    max_rise = float(np.max(np.diff(energies))) / scale
    return CheckResult(
        name="energy_monotonic",
        passed=bool(max_rise <= tolerance),
        value=max(max_rise, 0.0),
        threshold=tolerance,
        message=f"Largest relative energy increase: {max_rise:.2e}",
    )


def check_window_bound(buffer: TimeSeriesBuffer, window: float | None = None) -> CheckResult:
    """Check that every channel's oldest sample lies within ``window`` of the latest."""
    window = buffer.window if window is None else window
    worst = 0.0
    for times, _ in buffer.as_arrays().values():
        if times.size == 0:
            continue
        worst = max(worst, float(times[-1] - times[0]))
    return CheckResult(
        name="window_bound",
        passed=bool(worst <= window + 1e-9),
        value=worst,
        threshold=window,
        message=f"Widest channel span: {worst:.3f}s (window {window}s)",
    )
