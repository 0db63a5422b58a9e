"""Matplotlib rendering of a run's sampled history."""

from __future__ import annotations

import matplotlib.pyplot as plt

from spring_sim.simulation.buffer import CHANNELS, TimeSeriesBuffer
from spring_sim.viz.domains import YDomain

CHANNEL_STYLE = {
    "displacement": ("Displacement", "x (m)", "#1f77b4"),
    "velocity": ("Velocity", "v (m/s)", "#2ca02c"),
    "acceleration": ("Acceleration", "a (m/s²)", "#d62728"),
    "total_energy": ("Total Energy", "E (J)", "#9467bd"),
}


def setup_graph_style() -> None:
    """Configure matplotlib for the live graph panels."""
    plt.rcParams.update({
        "font.size": 10,
        "axes.titlesize": 11,
        "axes.labelsize": 10,
        "figure.dpi": 100,
        "savefig.dpi": 150,
        "savefig.bbox": "tight",
        "axes.grid": True,
        "grid.alpha": 0.3,
        "axes.spines.top": False,
        "axes.spines.right": False,
    })


def plot_time_series(
    buffer: TimeSeriesBuffer,
    domains: dict[str, YDomain] | None = None,
    window: float | None = None,
) -> plt.Figure:
    """Plot all four channels over the trailing window, one panel each.

    Args:
        buffer: Sampled history; read only.
        domains: Optional fixed y limits per channel (see lock_y_domains).
        window: Width of the time axis in seconds. Defaults to the buffer window.
    """
    window = buffer.window if window is None else window
    fig, axes = plt.subplots(len(CHANNELS), 1, figsize=(8, 9), sharex=True)

    latest = buffer.displacement.latest
    t_end = max(latest.time, window) if latest is not None else window

    for ax, name in zip(axes, CHANNELS):
        title, ylabel, color = CHANNEL_STYLE[name]
        series = buffer.channel(name)
        ax.plot(series.times(), series.values(), color=color, linewidth=1.5)
        ax.set_title(title)
        ax.set_ylabel(ylabel)
        ax.set_xlim(t_end - window, t_end)
        if domains is not None and name in domains:
            ax.set_ylim(*domains[name])

    axes[-1].set_xlabel("Time (s)")
    fig.tight_layout()
    return fig
