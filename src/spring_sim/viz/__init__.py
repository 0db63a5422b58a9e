"""Graph rendering for sampled run history."""

from __future__ import annotations

from spring_sim.viz.domains import lock_y_domains
from spring_sim.viz.figures import plot_time_series, setup_graph_style

__all__ = [
    "lock_y_domains",
    "plot_time_series",
    "setup_graph_style",
]
