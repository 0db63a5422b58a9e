"""CLI entry point for spring-sim.

Usage:
    spring-sim demo [seconds]        Run headless and print a summary
    spring-sim realtime [seconds]    Run at frame rate on an asyncio loop, logging samples
    spring-sim plot [path]           Run headless and save the four graphs as an image
    spring-sim check                 Run the energy and window checks
    spring-sim version               Show version
"""
from __future__ import annotations

import logging
import sys

from spring_sim.utils.config import SpringSimConfig, load_config


def main() -> None:
    """Main CLI entry point."""
    if len(sys.argv) < 2:
        print(__doc__)
        sys.exit(0)

    command = sys.argv[1].lower()
    args = sys.argv[2:]

    if command == "demo":
        _run_demo(args)
    elif command == "realtime":
        _run_realtime(args)
    elif command == "plot":
        _run_plot(args)
    elif command == "check":
        _run_check()
    elif command in ("version", "--version", "-v"):
        from spring_sim import __version__
        print(f"spring-sim {__version__}")
    elif command in ("help", "--help", "-h"):
        print(__doc__)
    else:
        print(f"Unknown command: {command}")
        print(__doc__)
        sys.exit(1)


def _setup(config: SpringSimConfig) -> None:
    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


def _seconds(args: list[str], default: float) -> float:
    if not args:
        return default
    try:
        return float(args[0])
    except ValueError:
        print(f"Expected a duration in seconds, got {args[0]!r}")
        sys.exit(1)


def _headless_run(config: SpringSimConfig, seconds: float):
    """Run the configured system for ``seconds`` of simulated time on a manual host."""
    from spring_sim.simulation import ManualScheduler, SimulationRun

    scheduler = ManualScheduler()
    run = SimulationRun(config.parameters, config.simulation, scheduler=scheduler)
    run.set_displacement(config.initial_displacement)
    run.start()
    scheduler.run(round(seconds / config.simulation.timestep))
    run.pause()
    return run


def _run_demo(args: list[str]) -> None:
    """Run headless and print the final state and sampled energy."""
    from spring_sim.physics import natural_frequency, period

    config = load_config()
    _setup(config)
    seconds = _seconds(args, 10.0)
    run = _headless_run(config, seconds)

    p = config.parameters
    state = run.state
    energy = run.series.total_energy.values()
    print(f"\nm={p.mass} kg, k={p.spring_constant} N/m, c={p.damping_coefficient} N*s/m")
    print(f"omega_0 = {natural_frequency(p):.4f} rad/s, period = {period(p):.4f} s")
    print(f"Simulated {state.elapsed_time:.3f} s ({run.run_mode.value})")
    print(f"  position     = {state.position:+.6f} m")
    print(f"  velocity     = {state.velocity:+.6f} m/s")
    print(f"  acceleration = {state.acceleration:+.6f} m/s^2")
    if energy.size:
        print(f"  energy       = {energy[0]:.6f} J -> {energy[-1]:.6f} J "
              f"({len(energy)} samples in window)")


def _run_realtime(args: list[str]) -> None:
    """Drive a run from an asyncio event loop at the configured frame interval."""
    import asyncio

    from spring_sim.simulation import AsyncioScheduler, SimulationRun

    config = load_config()
    _setup(config)
    seconds = _seconds(args, 5.0)
    logger = logging.getLogger("spring_sim.realtime")

    async def _drive() -> None:
        run = SimulationRun(config.parameters, config.simulation, scheduler=AsyncioScheduler())
        run.set_displacement(config.initial_displacement)
        run.start()
        loop = asyncio.get_running_loop()
        deadline = loop.time() + seconds
        while loop.time() < deadline and run.error is None:
            await asyncio.sleep(1.0)
            latest = run.series.displacement.latest
            if latest is not None:
                logger.info(f"t={latest.time:6.2f}s  x={latest.value:+.4f} m  "
                            f"E={run.series.total_energy.latest.value:.4f} J")
        run.pause()
        logger.info(f"Stopped after {run.state.elapsed_time:.2f} s of simulated time")

    asyncio.run(_drive())


def _run_plot(args: list[str]) -> None:
    """Run headless for one window and save the graphs."""
    from pathlib import Path

    import matplotlib
    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    from spring_sim.viz import lock_y_domains, plot_time_series, setup_graph_style

    config = load_config()
    _setup(config)
    path = Path(args[0]) if args else Path(config.output_dir) / "oscillator.png"
    path.parent.mkdir(parents=True, exist_ok=True)

    run = _headless_run(config, config.simulation.window_duration)
    setup_graph_style()
    domains = lock_y_domains(run.series, config.parameters, config.initial_displacement)
    fig = plot_time_series(run.series, domains=domains)
    fig.savefig(path)
    plt.close(fig)
    logging.getLogger("spring_sim.plot").info(f"Saved {path}")


def _run_check() -> None:
    """Run undamped and damped scenarios and report the history checks."""
    from spring_sim.physics import period
    from spring_sim.verification import (
        check_energy_conservation,
        check_energy_monotonic,
        check_window_bound,
    )

    config = load_config()
    _setup(config)

    undamped = config.model_copy(
        update={"parameters": config.parameters.model_copy(update={"damping_coefficient": 0.0})}
    )
    damping = config.parameters.damping_coefficient or 0.5
    damped = config.model_copy(
        update={"parameters": config.parameters.model_copy(update={"damping_coefficient": damping})}
    )

    horizon = 10 * period(undamped.parameters)
    results = [
        check_energy_conservation(_headless_run(undamped, horizon).series.total_energy.values()),
        check_energy_monotonic(_headless_run(damped, 10.0).series.total_energy.values()),
        check_window_bound(_headless_run(damped, 2 * damped.simulation.window_duration).series),
    ]

    failed = 0
    for result in results:
        status = "PASS" if result.passed else "FAIL"
        print(f"  [{status}] {result.name}: {result.message}")
        failed += not result.passed
    sys.exit(1 if failed else 0)


if __name__ == "__main__":
    main()
