"""Command-line entry point for headless runs."""

from __future__ import annotations

import argparse
import json
import logging
import sys

logger = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError("must be a positive integer")
    return n


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chain-snake",
        description="Headless grid snake simulation tools.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- simulate ---
    sim_p = sub.add_parser(
        "simulate", help="Run a headless simulation with random turns.",
    )
    sim_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file (flags override it).",
    )
    sim_p.add_argument("--ticks", type=_positive_int, default=200)
    sim_p.add_argument("--seed", type=int, default=None)
    sim_p.add_argument("--width", type=int, default=None)
    sim_p.add_argument("--height", type=int, default=None)
    sim_p.add_argument(
        "--policy", type=str, default=None, choices=["freeze", "restart"],
    )
    sim_p.add_argument(
        "--no-grid", action="store_true",
        help="Leave the occupancy grid out of the printed state.",
    )

    # --- benchmark ---
    bench_p = sub.add_parser(
        "benchmark", help="Measure simulation throughput.",
    )
    bench_p.add_argument("--ticks", type=_positive_int, default=10_000)
    bench_p.add_argument("--width", type=int, default=16)
    bench_p.add_argument("--height", type=int, default=12)
    bench_p.add_argument("--seed", type=int, default=42)

    # --- config ---
    cfg_p = sub.add_parser(
        "config", help="Write a config file with defaults and overrides.",
    )
    cfg_p.add_argument("output", help="Path for the JSON config.")
    cfg_p.add_argument("--seed", type=int, default=None)
    cfg_p.add_argument("--width", type=int, default=None)
    cfg_p.add_argument("--height", type=int, default=None)
    cfg_p.add_argument("--step-interval", type=float, default=None)
    cfg_p.add_argument(
        "--policy", type=str, default=None, choices=["freeze", "restart"],
    )

    return parser


def _load_config(args: argparse.Namespace):
    from chain_snake.config import SimulationConfig

    config = (
        SimulationConfig.load(args.config)
        if getattr(args, "config", None) else SimulationConfig()
    )

    overrides: dict = {}
    flag_map = {
        "seed": "seed",
        "width": "grid_width",
        "height": "grid_height",
        "step_interval": "step_interval",
        "policy": "termination_policy",
    }
    for cli_name, cfg_name in flag_map.items():
        val = getattr(args, cli_name, None)
        if val is not None:
            overrides[cfg_name] = val

    if overrides:
        d = config.to_dict()
        d.update(overrides)
        config = SimulationConfig.from_dict(d)
    return config


def _run_simulate(args: argparse.Namespace) -> int:
    import numpy as np

    from chain_snake.benchmark import random_turns
    from chain_snake.simulation import Simulation

    config = _load_config(args)
    sim = Simulation(config)
    random_turns(sim, args.ticks, np.random.default_rng(config.seed))

    state = sim.get_state()
    if args.no_grid:
        del state["grid"]
    print(json.dumps(state))  # noqa: T201
    return 0


def _run_benchmark(args: argparse.Namespace) -> int:
    from chain_snake.benchmark import benchmark_throughput

    result = benchmark_throughput(
        ticks=args.ticks,
        grid_width=args.width,
        grid_height=args.height,
        seed=args.seed,
    )
    print(result.summary())  # noqa: T201
    return 0


def _run_config(args: argparse.Namespace) -> int:
    config = _load_config(args)
    config.save(args.output)
    print(f"Wrote config to {args.output}")  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``chain-snake`` CLI."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "simulate": _run_simulate,
        "benchmark": _run_benchmark,
        "config": _run_config,
    }
    try:
        return handlers[args.command](args)
    except ValueError as exc:
        logger.error("%s", exc)
        return 2


if __name__ == "__main__":
    sys.exit(main())
