"""Headless throughput benchmark and random-turn autopilot."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass

import numpy as np

from chain_snake.config import SimulationConfig, TerminationPolicy
from chain_snake.direction import Direction
from chain_snake.simulation import Simulation

logger = logging.getLogger(__name__)

_TURNS: list[Direction] = [
    Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT,
]


@dataclass
class BenchmarkResult:
    """Results from a throughput benchmark run."""

    total_ticks: int
    terminations: int
    max_length: int
    wall_time_seconds: float
    ticks_per_second: float

    def summary(self) -> str:
        return (
            f"Benchmark: {self.total_ticks} ticks, "
            f"{self.terminations} terminations, "
            f"max length {self.max_length} in "
            f"{self.wall_time_seconds:.2f}s | "
            f"{self.ticks_per_second:.1f} ticks/s"
        )


def random_turns(
    sim: Simulation,
    ticks: int,
    rng: np.random.Generator,
    turn_probability: float = 0.2,
) -> int:
    """Step *sim* for *ticks* ticks, requesting a random turn now and then.

    Returns the longest chain seen.
    """
    max_length = len(sim.chain)
    for _ in range(ticks):
        if sim.resolver.committed is Direction.NONE or rng.random() < turn_probability:
            sim.resolver.request(_TURNS[int(rng.integers(len(_TURNS)))])
        sim.step()
        max_length = max(max_length, len(sim.chain))
    return max_length


def benchmark_throughput(
    *,
    ticks: int = 10_000,
    grid_width: int = 16,
    grid_height: int = 12,
    seed: int = 42,
) -> BenchmarkResult:
    """Measure raw tick throughput with no rendering or real-time pacing."""
    config = SimulationConfig(
        grid_width=grid_width,
        grid_height=grid_height,
        termination_policy=TerminationPolicy.RESTART,
        seed=seed,
    )
    sim = Simulation(config)
    rng = np.random.default_rng(seed)

    start = time.perf_counter()
    max_length = random_turns(sim, ticks, rng)
    elapsed = time.perf_counter() - start

    result = BenchmarkResult(
        total_ticks=ticks,
        terminations=sim.terminations,
        max_length=max_length,
        wall_time_seconds=elapsed,
        ticks_per_second=ticks / max(elapsed, 1e-9),
    )
    logger.info(result.summary())
    return result
