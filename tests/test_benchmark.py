"""Tests for the benchmarking utilities."""

import numpy as np

from chain_snake.benchmark import BenchmarkResult, benchmark_throughput, random_turns
from chain_snake.config import SimulationConfig
from chain_snake.direction import Direction
from chain_snake.simulation import Simulation


class TestBenchmarkResult:
    def test_summary_format(self):
        result = BenchmarkResult(
            total_ticks=500,
            terminations=3,
            max_length=7,
            wall_time_seconds=1.5,
            ticks_per_second=333.3,
        )
        summary = result.summary()
        assert "500 ticks" in summary
        assert "3 terminations" in summary
        assert "max length 7" in summary
        assert "ticks/s" in summary


class TestRandomTurns:
    def test_starts_moving(self):
        sim = Simulation(SimulationConfig(seed=0), clock=lambda: 0.0)
        random_turns(sim, 1, np.random.default_rng(0))
        assert sim.resolver.committed is not Direction.NONE

    def test_stops_quietly_when_frozen(self):
        sim = Simulation(
            SimulationConfig(grid_width=4, grid_height=4, seed=0),
            clock=lambda: 0.0,
        )
        random_turns(sim, 200, np.random.default_rng(0))
        assert sim.get_state()["status"] == "terminated"
        assert len(sim.chain) == 1


class TestBenchmarkThroughput:
    def test_basic_benchmark(self):
        result = benchmark_throughput(ticks=500, grid_width=8, grid_height=8)
        assert result.total_ticks == 500
        assert result.terminations > 0
        assert result.max_length >= 1
        assert result.wall_time_seconds > 0
        assert result.ticks_per_second > 0

    def test_deterministic_counts(self):
        a = benchmark_throughput(ticks=300, grid_width=8, grid_height=8, seed=3)
        b = benchmark_throughput(ticks=300, grid_width=8, grid_height=8, seed=3)
        assert a.terminations == b.terminations
        assert a.max_length == b.max_length
