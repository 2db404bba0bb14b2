"""Tests for the brain benchmarking utilities."""

import pytest

from snake_brains.benchmark import BenchmarkResult, benchmark_brain


class TestBenchmarkResult:
    def test_summary_format(self):
        result = BenchmarkResult(
            brain="hamiltonian",
            width=5,
            height=5,
            total_games=4,
            wins=4,
            crashes=0,
            forfeits=0,
            total_moves=1000,
            total_apples=96,
            wall_time_seconds=0.5,
        )
        summary = result.summary()
        assert "hamiltonian on 5x5" in summary
        assert "4 games" in summary
        assert "4 won" in summary
        assert "moves/apple" in summary


class TestBenchmarkBrain:
    def test_hamiltonian_always_wins(self):
        result = benchmark_brain("hamiltonian", width=4, height=4, num_games=3)
        assert result.total_games == 3
        assert result.wins == 3
        assert result.crashes == 0
        assert result.total_apples == 3 * 15

    def test_greedy_eventually_crashes(self):
        result = benchmark_brain("greedy", width=6, height=6, num_games=3)
        assert result.wins + result.crashes + result.forfeits <= 3
        assert result.wins == 0

    def test_reproducible(self):
        a = benchmark_brain("silly", width=5, height=5, num_games=3, seed=1)
        b = benchmark_brain("silly", width=5, height=5, num_games=3, seed=1)
        assert a.total_moves == b.total_moves
        assert a.total_apples == b.total_apples

    def test_num_games_must_be_positive(self):
        with pytest.raises(ValueError, match="num_games must be at least 1"):
            benchmark_brain("greedy", num_games=0)

    def test_unknown_brain(self):
        with pytest.raises(ValueError):
            benchmark_brain("clever", num_games=1)
