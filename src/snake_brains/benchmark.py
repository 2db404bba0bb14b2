"""Headless benchmarking of brains over seeded matches."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass

import numpy as np

from snake_brains.brains.registry import BrainKind, make_brain
from snake_brains.game import Game, StepOutcome
from snake_brains.runner import match_generators, run_match

logger = logging.getLogger(__name__)


@dataclass
class BenchmarkResult:
    """Aggregated results of a benchmark run."""

    brain: str
    width: int
    height: int
    total_games: int
    wins: int
    crashes: int
    forfeits: int
    total_moves: int
    total_apples: int
    wall_time_seconds: float

    @property
    def moves_per_apple(self) -> float:
        return self.total_moves / max(self.total_apples, 1)

    def summary(self) -> str:
        return (
            f"Benchmark: {self.brain} on {self.width}x{self.height}, "
            f"{self.total_games} games | {self.wins} won, "
            f"{self.crashes} crashed, {self.forfeits} forfeited | "
            f"{self.total_apples} apples in {self.total_moves} moves "
            f"({self.moves_per_apple:.2f} moves/apple) in "
            f"{self.wall_time_seconds:.2f}s"
        )


def benchmark_brain(
    kind: BrainKind | str,
    *,
    width: int = 9,
    height: int = 9,
    num_games: int = 10,
    seed: int | None = 42,
    max_moves: int | None = None,
) -> BenchmarkResult:
    """Play *num_games* matches of *kind* and tally the outcomes.

    Each match gets its own seed drawn from a generator seeded with
    *seed*, split into separate game and brain streams, so a run is
    reproducible. *max_moves* defaults to a budget generous enough for
    a Hamiltonian walk to fill the board.
    """
    if num_games < 1:
        raise ValueError("num_games must be at least 1.")
    kind = BrainKind(kind)
    if max_moves is None:
        max_moves = (width * height) ** 2 + width * height

    rng = np.random.default_rng(seed)
    wins = crashes = forfeits = 0
    total_moves = total_apples = 0
    start = time.perf_counter()

    for _ in range(num_games):
        match_seed = int(rng.integers(2**31))
        game_rng, brain_rng = match_generators(match_seed)
        game = Game(width, height, rng=game_rng)
        brain = make_brain(kind, rng=brain_rng)
        result = run_match(game, brain, max_moves=max_moves)

        total_moves += result.moves
        total_apples += result.apples_eaten
        if result.outcome is StepOutcome.WON:
            wins += 1
        elif result.outcome in (StepOutcome.CRASHED_WALL, StepOutcome.ATE_SNAKE):
            crashes += 1
        elif result.outcome is StepOutcome.FORFEIT:
            forfeits += 1

    elapsed = time.perf_counter() - start
    result = BenchmarkResult(
        brain=kind.value,
        width=width,
        height=height,
        total_games=num_games,
        wins=wins,
        crashes=crashes,
        forfeits=forfeits,
        total_moves=total_moves,
        total_apples=total_apples,
        wall_time_seconds=elapsed,
    )
    logger.info(result.summary())
    return result
