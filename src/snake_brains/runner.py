"""Game loop driving a brain against a game."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

import numpy as np

from snake_brains.brains.base import Brain
from snake_brains.game import Game, StepOutcome

logger = logging.getLogger(__name__)


@dataclass
class MatchResult:
    """Final tallies of one match."""

    outcome: StepOutcome
    moves: int
    apples_eaten: int
    length: int

    @property
    def moves_per_apple(self) -> float:
        return self.moves / max(self.apples_eaten, 1)

    def summary(self) -> str:
        return (
            f"{self.outcome.value}: Apples: {self.apples_eaten}, "
            f"Moves: {self.moves}, Moves/apple: {self.moves_per_apple:.2f}"
        )


def match_generators(
    seed: int | None,
) -> tuple[np.random.Generator, np.random.Generator]:
    """Return independent ``(game, brain)`` generators derived from *seed*.

    The same seed always yields the same pair, but the two streams never
    mirror each other.
    """
    game_seq, brain_seq = np.random.SeedSequence(seed).spawn(2)
    return np.random.default_rng(game_seq), np.random.default_rng(brain_seq)


def run_match(
    game: Game,
    brain: Brain,
    *,
    max_moves: int | None = None,
    pacer: Callable[[], None] | None = None,
    on_tick: Callable[[Game], None] | None = None,
) -> MatchResult:
    """Let *brain* play *game* until a terminal outcome.

    *on_tick* is called after every applied move and *pacer* between
    moves. When *max_moves* is reached first the outcome is
    ``CONTINUED``.
    """
    if max_moves is not None and max_moves < 1:
        raise ValueError("max_moves must be at least 1.")

    outcome = game.outcome
    while not outcome.is_terminal:
        if max_moves is not None and game.moves >= max_moves:
            logger.info(
                "Stopped %s after %d moves with %d apples.",
                brain.name, game.moves, game.apples_eaten,
            )
            break
        outcome = game.propose_and_apply(brain.choose_direction(game))
        if on_tick is not None:
            on_tick(game)
        if not outcome.is_terminal and pacer is not None:
            pacer()

    return MatchResult(
        outcome=outcome,
        moves=game.moves,
        apples_eaten=game.apples_eaten,
        length=game.length,
    )
