"""Step-based single-snake game composing the field, head and apple."""

from __future__ import annotations

import enum
import logging

import numpy as np

from snake_brains.errors import StructuralInvariantViolation
from snake_brains.field import Field
from snake_brains.geometry import Coordinate, Direction

logger = logging.getLogger(__name__)


class StepOutcome(enum.Enum):
    """Result of applying one proposed move."""

    CONTINUED = "continued"
    ATE_SNAKE = "ate_snake"
    CRASHED_WALL = "crashed_wall"
    FORFEIT = "forfeit"
    WON = "won"

    @property
    def is_terminal(self) -> bool:
        return self is not StepOutcome.CONTINUED


class Game:
    """Single-snake, step-based game.

    The game is the only writer of its field, head and apple. Brains get
    the game itself and are expected to only read from it. Each call to
    :meth:`propose_and_apply` advances the game by one tick.
    """

    def __init__(
        self,
        width: int = 9,
        height: int = 9,
        *,
        rng: np.random.Generator | None = None,
        seed: int | None = None,
    ) -> None:
        self.field = Field(width, height)
        self.rng = rng if rng is not None else np.random.default_rng(seed)

        self.head = Coordinate.random_in(self.rng, Coordinate(width, height))
        self.field.set(self.head, Direction.TERMINATOR)

        apple = self.field.random_free_cell(self.rng)
        if apple is None:
            raise StructuralInvariantViolation(
                f"No free cell for the first apple on a {width}×{height} field."
            )
        self.apple = apple

        self.apples_eaten = 0
        self.moves = 0
        self.outcome = StepOutcome.CONTINUED

    @property
    def width(self) -> int:
        return self.field.width

    @property
    def height(self) -> int:
        return self.field.height

    @property
    def game_over(self) -> bool:
        return self.outcome.is_terminal

    @property
    def tail(self) -> Coordinate:
        return self.field.tail(self.head)

    @property
    def length(self) -> int:
        return sum(1 for _ in self.field.body(self.head))

    def propose_and_apply(self, direction: Direction | None) -> StepOutcome:
        """Validate *direction* and advance the game by one tick.

        ``None`` or a non-movement direction forfeits the match. Once the
        game is over the final outcome is returned and nothing changes.
        """
        if self.game_over:
            return self.outcome

        self.moves += 1
        self.outcome = self._apply(direction)
        if self.outcome.is_terminal:
            logger.info(
                "Game ended with %s after %d moves and %d apples.",
                self.outcome.value, self.moves, self.apples_eaten,
            )
        return self.outcome

    def _apply(self, direction: Direction | None) -> StepOutcome:
        if direction is None or not direction.is_movement():
            return StepOutcome.FORFEIT

        candidate = self.head.move_towards(direction)
        if not self.field.in_bounds(candidate):
            return StepOutcome.CRASHED_WALL

        # Stepping onto our own tail is legal: drop it before the head moves in.
        if self.field.get(candidate) == Direction.TERMINATOR:
            self.field.drop_tail_from(self.head)
            self.field.set(candidate, direction.invert())
            self.head = candidate
            return StepOutcome.CONTINUED

        if not self.field.is_free(candidate):
            return StepOutcome.ATE_SNAKE

        self.field.set(candidate, direction.invert())
        self.head = candidate

        if candidate == self.apple:
            self.apples_eaten += 1
            logger.debug("Apple %d eaten at %s.", self.apples_eaten, candidate)
            apple = self.field.random_free_cell(self.rng)
            if apple is None:
                return StepOutcome.WON
            self.apple = apple
        else:
            self.field.drop_tail_from(self.head)

        return StepOutcome.CONTINUED

    def get_state(self) -> dict:
        """Return the full, serializable game state."""
        return {
            "moves": self.moves,
            "apples_eaten": self.apples_eaten,
            "outcome": self.outcome.value,
            "head": self.head.to_list(),
            "apple": self.apple.to_list(),
            "field": self.field.to_dict(),
        }
