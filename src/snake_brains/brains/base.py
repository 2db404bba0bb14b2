"""Common interface for snake brains."""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from snake_brains.game import Game
    from snake_brains.geometry import Direction


class Brain(abc.ABC):
    """Decides the snake's next move.

    Brains observe the game between ticks and must not mutate it.
    Returning ``None`` forfeits the match.
    """

    name: str = ""

    @abc.abstractmethod
    def choose_direction(self, game: Game) -> Direction | None:
        """Return the direction to move this tick, or ``None`` to give up."""
