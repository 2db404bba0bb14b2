"""Random-walk brain."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from snake_brains.brains.base import Brain
from snake_brains.geometry import MOVEMENTS, Direction

if TYPE_CHECKING:
    from snake_brains.game import Game


class SillyBrain(Brain):
    """Picks a uniformly random direction every tick.

    Owns its generator so its choices never disturb the game's apple
    sequence. Seeded from OS entropy unless *seed* or *rng* is given.
    """

    name = "silly"

    def __init__(
        self,
        seed: int | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    def choose_direction(self, game: Game) -> Direction | None:
        return MOVEMENTS[int(self.rng.integers(len(MOVEMENTS)))]
