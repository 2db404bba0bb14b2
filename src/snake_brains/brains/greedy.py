"""Greedy brains that head straight for the apple."""

from __future__ import annotations

from typing import TYPE_CHECKING

from snake_brains.brains.base import Brain
from snake_brains.geometry import MOVEMENTS, Coordinate, Direction

if TYPE_CHECKING:
    from snake_brains.game import Game

# Cost of a move that would hit a wall or the body.
_BLOCKED = 999


def rank_directions(head: Coordinate, apple: Coordinate) -> list[Direction]:
    """Order the four moves by how directly they approach *apple*.

    The axis with the larger distance comes first (ties go to x), then
    the other axis toward the apple, then the two moves away from it with
    the least useful one last.
    """
    dx = apple.x - head.x
    dy = apple.y - head.y
    toward_x = Direction.RIGHT if dx > 0 else Direction.LEFT
    toward_y = Direction.DOWN if dy > 0 else Direction.UP
    if abs(dx) >= abs(dy):
        primary, secondary = toward_x, toward_y
    else:
        primary, secondary = toward_y, toward_x
    return [primary, secondary, secondary.invert(), primary.invert()]


class GreedyBrain(Brain):
    """Moves along the dominant axis toward the apple, ignoring obstacles."""

    name = "greedy"

    def choose_direction(self, game: Game) -> Direction | None:
        return rank_directions(game.head, game.apple)[0]


class PickyGreedyBrain(Brain):
    """Greedy, but only considers moves onto free in-bounds cells."""

    name = "picky"

    def choose_direction(self, game: Game) -> Direction | None:
        best = min(MOVEMENTS, key=lambda d: self._cost(game, d))
        if self._cost(game, best) >= _BLOCKED:
            return None
        return best

    @staticmethod
    def _cost(game: Game, direction: Direction) -> int:
        pos = game.head.move_towards(direction)
        if not game.field.in_bounds(pos) or not game.field.is_free(pos):
            return _BLOCKED
        return pos.manhattan(game.apple)
