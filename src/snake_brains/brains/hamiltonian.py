"""Column-serpentine Hamiltonian cycle and the brain that follows it."""

from __future__ import annotations

from typing import TYPE_CHECKING

from snake_brains.brains.base import Brain
from snake_brains.geometry import Coordinate, Direction

if TYPE_CHECKING:
    from snake_brains.game import Game


def next_hamiltonian_direction(
    width: int, height: int, head: Coordinate, apple: Coordinate,
) -> Direction:
    """Return the move that continues the fixed cycle from *head*.

    Row 0 is walked leftward back to the origin, column 0 goes down, and
    the remaining columns are traversed as an up/down serpentine entered
    from row 1. An odd width weaves the last two columns together in a
    zig-zag.

    An odd×odd board has no Hamiltonian cycle, so the cycle there covers
    every cell but one. Which cell is left out depends on *apple*: while
    the apple sits in row 0 the cycle passes through the top-right corner
    and skips ``(width - 2, 1)`` instead.
    """
    x, y = head.x, head.y
    w, h = width, height

    if y == 0:
        return Direction.LEFT if x > 0 else Direction.DOWN
    if x == w - 1:
        if x % 2 == 1 or (h - y) % 2 == 1:
            return Direction.UP
        if y == 1 and w % 2 == 1 and h % 2 == 1 and apple.y == 0:
            return Direction.UP
        return Direction.LEFT
    if x == w - 2 and w % 2 == 1:
        return Direction.UP if (h - y) % 2 == 0 else Direction.RIGHT
    if x % 2 == 1:
        return Direction.UP if y > 1 else Direction.RIGHT
    return Direction.DOWN if y < h - 1 else Direction.RIGHT


def corner_twins(width: int, height: int) -> tuple[Coordinate, Coordinate] | None:
    """Return the two cells sharing one place on an odd×odd cycle.

    The cycle enters either the top-right corner or ``(width - 2, 1)``
    from ``(width - 1, 1)``, depending on the apple, and both continue to
    ``(width - 2, 0)``. Boards with a full cycle return ``None``.
    """
    if width % 2 == 0 or height % 2 == 0:
        return None
    return Coordinate(width - 1, 0), Coordinate(width - 2, 1)


class HamiltonianBrain(Brain):
    """Follows the Hamiltonian cycle forever; slow but never dies."""

    name = "hamiltonian"

    def choose_direction(self, game: Game) -> Direction | None:
        return next_hamiltonian_direction(
            game.width, game.height, game.head, game.apple,
        )
