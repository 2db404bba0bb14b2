"""Grid coordinates and the direction values stored in the field."""

from __future__ import annotations

import enum
from dataclasses import dataclass

import numpy as np


class Direction(enum.IntEnum):
    """Move commands and field cell contents.

    The integer codes are what :class:`~snake_brains.field.Field` stores in
    its array, so ``EMPTY`` must stay ``0``.
    """

    EMPTY = 0
    TERMINATOR = 1
    LEFT = 2
    RIGHT = 3
    UP = 4
    DOWN = 5

    @property
    def delta(self) -> tuple[int, int]:
        """Unit ``(dx, dy)`` vector; zero for non-movement values."""
        return _DELTAS[self]

    def invert(self) -> Direction:
        """Return the opposite direction (non-movement values map to themselves)."""
        return _INVERSES[self]

    def is_movement(self) -> bool:
        return self in MOVEMENTS


# Row 0 is the top of the board, so UP decreases y.
_DELTAS: dict[Direction, tuple[int, int]] = {
    Direction.EMPTY: (0, 0),
    Direction.TERMINATOR: (0, 0),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
}

_INVERSES: dict[Direction, Direction] = {
    Direction.EMPTY: Direction.EMPTY,
    Direction.TERMINATOR: Direction.TERMINATOR,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
}

MOVEMENTS: tuple[Direction, ...] = (
    Direction.LEFT,
    Direction.RIGHT,
    Direction.UP,
    Direction.DOWN,
)


@dataclass(frozen=True)
class Coordinate:
    """An integer lattice point.

    Values may be negative or past the board edge; callers bounds-check
    with :meth:`Field.in_bounds` before indexing.
    """

    x: int
    y: int

    def __sub__(self, other: Coordinate) -> Coordinate:
        return Coordinate(self.x - other.x, self.y - other.y)

    def move_towards(self, direction: Direction) -> Coordinate:
        """Return the neighbouring coordinate one step in *direction*."""
        dx, dy = direction.delta
        return Coordinate(self.x + dx, self.y + dy)

    def manhattan(self, other: Coordinate) -> int:
        return abs(self.x - other.x) + abs(self.y - other.y)

    @classmethod
    def random_in(cls, rng: np.random.Generator, bound: Coordinate) -> Coordinate:
        """Draw a coordinate uniformly from ``[0, bound.x) x [0, bound.y)``."""
        return cls(int(rng.integers(bound.x)), int(rng.integers(bound.y)))

    def to_list(self) -> list[int]:
        return [self.x, self.y]
