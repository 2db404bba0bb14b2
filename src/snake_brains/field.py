"""Board representation doubling as the snake's body list."""

from __future__ import annotations

from collections.abc import Iterator

import numpy as np

from snake_brains.errors import StructuralInvariantViolation
from snake_brains.geometry import Coordinate, Direction


class Field:
    """NumPy-backed grid of :class:`Direction` codes.

    Every occupied cell stores the direction to the next segment toward the
    tail, so the body is an implicit linked list that starts at the head
    (tracked by the game) and ends at the single cell holding
    ``Direction.TERMINATOR``. ``EMPTY`` cells are free space.

    Coordinates are ``(x, y)``; the array is indexed ``[y, x]``.
    """

    def __init__(self, width: int, height: int) -> None:
        if width < 2 or height < 2:
            raise ValueError("Field dimensions must be at least 2×2.")
        self.width = width
        self.height = height
        self.cells = np.zeros((height, width), dtype=np.int8)

    @property
    def size(self) -> int:
        return self.width * self.height

    def clear(self) -> None:
        """Reset all cells to empty."""
        self.cells[:] = Direction.EMPTY

    def in_bounds(self, pos: Coordinate) -> bool:
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height

    def get(self, pos: Coordinate) -> Direction:
        """Return the direction stored at *pos* (no bounds check)."""
        return Direction(self.cells[pos.y, pos.x])

    def set(self, pos: Coordinate, direction: Direction) -> None:
        """Store *direction* at *pos* (no bounds check)."""
        self.cells[pos.y, pos.x] = direction

    def is_free(self, pos: Coordinate) -> bool:
        return bool(self.cells[pos.y, pos.x] == Direction.EMPTY)

    def next(self, pos: Coordinate) -> Coordinate:
        """Follow the chain one step from *pos* toward the tail."""
        return pos.move_towards(self.get(pos))

    def free_count(self) -> int:
        return int(np.count_nonzero(self.cells == Direction.EMPTY))

    def random_free_cell(self, rng: np.random.Generator) -> Coordinate | None:
        """Return the first free cell of a scan starting at a random offset.

        The scan is row-major and wraps around both axes, so for a given
        offset the visiting order is always the same. Returns ``None`` when
        the board is full.
        """
        start_x = int(rng.integers(self.width))
        start_y = int(rng.integers(self.height))
        for dy in range(self.height):
            y = (start_y + dy) % self.height
            for dx in range(self.width):
                x = (start_x + dx) % self.width
                if self.cells[y, x] == Direction.EMPTY:
                    return Coordinate(x, y)
        return None

    def body(self, head: Coordinate) -> Iterator[Coordinate]:
        """Yield the snake's cells from *head* to the tail."""
        pos = head
        for _ in range(self.size):
            self._check_link(pos)
            yield pos
            if self.get(pos) == Direction.TERMINATOR:
                return
            pos = self.next(pos)
        raise StructuralInvariantViolation(
            f"Body chain from {head} did not reach a tail within "
            f"{self.size} cells."
        )

    def tail(self, head: Coordinate) -> Coordinate:
        """Return the cell holding the terminator of the chain from *head*."""
        for pos in self.body(head):
            last = pos
        return last

    def drop_tail_from(self, head: Coordinate) -> Coordinate:
        """Vacate the tail cell and mark its predecessor as the new tail.

        Returns the vacated coordinate.
        """
        if self.get(head) == Direction.TERMINATOR:
            raise StructuralInvariantViolation(
                f"Cannot drop the tail of a single-cell snake at {head}."
            )
        prev = head
        for _ in range(self.size):
            self._check_link(prev)
            pos = self.next(prev)
            self._check_link(pos)
            if self.get(pos) == Direction.TERMINATOR:
                self.set(prev, Direction.TERMINATOR)
                self.set(pos, Direction.EMPTY)
                return pos
            prev = pos
        raise StructuralInvariantViolation(
            f"Body chain from {head} did not reach a tail within "
            f"{self.size} cells."
        )

    def _check_link(self, pos: Coordinate) -> None:
        if not self.in_bounds(pos):
            raise StructuralInvariantViolation(f"Body chain left the board at {pos}.")
        if self.is_free(pos):
            raise StructuralInvariantViolation(f"Body chain hit an empty cell at {pos}.")

    def to_dict(self) -> dict:
        """Serialize field state to a dictionary."""
        return {
            "width": self.width,
            "height": self.height,
            "cells": self.cells.tolist(),
        }
