"""Tests for the Field module."""

import numpy as np
import pytest

from snake_brains.errors import StructuralInvariantViolation
from snake_brains.field import Field
from snake_brains.geometry import MOVEMENTS, Coordinate, Direction


def _paint(field: Field, cells: list[tuple[int, int]]) -> Coordinate:
    """Draw a snake given head-first cells; returns the head."""
    coords = [Coordinate(x, y) for x, y in cells]
    for cur, nxt in zip(coords, coords[1:]):
        step = next(d for d in MOVEMENTS if cur.move_towards(d) == nxt)
        field.set(cur, step)
    field.set(coords[-1], Direction.TERMINATOR)
    return coords[0]


class TestFieldInit:
    def test_dimensions(self):
        field = Field(width=6, height=4)
        assert field.width == 6
        assert field.height == 4
        assert field.cells.shape == (4, 6)
        assert field.size == 24

    def test_minimum_size_enforced(self):
        with pytest.raises(ValueError, match="at least 2"):
            Field(width=1, height=4)
        with pytest.raises(ValueError, match="at least 2"):
            Field(width=4, height=1)

    def test_all_cells_start_empty(self):
        field = Field(width=5, height=5)
        assert np.all(field.cells == Direction.EMPTY)
        assert field.free_count() == 25


class TestFieldOperations:
    def test_set_and_get(self):
        field = Field(width=5, height=3)
        field.set(Coordinate(4, 2), Direction.UP)
        assert field.get(Coordinate(4, 2)) == Direction.UP
        assert field.cells[2, 4] == Direction.UP

    def test_in_bounds(self):
        field = Field(width=5, height=3)
        assert field.in_bounds(Coordinate(0, 0))
        assert field.in_bounds(Coordinate(4, 2))
        assert not field.in_bounds(Coordinate(-1, 0))
        assert not field.in_bounds(Coordinate(5, 0))
        assert not field.in_bounds(Coordinate(0, 3))

    def test_is_free(self):
        field = Field(width=3, height=3)
        field.set(Coordinate(1, 1), Direction.TERMINATOR)
        assert not field.is_free(Coordinate(1, 1))
        assert field.is_free(Coordinate(0, 1))

    def test_next_follows_stored_direction(self):
        field = Field(width=3, height=3)
        field.set(Coordinate(1, 1), Direction.DOWN)
        assert field.next(Coordinate(1, 1)) == Coordinate(1, 2)

    def test_clear(self):
        field = Field(width=3, height=3)
        _paint(field, [(0, 0), (1, 0)])
        field.clear()
        assert field.free_count() == 9

    def test_to_dict(self):
        field = Field(width=3, height=2)
        field.set(Coordinate(2, 1), Direction.TERMINATOR)
        d = field.to_dict()
        assert d["width"] == 3
        assert d["height"] == 2
        assert d["cells"][1][2] == Direction.TERMINATOR


class TestFieldBody:
    def test_body_walks_head_to_tail(self):
        field = Field(width=4, height=4)
        cells = [(1, 1), (2, 1), (2, 2), (1, 2), (0, 2)]
        head = _paint(field, cells)
        assert [(c.x, c.y) for c in field.body(head)] == cells
        assert field.tail(head) == Coordinate(0, 2)

    def test_single_cell_body(self):
        field = Field(width=2, height=2)
        head = _paint(field, [(1, 1)])
        assert list(field.body(head)) == [head]
        assert field.tail(head) == head

    def test_cyclic_chain_is_fatal(self):
        field = Field(width=2, height=2)
        field.set(Coordinate(0, 0), Direction.RIGHT)
        field.set(Coordinate(1, 0), Direction.DOWN)
        field.set(Coordinate(1, 1), Direction.LEFT)
        field.set(Coordinate(0, 1), Direction.UP)
        with pytest.raises(StructuralInvariantViolation, match="did not reach"):
            list(field.body(Coordinate(0, 0)))

    def test_chain_leaving_board_is_fatal(self):
        field = Field(width=3, height=3)
        field.set(Coordinate(0, 0), Direction.LEFT)
        with pytest.raises(StructuralInvariantViolation, match="left the board"):
            list(field.body(Coordinate(0, 0)))

    def test_chain_into_empty_cell_is_fatal(self):
        field = Field(width=3, height=3)
        field.set(Coordinate(0, 0), Direction.RIGHT)
        with pytest.raises(StructuralInvariantViolation, match="empty cell"):
            field.tail(Coordinate(0, 0))


class TestDropTail:
    def test_vacates_tail_and_marks_predecessor(self):
        field = Field(width=4, height=4)
        head = _paint(field, [(0, 0), (1, 0), (2, 0), (2, 1)])
        vacated = field.drop_tail_from(head)
        assert vacated == Coordinate(2, 1)
        assert field.get(vacated) == Direction.EMPTY
        assert field.get(Coordinate(2, 0)) == Direction.TERMINATOR
        assert [(c.x, c.y) for c in field.body(head)] == [(0, 0), (1, 0), (2, 0)]

    def test_two_cell_snake_leaves_head_as_tail(self):
        field = Field(width=3, height=3)
        head = _paint(field, [(1, 1), (1, 2)])
        field.drop_tail_from(head)
        assert field.get(head) == Direction.TERMINATOR
        assert field.is_free(Coordinate(1, 2))

    def test_single_cell_snake_is_fatal(self):
        field = Field(width=3, height=3)
        head = _paint(field, [(1, 1)])
        with pytest.raises(StructuralInvariantViolation, match="single-cell"):
            field.drop_tail_from(head)

    def test_cyclic_chain_is_fatal(self):
        field = Field(width=2, height=2)
        field.set(Coordinate(0, 0), Direction.RIGHT)
        field.set(Coordinate(1, 0), Direction.DOWN)
        field.set(Coordinate(1, 1), Direction.LEFT)
        field.set(Coordinate(0, 1), Direction.UP)
        with pytest.raises(StructuralInvariantViolation):
            field.drop_tail_from(Coordinate(0, 0))


class TestRandomFreeCell:
    def test_never_selects_occupied_cell(self):
        field = Field(width=4, height=4)
        _paint(field, [(0, 0), (1, 0), (2, 0), (3, 0), (3, 1), (2, 1)])
        rng = np.random.default_rng(3)
        for _ in range(100):
            pos = field.random_free_cell(rng)
            assert pos is not None
            assert field.is_free(pos)

    def test_single_free_cell_always_found(self):
        field = Field(width=5, height=4)
        field.cells[:] = Direction.LEFT
        only = Coordinate(3, 2)
        field.set(only, Direction.EMPTY)
        rng = np.random.default_rng(11)
        for _ in range(50):
            assert field.random_free_cell(rng) == only

    def test_full_board_returns_none(self):
        field = Field(width=2, height=2)
        field.cells[:] = Direction.UP
        assert field.random_free_cell(np.random.default_rng(0)) is None

    def test_same_seed_same_cell(self):
        field = Field(width=7, height=5)
        _paint(field, [(3, 2), (4, 2), (5, 2)])
        a = field.random_free_cell(np.random.default_rng(42))
        b = field.random_free_cell(np.random.default_rng(42))
        assert a == b

    def test_scan_wraps_row_major_from_offset(self):
        field = Field(width=3, height=3)
        # Offset (2, 2) is occupied; the scan wraps to x=0 on the same row.
        field.set(Coordinate(2, 2), Direction.TERMINATOR)

        class _FixedRng:
            def integers(self, _n):
                return 2

        assert field.random_free_cell(_FixedRng()) == Coordinate(0, 2)

    def test_scan_wraps_to_next_row(self):
        field = Field(width=2, height=2)
        field.set(Coordinate(1, 1), Direction.TERMINATOR)
        field.set(Coordinate(0, 1), Direction.RIGHT)

        class _FixedRng:
            def integers(self, _n):
                return 1

        assert field.random_free_cell(_FixedRng()) == Coordinate(1, 0)
