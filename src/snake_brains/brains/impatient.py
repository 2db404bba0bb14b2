"""Hamiltonian brain that takes verified shortcuts toward the apple."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from snake_brains.brains.base import Brain
from snake_brains.brains.greedy import rank_directions
from snake_brains.brains.hamiltonian import corner_twins, next_hamiltonian_direction
from snake_brains.geometry import MOVEMENTS, Coordinate, Direction

if TYPE_CHECKING:
    from snake_brains.field import Field
    from snake_brains.game import Game

logger = logging.getLogger(__name__)


def _place(
    pos: Coordinate, twins: tuple[Coordinate, Coordinate] | None,
) -> tuple[Coordinate, ...]:
    """Cells occupying the same place on the cycle as *pos*."""
    if twins is not None and pos in twins:
        return twins
    return (pos,)


def _place_is_free(field: Field, cells: tuple[Coordinate, ...]) -> bool:
    return all(field.is_free(cell) for cell in cells)


def is_safe_shortcut(game: Game, start: Coordinate) -> bool:
    """Check whether following the cycle from *start* is safe and pays off.

    Walks the Hamiltonian cycle from *start* until it reaches the place
    of the current tail. Every place passed on the way must be free and
    one of them (or *start* itself) must hold the apple. A walk that does
    not reach the tail within ``width * height`` steps is rejected.

    On odd×odd boards the two corner twins count as one place, whichever
    of them the cycle currently routes through. Both twins must be free
    for the walk to pass, and reaching either twin of the tail ends the
    walk.
    """
    field = game.field
    twins = corner_twins(field.width, field.height)
    tail_place = _place(game.tail, twins)
    pos = start
    if not _place_is_free(field, _place(pos, twins)):
        return False
    saw_apple = pos == game.apple
    for _ in range(field.size):
        pos = pos.move_towards(
            next_hamiltonian_direction(field.width, field.height, pos, game.apple),
        )
        if pos in tail_place:
            return saw_apple
        if not _place_is_free(field, _place(pos, twins)):
            return False
        saw_apple = saw_apple or pos == game.apple
    return False


class ImpatientBrain(Brain):
    """Greedy when provably safe, Hamiltonian otherwise.

    The greedy candidate is only taken if walking the cycle from the new
    head back to the tail crosses free places exclusively and passes the
    apple, which keeps the body ordered along the cycle with at most one
    segment per place.
    """

    name = "impatient"

    def choose_direction(self, game: Game) -> Direction | None:
        fallback = self._cycle_move(game)
        for direction in rank_directions(game.head, game.apple):
            candidate = game.head.move_towards(direction)
            if game.field.in_bounds(candidate) and game.field.is_free(candidate):
                break
        else:
            return fallback

        if direction is not fallback and is_safe_shortcut(game, candidate):
            logger.debug("Shortcut %s from %s.", direction.name, game.head)
            return direction
        return fallback

    @staticmethod
    def _cycle_move(game: Game) -> Direction:
        """Next cycle move, stepping onto the tail rather than eating beside it.

        Eating at one corner twin while the tail sits on the other would
        leave two segments in one place, and the next cycle move would run
        into the body. Following the tail first clears the corner, unless
        the apple is the last free cell.
        """
        direction = next_hamiltonian_direction(
            game.width, game.height, game.head, game.apple,
        )
        twins = corner_twins(game.width, game.height)
        target = game.head.move_towards(direction)
        if twins is None or target != game.apple or target not in twins:
            return direction
        other = twins[1] if target == twins[0] else twins[0]
        if other != game.tail or game.field.free_count() == 1:
            return direction
        logger.debug("Following the tail into %s before eating at %s.", other, target)
        return next(d for d in MOVEMENTS if game.head.move_towards(d) == other)
