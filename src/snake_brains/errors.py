"""Exceptions raised by the snake engine."""

from __future__ import annotations


class StructuralInvariantViolation(RuntimeError):
    """The field's body chain is corrupted.

    Raised when walking the chain leaves the board, lands on an empty cell
    or fails to reach the tail within ``width * height`` steps. This is a
    programming defect, not a game event, and must abort the match.
    """
