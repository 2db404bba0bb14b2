"""Snake Brains — autonomous snake simulation core."""

from snake_brains.errors import StructuralInvariantViolation
from snake_brains.field import Field
from snake_brains.game import Game, StepOutcome
from snake_brains.geometry import MOVEMENTS, Coordinate, Direction
from snake_brains.runner import MatchResult, run_match

__all__ = [
    "MOVEMENTS",
    "Coordinate",
    "Direction",
    "Field",
    "Game",
    "MatchResult",
    "StepOutcome",
    "StructuralInvariantViolation",
    "run_match",
]
