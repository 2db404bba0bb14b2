"""Plain-text board rendering."""

from __future__ import annotations

from snake_brains.game import Game
from snake_brains.geometry import Coordinate, Direction

# Body cells store the direction toward the tail; draw the way toward the head.
_ARROWS: dict[Direction, str] = {
    Direction.LEFT: "→",
    Direction.RIGHT: "←",
    Direction.UP: "↓",
    Direction.DOWN: "↑",
}


def _cell(game: Game, pos: Coordinate) -> str:
    if pos == game.head:
        return " # "
    content = game.field.get(pos)
    if content == Direction.TERMINATOR:
        return " + "
    if content == Direction.EMPTY:
        return " o " if pos == game.apple else "   "
    return f" {_ARROWS[content]} "


def render_text(game: Game) -> str:
    """Draw the board with a border and a status line underneath."""
    border = "-" * (game.width * 3 + 2)
    lines = [border]
    for y in range(game.height):
        row = "".join(_cell(game, Coordinate(x, y)) for x in range(game.width))
        lines.append(f"|{row}|")
    lines.append(border)
    per_apple = game.moves / max(game.apples_eaten, 1)
    lines.append(
        f"Apples: {game.apples_eaten}, Moves: {game.moves}, "
        f"Moves/apple: {per_apple:.2f}"
    )
    return "\n".join(lines)
