"""Match configuration."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

from snake_brains.brains.registry import BrainKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameConfig:
    """Board size, brain and pacing for a match.

    Supports JSON serialization for reproducibility.
    """

    width: int = 9
    height: int = 9
    brain: str = BrainKind.IMPATIENT.value
    seed: int | None = None
    delay_ms: int = 60
    max_moves: int | None = None

    def __post_init__(self) -> None:
        if self.width < 2 or self.height < 2:
            raise ValueError("width and height must each be at least 2.")
        if self.brain not in {k.value for k in BrainKind}:
            raise ValueError(f"Unknown brain {self.brain!r}.")
        if self.delay_ms < 0:
            raise ValueError("delay_ms must not be negative.")
        if self.max_moves is not None and self.max_moves < 1:
            raise ValueError("max_moves must be at least 1.")

    def to_dict(self) -> dict:
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        return cls(**json.loads(Path(path).read_text()))
