"""Interchangeable decision strategies for the snake."""

from snake_brains.brains.base import Brain
from snake_brains.brains.greedy import GreedyBrain, PickyGreedyBrain, rank_directions
from snake_brains.brains.hamiltonian import (
    HamiltonianBrain,
    corner_twins,
    next_hamiltonian_direction,
)
from snake_brains.brains.impatient import ImpatientBrain, is_safe_shortcut
from snake_brains.brains.registry import ALL_BRAINS, BrainKind, make_brain
from snake_brains.brains.silly import SillyBrain

__all__ = [
    "ALL_BRAINS",
    "Brain",
    "BrainKind",
    "GreedyBrain",
    "HamiltonianBrain",
    "ImpatientBrain",
    "PickyGreedyBrain",
    "SillyBrain",
    "corner_twins",
    "is_safe_shortcut",
    "make_brain",
    "next_hamiltonian_direction",
    "rank_directions",
]
