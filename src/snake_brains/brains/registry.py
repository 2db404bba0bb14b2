"""Selection of brains by name."""

from __future__ import annotations

import enum

import numpy as np

from snake_brains.brains.base import Brain
from snake_brains.brains.greedy import GreedyBrain, PickyGreedyBrain
from snake_brains.brains.hamiltonian import HamiltonianBrain
from snake_brains.brains.impatient import ImpatientBrain
from snake_brains.brains.silly import SillyBrain


class BrainKind(enum.Enum):
    """Available brains, ordered roughly from worst to best."""

    SILLY = "silly"
    GREEDY = "greedy"
    PICKY = "picky"
    HAMILTONIAN = "hamiltonian"
    IMPATIENT = "impatient"


ALL_BRAINS: list[BrainKind] = list(BrainKind)


def make_brain(
    kind: BrainKind | str,
    *,
    seed: int | None = None,
    rng: np.random.Generator | None = None,
) -> Brain:
    """Instantiate the brain for *kind*.

    *seed* and *rng* only affect brains that use randomness; *rng* wins
    when both are given.
    """
    try:
        kind = BrainKind(kind)
    except ValueError:
        names = ", ".join(k.value for k in BrainKind)
        raise ValueError(f"Unknown brain {kind!r}; expected one of: {names}.") from None

    if kind is BrainKind.SILLY:
        return SillyBrain(seed=seed, rng=rng)
    if kind is BrainKind.GREEDY:
        return GreedyBrain()
    if kind is BrainKind.PICKY:
        return PickyGreedyBrain()
    if kind is BrainKind.HAMILTONIAN:
        return HamiltonianBrain()
    return ImpatientBrain()
