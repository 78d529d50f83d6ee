"""Property component aggregates.

This module re-exports *property* components: the data a creature's health is
made of (:class:`Health`, :class:`HitDie`, :class:`Value`), the per-die effort
bookkeeping, and the :class:`Dead` marker. Status tags are kept in the sibling
:mod:`svarog.components.effects` package.

All properties are immutable dataclasses; systems return new instances rather
than mutating existing ones.
"""

from .dead import Dead
from .effort import (
    Commitment,
    Committed,
    Effort,
    EncounterCommitment,
    RestCommitment,
    TurnCommitment,
    Uncommitted,
)
from .health import Health
from .hit_die import HitDie
from .influence import Influence
from .value import Value

__all__ = [
    "Commitment",
    "Committed",
    "Dead",
    "Effort",
    "EncounterCommitment",
    "Health",
    "HitDie",
    "Influence",
    "RestCommitment",
    "TurnCommitment",
    "Uncommitted",
    "Value",
]
