"""Effort components.

Per-die bookkeeping of whether the die's effort has been committed, and for
how long. Carried and serialized; no action in the current set touches it.
"""

from dataclasses import dataclass
from typing import ClassVar, Union

from svarog.types import Amount, CommitmentKind


@dataclass(frozen=True)
class TurnCommitment:
    """Committed for a number of turns."""

    amount: Amount
    kind: ClassVar[CommitmentKind] = CommitmentKind.TURN


@dataclass(frozen=True)
class EncounterCommitment:
    """Committed until the encounter ends."""

    kind: ClassVar[CommitmentKind] = CommitmentKind.ENCOUNTER


@dataclass(frozen=True)
class RestCommitment:
    """Committed until the next rest."""

    kind: ClassVar[CommitmentKind] = CommitmentKind.REST


Commitment = Union[TurnCommitment, EncounterCommitment, RestCommitment]


@dataclass(frozen=True)
class Uncommitted:
    """Marker (no data)."""

    pass


@dataclass(frozen=True)
class Committed:
    """Effort spent on a commitment.

    Attributes:
        commitment: What the effort is committed to.
    """

    commitment: Commitment


Effort = Union[Uncommitted, Committed]
