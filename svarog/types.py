"""Common type aliases and enumerations.

``StatusKind`` is the key of the per-die status mapping; every status tag
dataclass reports its kind so a die can hold at most one tag of each kind.
"""

from enum import StrEnum, auto


EntityID = int
Amount = int
Index = int
Time = int


class StatusKind(StrEnum):
    """Status tag categories (reflected in serialized hit dice)."""

    VOID = auto()
    EMPTY = auto()
    GRAFTED = auto()
    TEMPORARY = auto()
    GUARDED = auto()
    FORTIFIED = auto()
    STIFLED = auto()
    CRACKED = auto()
    MENDING = auto()


class CommitmentKind(StrEnum):
    """How long a committed hit die stays committed."""

    TURN = auto()
    ENCOUNTER = auto()
    REST = auto()


class ActionKind(StrEnum):
    """Names of the health actions, used by logs and serialization."""

    CREATE = auto()
    ADD_STATUS = auto()
    REMOVE_STATUS = auto()
    CHIP = auto()
    HEAL = auto()
    DRAIN = auto()
    BREAK = auto()
    MEND = auto()
    SHATTER = auto()
    FORTIFY = auto()
