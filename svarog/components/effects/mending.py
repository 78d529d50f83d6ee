from dataclasses import dataclass
from typing import ClassVar

from svarog.types import StatusKind, Time


@dataclass(frozen=True)
class Mending:
    """Hit die that heals 1 damage every ``turns`` turns.

    Stored and serialized only; no system reacts to it yet.
    """

    turns: Time
    kind: ClassVar[StatusKind] = StatusKind.MENDING
