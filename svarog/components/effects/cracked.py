from dataclasses import dataclass
from typing import ClassVar

from svarog.types import StatusKind, Time


@dataclass(frozen=True)
class Cracked:
    """Hit die that chips for 1 damage every ``turns`` turns.

    Stored and serialized only; no system reacts to it yet.
    """

    turns: Time
    kind: ClassVar[StatusKind] = StatusKind.CRACKED
