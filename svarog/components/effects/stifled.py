from dataclasses import dataclass
from typing import ClassVar

from svarog.types import StatusKind, Time


@dataclass(frozen=True)
class Stifled:
    """Hit die that gives no effort for the next ``turns`` turns.

    Stored and serialized only; no system reacts to it yet.
    """

    turns: Time
    kind: ClassVar[StatusKind] = StatusKind.STIFLED
