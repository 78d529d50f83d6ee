"""Empty status component."""

from dataclasses import dataclass
from typing import ClassVar

from svarog.types import StatusKind


@dataclass(frozen=True)
class Empty:
    """Marker for a hit die with zero hit points in it.

    Set by the hit die system whenever an action leaves the die at zero and
    no other rule claims the zero (fortified recovery, temporary shatter).
    Cleared by any positive ``Heal``.
    """

    kind: ClassVar[StatusKind] = StatusKind.EMPTY
