"""Temporary status component."""

from dataclasses import dataclass
from typing import ClassVar

from svarog.types import StatusKind


@dataclass(frozen=True)
class Temporary:
    """Marker for a hit die that shatters when it becomes empty.

    The die itself only reports the shatter; removing it from the sequence is
    up to the owning health.
    """

    kind: ClassVar[StatusKind] = StatusKind.TEMPORARY
