"""Guarded status (negates ``Drain`` and ``Break``)."""

from dataclasses import dataclass
from typing import ClassVar

from svarog.types import StatusKind


@dataclass(frozen=True)
class Guarded:
    """Marker (no data)."""

    kind: ClassVar[StatusKind] = StatusKind.GUARDED
