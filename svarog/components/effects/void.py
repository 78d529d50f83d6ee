"""Void status (a broken hit die that has no influence)."""

from dataclasses import dataclass
from typing import ClassVar

from svarog.types import StatusKind


@dataclass(frozen=True)
class Void:
    """Marker (no data). Added by ``Break``, removed by ``Mend``."""

    kind: ClassVar[StatusKind] = StatusKind.VOID
