from dataclasses import dataclass
from typing import ClassVar

from svarog.types import StatusKind


@dataclass(frozen=True)
class Grafted:
    """Marker for a hit die that gives no effort. Inert for now."""

    kind: ClassVar[StatusKind] = StatusKind.GRAFTED
