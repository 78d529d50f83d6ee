"""Hit die component.

One bounded health pool plus the status tags that alter how it reacts to
actions. The reactions themselves live in :mod:`svarog.systems.hit_die`.
"""

from dataclasses import dataclass, field

from pyrsistent import pmap, pvector
from pyrsistent.typing import PMap, PVector

from svarog.components.effects import StatusTag
from svarog.components.properties.effort import Effort, Uncommitted
from svarog.components.properties.influence import Influence
from svarog.components.properties.value import Value
from svarog.types import Amount, StatusKind


@dataclass(frozen=True)
class HitDie:
    """A single hit die.

    Attributes:
        value: Hit point pool of the die.
        effort: Whether the die's effort is committed.
        statuses: Status tags keyed by their kind. At most one tag per kind.
        influences: Ordered influences (always empty for now).
    """

    value: Value
    effort: Effort = field(default_factory=Uncommitted)
    statuses: PMap[StatusKind, StatusTag] = pmap()
    influences: PVector[Influence] = pvector()

    @classmethod
    def new(cls, size: Amount) -> "HitDie":
        """Return an uncommitted die of capacity ``size`` with no statuses."""
        return cls(value=Value.new(size))

    def has(self, kind: StatusKind) -> bool:
        """Return True if a tag of ``kind`` is present."""
        return kind in self.statuses
