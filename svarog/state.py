"""Core immutable ECS `State` dataclass.

The :class:`State` is a snapshot of every creature's health at a single turn.
It is transformed by :func:`svarog.step.step`, which returns a *new* ``State``
for each executed action; nothing is mutated in place. This keeps the engine
deterministic and lets several snapshots (e.g. for look-ahead) coexist.

Design notes:

* Component stores are **persistent maps** (``pyrsistent.PMap``) keyed by
    ``EntityID``. Absence of a key means the entity does not currently possess
    that component.
* ``log`` records every executed action together with its ordered responses,
    so presentation layers can replay what happened during a turn.
"""

from dataclasses import dataclass
from typing import Any, Tuple

from pyrsistent import pmap, pvector
from pyrsistent.typing import PMap, PVector

from svarog.actions import HealthAction
from svarog.components import Dead, Health
from svarog.entity import Entity
from svarog.responses import HealthActionResponse
from svarog.types import EntityID


@dataclass(frozen=True)
class ActionRecord:
    """One executed action.

    Attributes:
        turn (int): Turn the action was executed on.
        entity_id (EntityID): Creature that received the action.
        action (HealthAction): The action itself.
        responses (Tuple[HealthActionResponse, ...]): Responses in the order
            the hit dice produced them.
    """

    turn: int
    entity_id: EntityID
    action: HealthAction
    responses: Tuple[HealthActionResponse, ...]


@dataclass(frozen=True)
class State:
    """Immutable ECS world state.

    Attributes:
        entity (PMap[EntityID, Entity]): Registry of entity descriptors.
        health (PMap[EntityID, Health]): Hit dice of each creature.
        dead (PMap[EntityID, Dead]): Creatures whose last hit die shattered.
        log (PVector[ActionRecord]): Executed actions, oldest first.
        turn (int): Turn counter (0-based), advanced once per action.
    """

    entity: PMap[EntityID, Entity] = pmap()
    health: PMap[EntityID, Health] = pmap()
    dead: PMap[EntityID, Dead] = pmap()
    log: PVector[ActionRecord] = pvector()
    turn: int = 0

    @property
    def description(self) -> PMap[str, Any]:
        """Sparse view of the non-empty fields, for diagnostics."""
        description: PMap[str, Any] = pmap()
        for field in self.__dataclass_fields__:
            value = getattr(self, field)
            if isinstance(value, (type(pmap()), type(pvector()))) and not value:
                continue
            description = description.set(field, value)
        return description
