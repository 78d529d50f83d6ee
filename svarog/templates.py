"""Creature templates.

A template describes a creature's starting health: its hit dice, left to
right, and the statuses each die starts with. Templates are plain data
(usually loaded from ``config.yaml``, see :mod:`svarog.config`) and are
materialized by replaying ``Create`` / ``AddStatus`` actions through the
health system, so a template can never produce a health the rules could not.
"""

from dataclasses import dataclass, replace
from typing import Any, List, Mapping, Optional, Tuple

from svarog.actions import AddStatus, Create
from svarog.components import Health, StatusTag
from svarog.entity import Entity, new_entity_id
from svarog.serialization import status_from_dict
from svarog.state import State
from svarog.systems.health import health_system
from svarog.types import Amount, EntityID


@dataclass(frozen=True)
class HitDieTemplate:
    """Starting hit die.

    Attributes:
        size: Hit points of the die. Must be positive.
        statuses: Statuses added to the die once created.
    """

    size: Amount
    statuses: Tuple[StatusTag, ...] = ()


@dataclass(frozen=True)
class CreatureTemplate:
    name: str
    hit_dice: Tuple[HitDieTemplate, ...] = ()


def build_health(template: CreatureTemplate) -> Health:
    """Return the starting health described by ``template``."""
    health = Health()
    for hit_die in template.hit_dice:
        if hit_die.size <= 0:
            raise ValueError(
                f"Template {template.name!r} has a hit die of size {hit_die.size}"
            )
        health, _ = health_system(health, Create(hit_die.size))
        for status in hit_die.statuses:
            health, _ = health_system(health, AddStatus(status))
    return health


def add_creature(
    state: State, template: CreatureTemplate, entity_id: Optional[EntityID] = None
) -> Tuple[State, EntityID]:
    """Spawn a creature built from ``template`` into ``state``.

    Returns the new state and the creature's entity id (freshly allocated
    unless ``entity_id`` is given).
    """
    if entity_id is None:
        entity_id = new_entity_id()
    if entity_id in state.entity:
        raise ValueError(f"Entity {entity_id} already exists")
    return (
        replace(
            state,
            entity=state.entity.set(entity_id, Entity()),
            health=state.health.set(entity_id, build_health(template)),
        ),
        entity_id,
    )


def _require_list(value: Any, what: str, name: str) -> List[Any]:
    if not isinstance(value, list):
        raise ValueError(f"Template {name!r}: {what} must be a list, got {value!r}")
    return value


def template_from_dict(name: str, data: Mapping[str, Any]) -> CreatureTemplate:
    """Parse a template entry such as::

        {"hit_dice": [{"size": 6}, {"size": 4, "statuses": [{"kind": "temporary"}]}]}

    Raises:
        ValueError: If the entry, a hit die or a status is malformed.
    """
    if not isinstance(data, Mapping):
        raise ValueError(f"Template {name!r} must be a mapping, got {data!r}")
    hit_dice = []
    for raw in _require_list(data.get("hit_dice", []), "'hit_dice'", name):
        if not isinstance(raw, Mapping):
            raise ValueError(
                f"Template {name!r}: hit die must be a mapping, got {raw!r}"
            )
        size = raw.get("size")
        if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
            raise ValueError(f"Template {name!r}: invalid hit die size {size!r}")
        raw_statuses = _require_list(raw.get("statuses", []), "'statuses'", name)
        statuses = tuple(status_from_dict(s) for s in raw_statuses)
        hit_dice.append(HitDieTemplate(size=size, statuses=statuses))
    return CreatureTemplate(name=name, hit_dice=tuple(hit_dice))
