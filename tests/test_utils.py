from typing import List, Tuple

from pyrsistent import pmap

from svarog.actions import Create, HealthAction
from svarog.components import Health, HitDie, StatusTag, Value
from svarog.responses import HealthActionResponse
from svarog.state import State
from svarog.systems.health import health_system
from svarog.templates import CreatureTemplate, HitDieTemplate, add_creature
from svarog.types import EntityID, StatusKind


def make_health(*sizes: int) -> Health:
    """Health with one full die per size, left to right."""
    health = Health()
    for size in sizes:
        health, _ = health_system(health, Create(size))
    return health


def make_hit_die(
    total: int, current: int | None = None, *statuses: StatusTag
) -> HitDie:
    """Standalone die, optionally damaged and carrying statuses."""
    return HitDie(
        value=Value(total=total, current=total if current is None else current),
        statuses=pmap({status.kind: status for status in statuses}),
    )


def run(
    health: Health, *actions: HealthAction
) -> Tuple[Health, List[HealthActionResponse]]:
    """Apply ``actions`` in order and return the final health and last responses."""
    responses: List[HealthActionResponse] = []
    for action in actions:
        health, responses = health_system(health, action)
    return health, responses


def currents(health: Health) -> List[int]:
    return [hit_die.value.current for hit_die in health.hit_dice]


def kinds(health: Health, index: int) -> set[StatusKind]:
    return set(health.hit_dice[index].statuses.keys())


def make_creature_state(*sizes: int) -> Tuple[State, EntityID]:
    """State holding a single creature with the given hit dice."""
    template = CreatureTemplate(
        name="test", hit_dice=tuple(HitDieTemplate(size=size) for size in sizes)
    )
    return add_creature(State(), template)
