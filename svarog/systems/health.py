"""Health aggregation system.

Routes a health-level action to the hit die (or dice) it addresses, applies
it through :func:`svarog.systems.hit_die.hit_die_system`, and collects the
die responses, tagged with their index, in the order the dice reacted.

Targeting rules:

* ``Create`` appends; ``Shatter`` pops the rightmost die.
* ``AddStatus`` / ``RemoveStatus`` / ``Fortify`` address the rightmost die.
* ``Chip`` starts at the rightmost die and spills leftwards.
* ``Heal`` starts at the leftmost die and spills rightwards.
* ``Drain`` / ``Break`` address the rightmost die not already ``Empty`` /
  ``Void``; ``Mend`` addresses the leftmost ``Void`` die.

An action on a health without dice (other than ``Create``) and a scan that
finds no eligible die both yield ``[NoResponse()]``.
"""

import logging
from dataclasses import replace
from typing import Callable, List, Optional, Tuple

from svarog.actions import (
    AddStatus,
    Break,
    Chip,
    Create,
    Drain,
    Fortify,
    Heal,
    HealthAction,
    Mend,
    RemoveStatus,
    Shatter,
)
from svarog.components import Health, HitDie
from svarog.responses import (
    CreateResponse,
    HealthActionResponse,
    HitDieChipResponse,
    HitDieHealResponse,
    HitDieShatterResponse,
    MendResponse,
    NoResponse,
    ShatterResponse,
    to_health_response,
)
from svarog.systems.hit_die import hit_die_system
from svarog.types import Index, StatusKind
from svarog.utils.search import leftmost_index, rightmost_index

logger = logging.getLogger(__name__)

HealthResult = Tuple[Health, List[HealthActionResponse]]


def _is_not(kind: StatusKind) -> Callable[[HitDie], bool]:
    return lambda hit_die: not hit_die.has(kind)


def _execute_at(
    health: Health, index: Index, action: HealthAction
) -> Tuple[Health, HealthActionResponse]:
    """Run ``action`` on the die at ``index`` and store the new die."""
    hit_die, response = hit_die_system(health.hit_dice[index], action)
    health = replace(health, hit_dice=health.hit_dice.set(index, hit_die))
    return health, to_health_response(response, index)


def _create(health: Health, action: Create) -> HealthResult:
    hit_dice = health.hit_dice.append(HitDie.new(action.amount))
    return replace(health, hit_dice=hit_dice), [CreateResponse(len(hit_dice) - 1)]


def _chip(health: Health, action: Chip) -> HealthResult:
    """Damage right to left until the damage is absorbed or the dice run out."""
    responses: List[HealthActionResponse] = []
    damage = action.amount
    last = len(health.hit_dice) - 1

    while True:
        hit_die, reaction = hit_die_system(health.hit_dice[last], Chip(damage))
        responses.append(to_health_response(reaction, last))

        if isinstance(reaction, HitDieShatterResponse):
            logger.debug("Temporary hit die %d shattered", last)
            return replace(health, hit_dice=health.hit_dice.delete(last)), responses

        health = replace(health, hit_dice=health.hit_dice.set(last, hit_die))
        if (
            isinstance(reaction, HitDieChipResponse)
            and reaction.spillover > 0
            and last > 0
        ):
            damage = reaction.spillover
            last -= 1
            continue
        return health, responses


def _heal(health: Health, action: Heal) -> HealthResult:
    """Heal left to right until the healing is absorbed or the dice run out."""
    responses: List[HealthActionResponse] = []
    restoration = action.amount
    first = 0

    while True:
        hit_die, reaction = hit_die_system(health.hit_dice[first], Heal(restoration))
        responses.append(to_health_response(reaction, first))
        health = replace(health, hit_dice=health.hit_dice.set(first, hit_die))

        if (
            isinstance(reaction, HitDieHealResponse)
            and reaction.spillover > 0
            and first < len(health.hit_dice) - 1
        ):
            restoration = reaction.spillover
            first += 1
            continue
        return health, responses


def _at_index(
    health: Health, index: Optional[Index], action: HealthAction
) -> HealthResult:
    if index is None:
        logger.debug("No hit die eligible for %s", action.kind)
        return health, [NoResponse()]
    health, response = _execute_at(health, index, action)
    return health, [response]


def _mend(health: Health) -> HealthResult:
    index = leftmost_index(
        health.hit_dice, lambda hit_die: hit_die.has(StatusKind.VOID)
    )
    if index is None:
        logger.debug("No void hit die to mend")
        return health, [NoResponse()]
    health, _ = _execute_at(health, index, Mend())
    return health, [MendResponse(index)]


def _shatter(health: Health) -> HealthResult:
    hit_dice = health.hit_dice.delete(len(health.hit_dice) - 1)
    return replace(health, hit_dice=hit_dice), [ShatterResponse(len(hit_dice))]


def health_system(health: Health, action: HealthAction) -> HealthResult:
    """Apply one action to a creature's health.

    Args:
        health (Health): Current health.
        action (HealthAction): Action to resolve.

    Returns:
        Tuple[Health, List[HealthActionResponse]]: The new health and the
        ordered responses of the dice the action reached. ``Create``, ``Chip``
        and ``Heal`` with a non-positive amount yield an empty list on a
        health that has dice.
    """
    if len(health.hit_dice) == 0 and not isinstance(action, Create):
        return health, [NoResponse()]

    last = len(health.hit_dice) - 1

    if isinstance(action, Create):
        if action.amount > 0:
            return _create(health, action)
    elif isinstance(action, (AddStatus, RemoveStatus)):
        health, _ = _execute_at(health, last, action)
        return health, [NoResponse()]
    elif isinstance(action, Chip):
        if action.amount > 0:
            return _chip(health, action)
    elif isinstance(action, Heal):
        if action.amount > 0:
            return _heal(health, action)
    elif isinstance(action, Drain):
        index = rightmost_index(health.hit_dice, _is_not(StatusKind.EMPTY))
        return _at_index(health, index, action)
    elif isinstance(action, Break):
        index = rightmost_index(health.hit_dice, _is_not(StatusKind.VOID))
        return _at_index(health, index, action)
    elif isinstance(action, Mend):
        return _mend(health)
    elif isinstance(action, Fortify):
        return _at_index(health, last, action)
    elif isinstance(action, Shatter):
        return _shatter(health)

    return health, []
