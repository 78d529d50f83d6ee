"""Hit die reaction system.

Applies a single action to a single hit die and returns the new die together
with exactly one response. The system runs in two phases:

1. Main reaction: the action's own effect (reduce, add, empty, status change).
2. Reconciliation: whenever the die ends at zero hit points, in this order:

   * ``Fortified``: remove the tag, heal the die completely (by running the
     system again with ``Heal(total)``), put back one charge less, and report
     a recovery instead of the main response.
   * ``Temporary``: report a shatter instead of the main response; the owning
     health removes the die.
   * otherwise mark the die ``Empty`` and keep the main response.

Reconciliation runs after *every* action, so e.g. fortifying an already empty
die immediately recovers it.
"""

import logging
from dataclasses import replace
from typing import Tuple

from svarog.actions import (
    AddStatus,
    Break,
    Chip,
    Drain,
    Fortify,
    Heal,
    HealthAction,
    Mend,
    RemoveStatus,
)
from svarog.components import Empty, Fortified, HitDie, Void
from svarog.responses import (
    HitDieActionResponse,
    HitDieBreakResponse,
    HitDieChipResponse,
    HitDieDrainResponse,
    HitDieFortifiedResponse,
    HitDieHealResponse,
    HitDieMendResponse,
    HitDieRecoveryResponse,
    HitDieShatterResponse,
    NoResponse,
)
from svarog.types import StatusKind
from svarog.utils.status import add_status, get_armor, remove_status
from svarog.utils.value import add_value, empty_value, reduce_value

logger = logging.getLogger(__name__)


def react(
    hit_die: HitDie, action: HealthAction
) -> Tuple[HitDie, HitDieActionResponse]:
    """Main reaction of ``hit_die`` to ``action``, without reconciliation."""
    if isinstance(action, Chip) and action.amount > 0:
        value, spillover = reduce_value(hit_die.value, action.amount)
        return replace(hit_die, value=value), HitDieChipResponse(spillover)

    if isinstance(action, AddStatus):
        return add_status(hit_die, action.status), NoResponse()

    if isinstance(action, RemoveStatus):
        return remove_status(hit_die, action.status.kind), NoResponse()

    if isinstance(action, Heal) and action.amount > 0:
        hit_die = remove_status(hit_die, StatusKind.EMPTY)
        value, spillover = add_value(hit_die.value, action.amount)
        return replace(hit_die, value=value), HitDieHealResponse(spillover)

    if isinstance(action, (Drain, Break)) and hit_die.has(StatusKind.GUARDED):
        return hit_die, HitDieRecoveryResponse()

    if isinstance(action, Drain):
        hit_die = replace(hit_die, value=empty_value(hit_die.value))
        return hit_die, HitDieDrainResponse()

    if isinstance(action, Break):
        return add_status(hit_die, Void()), HitDieBreakResponse()

    if isinstance(action, Mend):
        return remove_status(hit_die, StatusKind.VOID), HitDieMendResponse()

    if isinstance(action, Fortify):
        armor = get_armor(hit_die)
        amount = action.amount if armor is None else armor + action.amount
        hit_die = add_status(hit_die, Fortified(amount))
        return hit_die, HitDieFortifiedResponse(amount)

    return hit_die, NoResponse()


def hit_die_system(
    hit_die: HitDie, action: HealthAction
) -> Tuple[HitDie, HitDieActionResponse]:
    """Apply ``action`` to ``hit_die`` and reconcile a resulting zero.

    Args:
        hit_die (HitDie): Die receiving the action.
        action (HealthAction): Action to apply. Non-positive ``Chip`` / ``Heal``
            amounts and actions a die does not handle (``Create``, ``Shatter``)
            leave the die untouched and yield ``NoResponse``.

    Returns:
        Tuple[HitDie, HitDieActionResponse]: The new die and its single
        response.
    """
    hit_die, response = react(hit_die, action)

    if hit_die.value.current != 0:
        return hit_die, response

    armor = get_armor(hit_die)
    if armor is not None:
        hit_die = remove_status(hit_die, StatusKind.FORTIFIED)
        hit_die, _ = hit_die_system(hit_die, Heal(hit_die.value.total))
        if armor > 1:
            hit_die = add_status(hit_die, Fortified(armor - 1))
        logger.debug("Fortified hit die recovered, %d charge(s) left", armor - 1)
        return hit_die, HitDieRecoveryResponse()

    if hit_die.has(StatusKind.TEMPORARY):
        return hit_die, HitDieShatterResponse()

    return add_status(hit_die, Empty()), response
