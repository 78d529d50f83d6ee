"""State reducer.

:func:`step` is the single entry point the surrounding game loop calls, once
per game action, to apply a :class:`~svarog.actions.HealthAction` to one
creature. It is pure: it returns a *new* :class:`svarog.state.State` together
with the ordered responses the action produced.

Per call:

1. Validate the target (raises ``ValueError`` for unknown entities or
   entities without health).
2. Short-circuit dead creatures with ``[NoResponse()]``.
3. Run :func:`svarog.systems.health.health_system` and store the new health.
4. Mark the creature ``Dead`` if it lost its last hit die.
5. Append an :class:`~svarog.state.ActionRecord` and bump the turn.
"""

import logging
from dataclasses import replace
from typing import List, Tuple

from svarog.actions import HealthAction
from svarog.components import Dead
from svarog.responses import HealthActionResponse, NoResponse
from svarog.state import ActionRecord, State
from svarog.systems.health import health_system
from svarog.types import EntityID

logger = logging.getLogger(__name__)


def step(
    state: State, entity_id: EntityID, action: HealthAction
) -> Tuple[State, List[HealthActionResponse]]:
    """Apply ``action`` to the health of ``entity_id``.

    Args:
        state (State): Current immutable state.
        entity_id (EntityID): Creature receiving the action.
        action (HealthAction): Action to execute.

    Returns:
        Tuple[State, List[HealthActionResponse]]: Next state and the ordered
        responses of the action.

    Raises:
        ValueError: If the entity does not exist or has no ``Health``.
    """
    if entity_id not in state.entity:
        raise ValueError(f"Unknown entity: {entity_id}")
    if entity_id not in state.health:
        raise ValueError(f"Entity {entity_id} has no health")

    if entity_id in state.dead:
        return replace(state, turn=state.turn + 1), [NoResponse()]

    previous = state.health[entity_id]
    health, responses = health_system(previous, action)
    logger.debug(
        "Turn %d: entity %d %s -> %s", state.turn, entity_id, action, responses
    )

    dead = state.dead
    if len(previous) > 0 and len(health) == 0:
        logger.info("Entity %d lost its last hit die", entity_id)
        dead = dead.set(entity_id, Dead())

    record = ActionRecord(
        turn=state.turn,
        entity_id=entity_id,
        action=action,
        responses=tuple(responses),
    )
    return (
        replace(
            state,
            health=state.health.set(entity_id, health),
            dead=dead,
            log=state.log.append(record),
            turn=state.turn + 1,
        ),
        responses,
    )
