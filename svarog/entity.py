"""Creature identity.

A creature is an ``EntityID`` (an integer) plus the components stored for it
in the persistent maps of :class:`svarog.state.State`. ``Entity`` is the
marker kept in ``State.entity`` so a creature stays addressable after its
health is gone.

Ids come from a process-local counter and are never reused. Pass explicit ids
to :func:`svarog.templates.add_creature` when they must be stable across
processes (e.g. when restoring a serialized encounter).
"""

from dataclasses import dataclass
from itertools import count

from svarog.types import EntityID


@dataclass(frozen=True)
class Entity:
    """Marker (no data)."""

    pass


_next_ids = count()


def new_entity_id() -> EntityID:
    """Return a fresh creature id."""
    return next(_next_ids)
