"""Status tag helpers for hit dice."""

from dataclasses import replace
from typing import Optional

from svarog.components import Fortified, HitDie, StatusTag
from svarog.types import Amount, StatusKind


def add_status(hit_die: HitDie, status: StatusTag) -> HitDie:
    """Return a die with ``status`` set, replacing any tag of the same kind."""
    return replace(hit_die, statuses=hit_die.statuses.set(status.kind, status))


def remove_status(hit_die: HitDie, kind: StatusKind) -> HitDie:
    """Return a die without a tag of ``kind`` (no-op if absent)."""
    return replace(hit_die, statuses=hit_die.statuses.discard(kind))


def get_armor(hit_die: HitDie) -> Optional[Amount]:
    """Return the die's ``Fortified`` charges, or None if not fortified."""
    fortified = hit_die.statuses.get(StatusKind.FORTIFIED)
    if isinstance(fortified, Fortified):
        return fortified.amount
    return None
