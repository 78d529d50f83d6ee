"""Index searches over an ordered hit dice sequence.

Used by health actions that address "the rightmost die that ..." or "the
leftmost die that ...". Both return ``None`` when no die qualifies so that
callers handle the exhausted scan explicitly.
"""

from typing import Callable, Optional, Sequence

from svarog.components import HitDie
from svarog.types import Index


def rightmost_index(
    hit_dice: Sequence[HitDie], predicate: Callable[[HitDie], bool]
) -> Optional[Index]:
    """Return the highest index whose die satisfies ``predicate``."""
    for index in range(len(hit_dice) - 1, -1, -1):
        if predicate(hit_dice[index]):
            return index
    return None


def leftmost_index(
    hit_dice: Sequence[HitDie], predicate: Callable[[HitDie], bool]
) -> Optional[Index]:
    """Return the lowest index whose die satisfies ``predicate``."""
    for index, hit_die in enumerate(hit_dice):
        if predicate(hit_die):
            return index
    return None
