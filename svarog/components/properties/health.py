from dataclasses import dataclass

from pyrsistent import pvector
from pyrsistent.typing import PVector

from svarog.components.properties.hit_die import HitDie


@dataclass(frozen=True)
class Health:
    """Ordered sequence of hit dice making up a creature's health.

    Index 0 is the leftmost die. Damage is taken from the right, healing is
    applied from the left. Dice are appended by ``Create`` and removed from
    the right by ``Shatter`` (or from anywhere when a temporary die empties);
    the sequence is never reordered.

    Attributes:
        hit_dice: Persistent vector of dice, left to right.
    """

    hit_dice: PVector[HitDie] = pvector()

    def __len__(self) -> int:
        return len(self.hit_dice)
