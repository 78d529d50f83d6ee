"""Health action variants.

Every action a creature's health can receive is a small frozen dataclass;
``HealthAction`` is their union. The same action objects are handed to
individual hit dice by the health system, which decides which die (or dice)
an action addresses.

Members:
    Create: Append a hit die of ``amount`` hit points to the right.
    AddStatus, RemoveStatus: Attach / detach a status on the rightmost die.
    Chip: Damage the rightmost die, spilling leftwards.
    Heal: Heal the leftmost die, spilling rightwards.
    Drain: Empty the rightmost non-empty die.
    Break: Make the rightmost non-void die ``Void``.
    Mend: Remove ``Void`` from the leftmost void die.
    Shatter: Remove the rightmost die.
    Fortify: Add armor charges to the rightmost die.
"""

from dataclasses import dataclass
from typing import ClassVar, Union

from svarog.components.effects import StatusTag
from svarog.types import ActionKind, Amount


@dataclass(frozen=True)
class Create:
    amount: Amount
    kind: ClassVar[ActionKind] = ActionKind.CREATE


@dataclass(frozen=True)
class AddStatus:
    status: StatusTag
    kind: ClassVar[ActionKind] = ActionKind.ADD_STATUS


@dataclass(frozen=True)
class RemoveStatus:
    """Remove the tag of ``status``'s kind, whatever payload it carries."""

    status: StatusTag
    kind: ClassVar[ActionKind] = ActionKind.REMOVE_STATUS


@dataclass(frozen=True)
class Chip:
    amount: Amount
    kind: ClassVar[ActionKind] = ActionKind.CHIP


@dataclass(frozen=True)
class Heal:
    amount: Amount
    kind: ClassVar[ActionKind] = ActionKind.HEAL


@dataclass(frozen=True)
class Drain:
    kind: ClassVar[ActionKind] = ActionKind.DRAIN


@dataclass(frozen=True)
class Break:
    kind: ClassVar[ActionKind] = ActionKind.BREAK


@dataclass(frozen=True)
class Mend:
    kind: ClassVar[ActionKind] = ActionKind.MEND


@dataclass(frozen=True)
class Shatter:
    kind: ClassVar[ActionKind] = ActionKind.SHATTER


@dataclass(frozen=True)
class Fortify:
    amount: Amount
    kind: ClassVar[ActionKind] = ActionKind.FORTIFY


HealthAction = Union[
    Create,
    AddStatus,
    RemoveStatus,
    Chip,
    Heal,
    Drain,
    Break,
    Mend,
    Shatter,
    Fortify,
]
