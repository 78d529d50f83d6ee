from dataclasses import dataclass
from typing import ClassVar

from svarog.types import Amount, StatusKind


@dataclass(frozen=True)
class Fortified:
    """Armor charges that absorb a reduction to zero.

    When a fortified hit die would become empty it is healed completely and
    loses one charge instead; the status is removed with its last charge.
    Charges stack through ``Fortify``.

    Attributes:
        amount:
            Remaining armor charges. Always positive while the tag is held.
    """

    amount: Amount
    kind: ClassVar[StatusKind] = StatusKind.FORTIFIED
