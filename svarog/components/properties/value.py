"""Value component.

A bounded hit point pool owned by exactly one hit die. ``current`` moves
between zero and ``total``; ``total`` is fixed at creation. The saturating
arithmetic lives in :mod:`svarog.utils.value`.
"""

from dataclasses import dataclass

from svarog.types import Amount


@dataclass(frozen=True)
class Value:
    """Current and maximum hit points of a single hit die.

    Attributes:
        total: Capacity of the pool. Never resized.
        current: Remaining hit points, kept in ``[0, total]`` by the helpers.
    """

    total: Amount
    current: Amount

    @classmethod
    def new(cls, total: Amount) -> "Value":
        """Return a full value of capacity ``total``."""
        return cls(total=total, current=total)

    def __int__(self) -> int:
        return self.current
