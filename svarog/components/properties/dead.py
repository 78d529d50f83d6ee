"""Dead marker component."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Dead:
    """Marker set on a creature whose last hit die was shattered."""

    pass
