"""Influence component.

Hit dice keep an ordered list of influences. No influence exists yet, so the
enumeration has no members and the list always stays empty.
"""

from enum import Enum


class Influence(Enum):
    """Influence a hit die exerts (no members)."""
