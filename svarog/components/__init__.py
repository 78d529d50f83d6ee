"""svarog.components
=================================

Aggregate import surface for all component dataclasses used by the engine.

This package separates *properties* (the data a creature's health consists
of: hit dice, their values and effort) from *effects* (status tags attached
to individual hit dice such as ``Guarded`` or ``Fortified``).

The symbols re-exported here are curated so downstream code can import
components from a single place, e.g.::

    from svarog.components import Health, HitDie, Fortified

All component classes are frozen ``@dataclass`` value objects; they carry no
behavior beyond their fields and are transformed by the systems.
"""

# Effects
from .effects import STATUS_TYPES, StatusTag
from .effects import Cracked
from .effects import Empty
from .effects import Fortified
from .effects import Grafted
from .effects import Guarded
from .effects import Mending
from .effects import Stifled
from .effects import Temporary
from .effects import Void

# Properties
from .properties import Commitment, Committed, Effort, Uncommitted
from .properties import EncounterCommitment, RestCommitment, TurnCommitment
from .properties import Dead
from .properties import Health
from .properties import HitDie
from .properties import Influence
from .properties import Value

__all__ = [
    # Effects
    "STATUS_TYPES",
    "StatusTag",
    "Cracked",
    "Empty",
    "Fortified",
    "Grafted",
    "Guarded",
    "Mending",
    "Stifled",
    "Temporary",
    "Void",
    # Properties
    "Commitment",
    "Committed",
    "Dead",
    "Effort",
    "EncounterCommitment",
    "Health",
    "HitDie",
    "Influence",
    "RestCommitment",
    "TurnCommitment",
    "Uncommitted",
    "Value",
]
