"""Status tag components.

This sub-package defines the **status tags** a hit die can carry: markers
that change how the die reacts to actions (``Guarded`` cancels ``Drain`` and
``Break``, ``Temporary`` shatters on empty, ``Fortified`` absorbs a lethal
reduction) and a few tags that are only carried around for now
(``Grafted``, ``Stifled``, ``Cracked``, ``Mending``).

Every tag class exposes a ``kind`` class attribute (:class:`StatusKind`). A
hit die keys its statuses by kind, so it holds at most one tag of each kind.

``StatusTag`` is the union of all tag classes and ``STATUS_TYPES`` maps each
kind back to its class (used by serialization and config parsing).

Importing::

    from svarog.components.effects import Fortified, StatusTag

or via the top-level components package::

    from svarog.components import Fortified
"""

from typing import Dict, Type, Union

from svarog.types import StatusKind

from .cracked import Cracked
from .empty import Empty
from .fortified import Fortified
from .grafted import Grafted
from .guarded import Guarded
from .mending import Mending
from .stifled import Stifled
from .temporary import Temporary
from .void import Void

StatusTag = Union[
    Void, Empty, Grafted, Temporary, Guarded, Fortified, Stifled, Cracked, Mending
]

STATUS_TYPES: Dict[StatusKind, Type[StatusTag]] = {
    StatusKind.VOID: Void,
    StatusKind.EMPTY: Empty,
    StatusKind.GRAFTED: Grafted,
    StatusKind.TEMPORARY: Temporary,
    StatusKind.GUARDED: Guarded,
    StatusKind.FORTIFIED: Fortified,
    StatusKind.STIFLED: Stifled,
    StatusKind.CRACKED: Cracked,
    StatusKind.MENDING: Mending,
}

__all__ = [
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
]
