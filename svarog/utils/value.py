"""Saturating arithmetic on :class:`Value`.

``reduce_value`` and ``add_value`` clamp ``current`` to ``[0, total]`` and
report whatever did not fit as a *spillover*, which callers pass on to the
next hit die in the sequence. Amounts are assumed non-negative; validation
happens in the systems.
"""

from dataclasses import replace
from typing import Tuple

from svarog.components import Value
from svarog.types import Amount


def reduce_value(value: Value, n: Amount) -> Tuple[Value, Amount]:
    """Return ``value`` reduced by ``n`` and the damage that did not fit."""
    current = value.current - n
    if current < 0:
        return replace(value, current=0), -current
    return replace(value, current=current), 0


def add_value(value: Value, n: Amount) -> Tuple[Value, Amount]:
    """Return ``value`` increased by ``n`` and the healing that did not fit."""
    current = value.current + n
    if current > value.total:
        return replace(value, current=value.total), current - value.total
    return replace(value, current=current), 0


def empty_value(value: Value) -> Value:
    """Return ``value`` with no hit points left."""
    return replace(value, current=0)


def reset_value(value: Value) -> Value:
    """Return ``value`` filled back to its total."""
    return replace(value, current=value.total)
