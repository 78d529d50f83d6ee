"""Action responses.

Two families of immutable response records:

* Hit die responses (``HitDie*``) are what a single die reports for a single
  action. Spillover amounts tell the health system how much damage or healing
  is left over for the next die.
* Health responses carry, in addition, the ``index`` of the die that produced
  them. A health action yields an ordered list of these, in the order the dice
  reacted.

``NoResponse`` is shared by both families and signals that nothing happened.
"""

from dataclasses import dataclass
from typing import Union

from svarog.types import Amount, Index


@dataclass(frozen=True)
class NoResponse:
    pass


# Hit die responses


@dataclass(frozen=True)
class HitDieChipResponse:
    spillover: Amount


@dataclass(frozen=True)
class HitDieHealResponse:
    spillover: Amount


@dataclass(frozen=True)
class HitDieDrainResponse:
    pass


@dataclass(frozen=True)
class HitDieBreakResponse:
    pass


@dataclass(frozen=True)
class HitDieMendResponse:
    pass


@dataclass(frozen=True)
class HitDieShatterResponse:
    pass


@dataclass(frozen=True)
class HitDieFortifiedResponse:
    amount: Amount


@dataclass(frozen=True)
class HitDieRecoveryResponse:
    pass


HitDieActionResponse = Union[
    NoResponse,
    HitDieChipResponse,
    HitDieHealResponse,
    HitDieDrainResponse,
    HitDieBreakResponse,
    HitDieMendResponse,
    HitDieShatterResponse,
    HitDieFortifiedResponse,
    HitDieRecoveryResponse,
]


# Health responses


@dataclass(frozen=True)
class CreateResponse:
    index: Index


@dataclass(frozen=True)
class ChipResponse:
    index: Index
    spillover: Amount


@dataclass(frozen=True)
class HealResponse:
    index: Index
    spillover: Amount


@dataclass(frozen=True)
class DrainResponse:
    index: Index


@dataclass(frozen=True)
class FortifiedResponse:
    index: Index
    amount: Amount


@dataclass(frozen=True)
class RecoveryResponse:
    index: Index


@dataclass(frozen=True)
class BreakResponse:
    index: Index


@dataclass(frozen=True)
class MendResponse:
    index: Index


@dataclass(frozen=True)
class ShatterResponse:
    index: Index


HealthActionResponse = Union[
    NoResponse,
    CreateResponse,
    ChipResponse,
    HealResponse,
    DrainResponse,
    FortifiedResponse,
    RecoveryResponse,
    BreakResponse,
    MendResponse,
    ShatterResponse,
]


def to_health_response(
    response: HitDieActionResponse, index: Index
) -> HealthActionResponse:
    """Attach the die ``index`` to a hit die response."""
    if isinstance(response, HitDieChipResponse):
        return ChipResponse(index, response.spillover)
    elif isinstance(response, HitDieHealResponse):
        return HealResponse(index, response.spillover)
    elif isinstance(response, HitDieDrainResponse):
        return DrainResponse(index)
    elif isinstance(response, HitDieBreakResponse):
        return BreakResponse(index)
    elif isinstance(response, HitDieMendResponse):
        return MendResponse(index)
    elif isinstance(response, HitDieShatterResponse):
        return ShatterResponse(index)
    elif isinstance(response, HitDieFortifiedResponse):
        return FortifiedResponse(index, response.amount)
    elif isinstance(response, HitDieRecoveryResponse):
        return RecoveryResponse(index)
    return NoResponse()
