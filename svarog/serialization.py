"""JSON-friendly (de)serialization of health state, actions and responses.

Health round-trips through plain dicts / lists / ints / strings::

    {"hit_dice": [
        {"value": {"total": 6, "current": 4},
         "statuses": [{"kind": "guarded"}, {"kind": "fortified", "amount": 2}],
         "effort": {"kind": "uncommitted"}},
        ...
    ]}

The hit dice order is preserved and every status payload (armor charges,
turn counters) is kept. Statuses are emitted in :class:`StatusKind`
declaration order so equal dice serialize identically.

All ``*_from_dict`` functions raise ``ValueError`` on malformed input.
"""

from dataclasses import asdict, fields
from typing import Any, Dict, Iterable, List, Mapping, Type

from pyrsistent import pmap, pvector

from svarog.actions import (
    AddStatus,
    Break,
    Chip,
    Create,
    Drain,
    Fortify,
    Heal,
    HealthAction,
    Mend,
    RemoveStatus,
    Shatter,
)
from svarog.components import (
    STATUS_TYPES,
    Commitment,
    Committed,
    Effort,
    EncounterCommitment,
    Health,
    HitDie,
    RestCommitment,
    StatusTag,
    TurnCommitment,
    Uncommitted,
    Value,
)
from svarog.responses import HealthActionResponse, HitDieActionResponse
from svarog.state import ActionRecord
from svarog.types import ActionKind, CommitmentKind, StatusKind

ACTION_TYPES: Dict[ActionKind, Type[HealthAction]] = {
    ActionKind.CREATE: Create,
    ActionKind.ADD_STATUS: AddStatus,
    ActionKind.REMOVE_STATUS: RemoveStatus,
    ActionKind.CHIP: Chip,
    ActionKind.HEAL: Heal,
    ActionKind.DRAIN: Drain,
    ActionKind.BREAK: Break,
    ActionKind.MEND: Mend,
    ActionKind.SHATTER: Shatter,
    ActionKind.FORTIFY: Fortify,
}

COMMITMENT_TYPES: Dict[CommitmentKind, Type[Commitment]] = {
    CommitmentKind.TURN: TurnCommitment,
    CommitmentKind.ENCOUNTER: EncounterCommitment,
    CommitmentKind.REST: RestCommitment,
}


def _require(data: Mapping[str, Any], key: str, what: str) -> Any:
    if not isinstance(data, Mapping):
        raise ValueError(f"Expected a mapping for {what}, got {data!r}")
    if key not in data:
        raise ValueError(f"Missing '{key}' in {what}: {dict(data)}")
    return data[key]


def _require_int(data: Mapping[str, Any], key: str, what: str) -> int:
    value = _require(data, key, what)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"'{key}' in {what} must be an integer, got {value!r}")
    return value


def _parse_kind(enum_type: Any, raw: Any, what: str) -> Any:
    try:
        return enum_type(raw)
    except ValueError:
        raise ValueError(f"Unknown {what} kind: {raw!r}") from None


def _int_fields(
    cls: Type[Any], data: Mapping[str, Any], what: str
) -> Dict[str, int]:
    return {f.name: _require_int(data, f.name, what) for f in fields(cls)}


# Statuses


def status_to_dict(status: StatusTag) -> Dict[str, Any]:
    """Serialize a status tag as ``{"kind": ..., **payload}``."""
    return {"kind": status.kind.value, **asdict(status)}


def status_from_dict(data: Mapping[str, Any]) -> StatusTag:
    """Inverse of :func:`status_to_dict`."""
    kind = _parse_kind(StatusKind, _require(data, "kind", "status"), "status")
    status_type = STATUS_TYPES[kind]
    return status_type(**_int_fields(status_type, data, f"{kind} status"))


# Effort


def effort_to_dict(effort: Effort) -> Dict[str, Any]:
    """Serialize effort as ``{"kind": "uncommitted"}`` or a committed payload."""
    if isinstance(effort, Committed):
        commitment = effort.commitment
        return {
            "kind": "committed",
            "commitment": {"kind": commitment.kind.value, **asdict(commitment)},
        }
    return {"kind": "uncommitted"}


def effort_from_dict(data: Mapping[str, Any]) -> Effort:
    """Inverse of :func:`effort_to_dict`."""
    kind = _require(data, "kind", "effort")
    if kind == "uncommitted":
        return Uncommitted()
    if kind != "committed":
        raise ValueError(f"Unknown effort kind: {kind!r}")
    raw = _require(data, "commitment", "effort")
    commitment_kind = _parse_kind(
        CommitmentKind, _require(raw, "kind", "commitment"), "commitment"
    )
    commitment_type = COMMITMENT_TYPES[commitment_kind]
    return Committed(
        commitment_type(**_int_fields(commitment_type, raw, "commitment"))
    )


# Hit dice & health


def value_to_dict(value: Value) -> Dict[str, int]:
    return {"total": value.total, "current": value.current}


def value_from_dict(data: Mapping[str, Any]) -> Value:
    total = _require_int(data, "total", "value")
    current = _require_int(data, "current", "value")
    if total < 0 or not 0 <= current <= total:
        raise ValueError(f"Invalid value: current={current}, total={total}")
    return Value(total=total, current=current)


def hit_die_to_dict(hit_die: HitDie) -> Dict[str, Any]:
    return {
        "value": value_to_dict(hit_die.value),
        "statuses": [
            status_to_dict(hit_die.statuses[kind])
            for kind in StatusKind
            if kind in hit_die.statuses
        ],
        "effort": effort_to_dict(hit_die.effort),
    }


def hit_die_from_dict(data: Mapping[str, Any]) -> HitDie:
    value = value_from_dict(_require(data, "value", "hit die"))
    statuses: Dict[StatusKind, StatusTag] = {}
    for raw in data.get("statuses", []):
        status = status_from_dict(raw)
        if status.kind in statuses:
            raise ValueError(f"Duplicate {status.kind} status in hit die")
        statuses[status.kind] = status
    effort = effort_from_dict(data.get("effort", {"kind": "uncommitted"}))
    return HitDie(value=value, effort=effort, statuses=pmap(statuses))


def health_to_dict(health: Health) -> Dict[str, Any]:
    """Serialize ``health`` (left-to-right order preserved)."""
    return {"hit_dice": [hit_die_to_dict(hit_die) for hit_die in health.hit_dice]}


def health_from_dict(data: Mapping[str, Any]) -> Health:
    """Inverse of :func:`health_to_dict`."""
    raw_dice = _require(data, "hit_dice", "health")
    if not isinstance(raw_dice, list):
        raise ValueError(f"'hit_dice' must be a list, got {raw_dice!r}")
    return Health(hit_dice=pvector(hit_die_from_dict(raw) for raw in raw_dice))


# Actions & responses


def action_to_dict(action: HealthAction) -> Dict[str, Any]:
    """Serialize an action as ``{"kind": ..., **payload}``."""
    if isinstance(action, (AddStatus, RemoveStatus)):
        return {"kind": action.kind.value, "status": status_to_dict(action.status)}
    return {"kind": action.kind.value, **asdict(action)}


def action_from_dict(data: Mapping[str, Any]) -> HealthAction:
    """Inverse of :func:`action_to_dict`."""
    kind = _parse_kind(ActionKind, _require(data, "kind", "action"), "action")
    if kind in (ActionKind.ADD_STATUS, ActionKind.REMOVE_STATUS):
        status = status_from_dict(_require(data, "status", f"{kind} action"))
        if kind == ActionKind.ADD_STATUS:
            return AddStatus(status)
        return RemoveStatus(status)
    action_type = ACTION_TYPES[kind]
    return action_type(**_int_fields(action_type, data, f"{kind} action"))


def response_to_dict(
    response: HealthActionResponse | HitDieActionResponse,
) -> Dict[str, Any]:
    """Serialize a response as ``{"type": <class name>, **fields}``."""
    return {"type": type(response).__name__, **asdict(response)}


def record_to_dict(record: ActionRecord) -> Dict[str, Any]:
    return {
        "turn": record.turn,
        "entity_id": record.entity_id,
        "action": action_to_dict(record.action),
        "responses": [response_to_dict(r) for r in record.responses],
    }


def log_to_dicts(records: Iterable[ActionRecord]) -> List[Dict[str, Any]]:
    """Serialize an action log such as ``state.log``."""
    return [record_to_dict(record) for record in records]
