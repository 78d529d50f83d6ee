import pytest
from pyrsistent import pmap

from svarog.actions import AddStatus, Chip, Fortify, Mend, RemoveStatus
from svarog.components import (
    Committed,
    Cracked,
    Fortified,
    Guarded,
    HitDie,
    Stifled,
    Temporary,
    TurnCommitment,
    Value,
)
from svarog.responses import ChipResponse, FortifiedResponse
from svarog.serialization import (
    action_from_dict,
    action_to_dict,
    effort_from_dict,
    effort_to_dict,
    health_from_dict,
    health_to_dict,
    hit_die_from_dict,
    hit_die_to_dict,
    log_to_dicts,
    response_to_dict,
    status_from_dict,
    status_to_dict,
)
from svarog.step import step
from tests.test_utils import make_creature_state, make_health, make_hit_die, run


def test_health_round_trip_keeps_order_and_payloads() -> None:
    health, _ = run(
        make_health(6, 8, 4),
        AddStatus(Guarded()),
        Fortify(2),
        AddStatus(Stifled(3)),
        Chip(5),
    )
    data = health_to_dict(health)

    assert [d["value"]["total"] for d in data["hit_dice"]] == [6, 8, 4]
    assert health_from_dict(data) == health


def test_hit_die_to_dict_layout() -> None:
    hit_die = make_hit_die(6, 4, Fortified(2), Guarded())
    assert hit_die_to_dict(hit_die) == {
        "value": {"total": 6, "current": 4},
        "statuses": [{"kind": "guarded"}, {"kind": "fortified", "amount": 2}],
        "effort": {"kind": "uncommitted"},
    }


def test_hit_die_from_dict_defaults() -> None:
    hit_die = hit_die_from_dict({"value": {"total": 6, "current": 6}})
    assert hit_die == HitDie.new(6)


def test_status_payloads() -> None:
    assert status_to_dict(Cracked(2)) == {"kind": "cracked", "turns": 2}
    assert status_from_dict({"kind": "cracked", "turns": 2}) == Cracked(2)
    assert status_from_dict({"kind": "temporary"}) == Temporary()


def test_committed_effort() -> None:
    effort = Committed(TurnCommitment(3))
    data = effort_to_dict(effort)
    assert data == {"kind": "committed", "commitment": {"kind": "turn", "amount": 3}}
    assert effort_from_dict(data) == effort

    hit_die = HitDie(value=Value.new(4), effort=effort, statuses=pmap())
    assert hit_die_from_dict(hit_die_to_dict(hit_die)) == hit_die


@pytest.mark.parametrize(
    "action",
    [Chip(3), Fortify(1), Mend(), AddStatus(Fortified(2)), RemoveStatus(Guarded())],
)
def test_action_dicts(action) -> None:
    assert action_from_dict(action_to_dict(action)) == action


def test_response_to_dict() -> None:
    assert response_to_dict(ChipResponse(1, 4)) == {
        "type": "ChipResponse",
        "index": 1,
        "spillover": 4,
    }
    assert response_to_dict(FortifiedResponse(0, 2))["amount"] == 2


def test_log_to_dicts() -> None:
    state, eid = make_creature_state(6)
    state, _ = step(state, eid, Chip(2))
    assert log_to_dicts(state.log) == [
        {
            "turn": 0,
            "entity_id": eid,
            "action": {"kind": "chip", "amount": 2},
            "responses": [{"type": "ChipResponse", "index": 0, "spillover": 0}],
        }
    ]


@pytest.mark.parametrize(
    "data",
    [
        {},
        {"hit_dice": "nope"},
        {"hit_dice": [{}]},
        {"hit_dice": [{"value": {"total": 4}}]},
        {"hit_dice": [{"value": {"total": 4, "current": 5}}]},
        {"hit_dice": [{"value": {"total": 4, "current": -1}}]},
        {"hit_dice": [{"value": {"total": "4", "current": 4}}]},
        {"hit_dice": [{"value": {"total": 4, "current": 4}, "statuses": [{}]}]},
        {
            "hit_dice": [
                {"value": {"total": 4, "current": 4}, "statuses": [{"kind": "hexed"}]}
            ]
        },
        {
            "hit_dice": [
                {
                    "value": {"total": 4, "current": 4},
                    "statuses": [{"kind": "fortified"}],
                }
            ]
        },
        {
            "hit_dice": [
                {
                    "value": {"total": 4, "current": 4},
                    "statuses": [{"kind": "guarded"}, {"kind": "guarded"}],
                }
            ]
        },
        {
            "hit_dice": [
                {"value": {"total": 4, "current": 4}, "effort": {"kind": "lazy"}}
            ]
        },
    ],
)
def test_malformed_health_raises(data) -> None:
    with pytest.raises(ValueError):
        health_from_dict(data)


@pytest.mark.parametrize(
    "data",
    [
        {"kind": "smash"},
        {"amount": 3},
        {"kind": "chip"},
        {"kind": "chip", "amount": True},
        {"kind": "add_status"},
    ],
)
def test_malformed_action_raises(data) -> None:
    with pytest.raises(ValueError):
        action_from_dict(data)
