import pytest

from svarog.components import Fortified, Temporary
from svarog.state import State
from svarog.templates import (
    CreatureTemplate,
    HitDieTemplate,
    add_creature,
    build_health,
    template_from_dict,
)
from svarog.types import StatusKind
from tests.test_utils import currents, kinds


def test_build_health_creates_dice_with_statuses() -> None:
    template = CreatureTemplate(
        name="knight",
        hit_dice=(
            HitDieTemplate(size=8),
            HitDieTemplate(size=6, statuses=(Fortified(1), Temporary())),
        ),
    )
    health = build_health(template)

    assert currents(health) == [8, 6]
    assert kinds(health, 0) == set()
    assert kinds(health, 1) == {StatusKind.FORTIFIED, StatusKind.TEMPORARY}
    assert health.hit_dice[1].statuses[StatusKind.FORTIFIED] == Fortified(1)


def test_build_health_rejects_non_positive_size() -> None:
    with pytest.raises(ValueError):
        build_health(CreatureTemplate(name="bad", hit_dice=(HitDieTemplate(size=0),)))


def test_add_creature_registers_entity() -> None:
    template = CreatureTemplate(name="goblin", hit_dice=(HitDieTemplate(size=4),))
    state, eid = add_creature(State(), template)

    assert eid in state.entity
    assert currents(state.health[eid]) == [4]
    assert eid not in state.dead


def test_add_creature_with_explicit_id() -> None:
    template = CreatureTemplate(name="goblin", hit_dice=(HitDieTemplate(size=4),))
    state, eid = add_creature(State(), template, entity_id=42)
    assert eid == 42

    with pytest.raises(ValueError):
        add_creature(state, template, entity_id=42)


def test_template_from_dict() -> None:
    template = template_from_dict(
        "wisp",
        {
            "hit_dice": [
                {"size": 6},
                {"size": 4, "statuses": [{"kind": "fortified", "amount": 2}]},
            ]
        },
    )
    assert template == CreatureTemplate(
        name="wisp",
        hit_dice=(
            HitDieTemplate(size=6),
            HitDieTemplate(size=4, statuses=(Fortified(2),)),
        ),
    )


@pytest.mark.parametrize("size", [0, -3, "6", None, True])
def test_template_from_dict_invalid_size(size) -> None:
    with pytest.raises(ValueError):
        template_from_dict("bad", {"hit_dice": [{"size": size}]})


@pytest.mark.parametrize(
    "data",
    [
        {"hit_dice": [6]},
        {"hit_dice": ["d6"]},
        {"hit_dice": 6},
        {"hit_dice": {"size": 6}},
        {"hit_dice": [{"size": 6, "statuses": "guarded"}]},
        {"hit_dice": [{"size": 6, "statuses": 3}]},
        {"hit_dice": [{"size": 6, "statuses": ["guarded"]}]},
        [{"size": 6}],
        None,
    ],
)
def test_template_from_dict_malformed_entries(data) -> None:
    with pytest.raises(ValueError):
        template_from_dict("bad", data)
