"""Behavioral properties of health actions over whole sequences of dice."""

from typing import List

import pytest

from svarog.actions import (
    AddStatus,
    Break,
    Chip,
    Drain,
    Fortify,
    Heal,
    HealthAction,
)
from svarog.components import Fortified, Guarded, Temporary
from svarog.responses import RecoveryResponse, ShatterResponse
from svarog.systems.health import health_system
from svarog.types import StatusKind
from tests.test_utils import currents, make_health, run


def expected_after_chip(values: List[int], damage: int) -> List[int]:
    result = list(values)
    for index in range(len(result) - 1, -1, -1):
        taken = min(result[index], damage)
        result[index] -= taken
        damage -= taken
    return result


def expected_after_heal(values: List[int], totals: List[int], amount: int) -> List[int]:
    result = list(values)
    for index in range(len(result)):
        given = min(totals[index] - result[index], amount)
        result[index] += given
        amount -= given
    return result


@pytest.mark.parametrize("damage", [1, 2, 4, 7, 9, 10, 15])
def test_chip_conserves_damage_right_to_left(damage: int) -> None:
    totals = [3, 5, 2]
    health, _ = health_system(make_health(*totals), Chip(damage))
    assert sum(totals) - sum(currents(health)) == min(damage, sum(totals))
    assert currents(health) == expected_after_chip(totals, damage)


@pytest.mark.parametrize("amount", [1, 3, 6, 8, 20])
def test_heal_conserves_healing_left_to_right(amount: int) -> None:
    totals = [4, 4, 4]
    damaged, _ = health_system(make_health(*totals), Chip(10))
    before = currents(damaged)
    assert before == [2, 0, 0]

    healed, _ = health_system(damaged, Heal(amount))
    missing = sum(totals) - sum(before)
    assert sum(currents(healed)) - sum(before) == min(amount, missing)
    assert currents(healed) == expected_after_heal(before, totals, amount)


@pytest.mark.parametrize("action", [Chip(0), Heal(0)])
def test_zero_amounts_never_change_dice(action: HealthAction) -> None:
    health, _ = run(make_health(6, 6, 6), Chip(8), Break(), Fortify(2))
    assert health_system(health, action)[0] == health


@pytest.mark.parametrize("charges", [1, 2, 5])
def test_fortified_zero_restores_and_consumes_one_charge(charges: int) -> None:
    health, _ = run(make_health(6), AddStatus(Fortified(charges)), Chip(6))
    hit_die = health.hit_dice[0]
    assert hit_die.value.current == hit_die.value.total
    if charges == 1:
        assert not hit_die.has(StatusKind.FORTIFIED)
    else:
        assert hit_die.statuses[StatusKind.FORTIFIED] == Fortified(charges - 1)


@pytest.mark.parametrize("dice", [1, 2, 3])
def test_temporary_die_removed_on_zero(dice: int) -> None:
    health, _ = run(make_health(*([6] * dice)), AddStatus(Temporary()))
    health, responses = health_system(health, Chip(6))
    assert responses == [ShatterResponse(dice - 1)]
    assert len(health) == dice - 1


@pytest.mark.parametrize("action", [Drain(), Break()])
def test_guarded_die_is_immune(action: HealthAction) -> None:
    health, _ = run(make_health(6), Chip(2), AddStatus(Guarded()))
    after, responses = health_system(health, action)
    assert responses == [RecoveryResponse(0)]
    assert after == health
