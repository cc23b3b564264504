import pytest

from health_system.components import HealFull, HealPercentage, HealTo, HealthSystem
from health_system.types import HealthSystemModifier


def make_dead(max_health: float = 100.0) -> HealthSystem:
    hs = HealthSystem(max_health)
    hs.kill_system(False)
    assert hs.is_dead()
    return hs


def test_revive_heal_full() -> None:
    hs = make_dead()
    overflow = hs.revive_system(HealFull())
    assert overflow == 0.0
    assert not hs.is_dead()
    assert hs.get_health() == 100.0


def test_revive_heal_percentage() -> None:
    hs = make_dead(200.0)
    overflow = hs.revive_system(HealPercentage(25.0))
    assert overflow == 0.0
    assert not hs.is_dead()
    assert hs.get_health() == 50.0


@pytest.mark.parametrize("percentage, expected", [(150.0, 150.0), (0.0, 0.0)])
def test_revive_heal_percentage_skips_clamp_and_dead_check(
    percentage: float, expected: float
) -> None:
    hs = make_dead()
    hs.revive_system(HealPercentage(percentage))
    assert hs.get_health() == expected
    assert not hs.is_dead()


def test_revive_heal_to_returns_set_health_overflow() -> None:
    hs = make_dead()
    overflow = hs.revive_system(HealTo(30.0))
    assert overflow == 70.0
    assert hs.get_health() == 30.0
    assert not hs.is_dead()


def test_revive_heal_to_clamps_above_max() -> None:
    hs = make_dead()
    overflow = hs.revive_system(HealTo(250.0))
    assert overflow == -150.0
    assert hs.get_health() == 100.0


def test_revive_heal_to_zero_dies_again() -> None:
    hs = make_dead()
    hs.revive_system(HealTo(0.0))
    assert hs.is_dead()


def test_revive_on_alive_system() -> None:
    hs = HealthSystem(100.0)
    hs.deal_damage(60.0)
    hs.revive_system(HealFull())
    assert hs.get_health() == 100.0
    assert not hs.is_dead()


def test_revive_allows_modifier_changes_again() -> None:
    hs = make_dead()
    hs.set_modifier(HealthSystemModifier.INVINCIBLE)
    assert hs.get_modifier() == HealthSystemModifier.NONE
    hs.revive_system(HealFull())
    hs.set_modifier(HealthSystemModifier.INVINCIBLE)
    assert hs.get_modifier() == HealthSystemModifier.INVINCIBLE


def test_revive_negative_max_system() -> None:
    hs = HealthSystem(-10.0)
    hs.revive_system(HealFull())
    assert not hs.is_dead()
    assert hs.get_health() == -10.0


def test_revive_rejects_unknown_type() -> None:
    hs = make_dead()
    with pytest.raises(TypeError):
        hs.revive_system("full")  # type: ignore[arg-type]
    assert hs.is_dead()
    assert hs.get_health() == 0.0
