import pytest

from health_system.legacy import LegacyHealthSystem


def test_legacy_construction() -> None:
    hs = LegacyHealthSystem(50.0)
    assert hs.get_health() == 50.0
    assert hs.get_health_max() == 50.0
    assert not hs.is_dead()
    assert LegacyHealthSystem(-1.0).is_dead()


def test_legacy_damage_and_death() -> None:
    hs = LegacyHealthSystem(100.0)
    hs.deal_damage(10.0)
    assert hs.get_health() == 90.0
    assert not hs.is_dead()
    hs.deal_damage(90.0)
    assert hs.get_health() == 0.0
    assert hs.is_dead()


def test_legacy_kill_and_heal_full_keeps_dead_flag() -> None:
    hs = LegacyHealthSystem(100.0)
    hs.kill_system()
    assert hs.get_health() == 0.0
    hs.heal_full()
    assert hs.get_health() == 100.0
    assert hs.is_dead()


def test_legacy_heal_and_set_health_overflow() -> None:
    hs = LegacyHealthSystem(100.0)
    hs.deal_damage(10.0)
    assert hs.heal(20.0) == 80.0
    assert hs.get_health() == 110.0
    assert hs.set_health(200.0) == -100.0
    assert hs.get_health() == 100.0
    hs.set_health(-3.0)
    assert hs.get_health() == 0.0
    assert hs.is_dead()


def test_legacy_set_health_max() -> None:
    hs = LegacyHealthSystem(100.0)
    hs.set_health_max(400.0, True)
    assert hs.get_health() == 400.0
    hs.set_health_max(-5.0)
    assert hs.get_health_max() == 0.0
    assert not hs.is_dead()
    assert hs.get_health_normalized() == float("inf")


def test_legacy_damage_takes_no_force_flag() -> None:
    hs = LegacyHealthSystem(100.0)
    with pytest.raises(TypeError):
        hs.deal_damage(10.0, True)  # type: ignore[call-arg]
    with pytest.raises(TypeError):
        hs.kill_system(True)  # type: ignore[call-arg]
    assert hs.get_health() == 100.0
    assert not hs.is_dead()


@pytest.mark.parametrize("damage", [0.0, 30.0, 250.0])
def test_legacy_kill_always_kills(damage: float) -> None:
    hs = LegacyHealthSystem(100.0)
    hs.deal_damage(damage)
    hs.kill_system()
    assert hs.get_health() == 0.0
    assert hs.is_dead()


def test_legacy_set_health_zero_kills() -> None:
    hs = LegacyHealthSystem(100.0)
    assert hs.set_health(0.0) == 100.0
    assert hs.get_health() == 0.0
    assert hs.is_dead()
