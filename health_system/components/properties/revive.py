"""Revive heal types.

Each variant describes how :meth:`HealthSystem.revive_system` restores hit
points after flipping the system back to ``ALIVE``.
"""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class HealFull:
    """Heal to ``max_health``."""

    pass


@dataclass(frozen=True)
class HealTo:
    """Heal to ``value`` through ``set_health``; the overflow is returned."""

    value: float


@dataclass(frozen=True)
class HealPercentage:
    """Heal to ``percentage`` percent of ``max_health`` (``50.0`` is half)."""

    percentage: float


ReviveHealType = Union[HealFull, HealTo, HealPercentage]
