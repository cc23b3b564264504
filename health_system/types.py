"""Common type aliases and enumerations.

``HealthSystemState`` and ``HealthSystemModifier`` are closed enumerations
consumed by :class:`health_system.components.HealthSystem`.
"""

from enum import StrEnum, auto


EntityID = int


class HealthSystemState(StrEnum):
    """Life state of a health system. ``DEAD`` is sticky until a revive."""

    ALIVE = auto()
    DEAD = auto()


class HealthSystemModifier(StrEnum):
    """Modifier gating non-forced damage and kill calls."""

    NONE = auto()
    INVINCIBLE = auto()
