"""Property component aggregates.

This module re-exports the *property* components: the behavioral
:class:`HealthSystem` an entity owns for its whole lifetime, the revive heal
types it accepts, and the :class:`Dead` marker hosts use to flag entities for
removal.
"""

from .dead import Dead
from .health import HealthSystem
from .revive import HealFull, HealPercentage, HealTo, ReviveHealType

__all__ = [
    "Dead",
    "HealFull",
    "HealPercentage",
    "HealTo",
    "HealthSystem",
    "ReviveHealType",
]
