"""health_system.components
=================================

Aggregate import surface for the component classes, e.g.::

    from health_system.components import HealthSystem, HealFull

"""

from .properties import Dead
from .properties import HealFull
from .properties import HealPercentage
from .properties import HealTo
from .properties import HealthSystem
from .properties import ReviveHealType

__all__ = [
    "Dead",
    "HealFull",
    "HealPercentage",
    "HealTo",
    "HealthSystem",
    "ReviveHealType",
]
