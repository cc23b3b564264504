"""Health system component for entity-component-system hosts.

Quick start::

    from health_system import HealthSystem, HealFull

    hs = HealthSystem(100.0)
    hs.deal_damage(10.0)
    hs.kill_system()
    hs.revive_system(HealFull())
"""

import logging

from health_system.components import (
    Dead,
    HealFull,
    HealPercentage,
    HealTo,
    HealthSystem,
    ReviveHealType,
)
from health_system.config import HealthConfig
from health_system.legacy import LegacyHealthSystem
from health_system.types import EntityID, HealthSystemModifier, HealthSystemState

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Dead",
    "EntityID",
    "HealFull",
    "HealPercentage",
    "HealTo",
    "HealthConfig",
    "HealthSystem",
    "HealthSystemModifier",
    "HealthSystemState",
    "LegacyHealthSystem",
    "ReviveHealType",
]
