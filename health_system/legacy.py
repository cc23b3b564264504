"""Legacy health system (boolean death flag).

The first release of the component tracked death with a plain boolean and had
no modifier and no revive. It is kept for hosts that still store it;
:class:`health_system.components.HealthSystem` is the canonical component and
a strict superset of this behavior.
"""

import logging
from dataclasses import dataclass, field

from health_system.utils.math import ratio

logger = logging.getLogger(__name__)


@dataclass
class LegacyHealthSystem:
    """Boolean-flag variant of :class:`HealthSystem`.

    Same construction and arithmetic rules; ``kill_system`` and
    ``deal_damage`` have no ``force`` parameter since there is nothing to
    bypass.
    """

    max_health: float
    health: float = field(init=False)
    is_dead_flag: bool = field(init=False)

    def __post_init__(self) -> None:
        self.health = self.max_health
        self.is_dead_flag = self.max_health < 0

    def get_health(self) -> float:
        return self.health

    def get_health_max(self) -> float:
        return self.max_health

    def is_dead(self) -> bool:
        return self.is_dead_flag

    def get_health_normalized(self) -> float:
        return ratio(self.health, self.max_health)

    def deal_damage(self, amount: float) -> None:
        self.health -= amount
        self._check_is_dead()

    def kill_system(self) -> None:
        self.health = 0.0
        self.is_dead_flag = True

    def heal(self, amount: float) -> float:
        overflow_value = self.max_health - amount
        self.health += amount
        return overflow_value

    def heal_full(self) -> None:
        self.health = self.max_health

    def set_health(self, value: float) -> float:
        self.health = min(max(value, 0.0), self.max_health)
        self._check_is_dead()
        return self.max_health - value

    def set_health_max(self, value: float, heal_system: bool = False) -> None:
        self.max_health = max(value, 0.0)
        if heal_system:
            self.heal_full()
        self._check_is_dead()

    def _check_is_dead(self) -> None:
        if self.health <= 0:
            if not self.is_dead_flag:
                logger.debug("Legacy health system died at health=%s", self.health)
            self.is_dead_flag = True
