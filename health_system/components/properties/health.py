"""Health system component.

The component is the unit a host attaches to an entity at spawn time. Unlike
the marker components of this package it carries behavior: hosts call its
mutators in place whenever gameplay deals damage, heals, kills or revives
the entity, and read :meth:`HealthSystem.is_dead` to drive removal or respawn.

Arithmetic rules:

* ``deal_damage`` and ``heal`` never clamp; ``health`` may go below zero or
  above ``max_health`` until the next ``set_health``.
* ``set_health`` clamps into ``[0, max_health]``.
* The *dead-check* flips the state to ``DEAD`` when ``health <= 0``. Nothing
  but :meth:`HealthSystem.revive_system` flips it back.
* ``heal`` and ``set_health`` report ``max_health - amount`` as their
  overflow. This is the raw difference, not the clamped excess.
"""

import logging
from dataclasses import dataclass, field

from health_system.components.properties.revive import (
    HealFull,
    HealPercentage,
    HealTo,
    ReviveHealType,
)
from health_system.types import HealthSystemModifier, HealthSystemState
from health_system.utils.math import ratio

logger = logging.getLogger(__name__)


@dataclass
class HealthSystem:
    """Hit points, death state and damage modifier of a single entity.

    Attributes:
        max_health:
            Upper bound used by ``set_health``. Kept ``>= 0`` by
            ``set_health_max``; the constructor stores it as given.
        health:
            Current hit points. Starts at ``max_health`` (negative when
            constructed with a negative max, in which case the system starts
            dead).
        system_state:
            ``ALIVE`` or ``DEAD``.
        system_modifier:
            ``NONE`` or ``INVINCIBLE``. Invincible systems ignore damage and
            kill calls unless forced.

    Example:
        >>> hs = HealthSystem(100.0)
        >>> hs.deal_damage(10.0)
        >>> hs.get_health(), hs.is_dead()
        (90.0, False)
        >>> hs.deal_damage(90.0)
        >>> hs.get_health(), hs.is_dead()
        (0.0, True)
    """

    max_health: float
    health: float = field(init=False)
    system_state: HealthSystemState = field(init=False)
    system_modifier: HealthSystemModifier = field(
        init=False, default=HealthSystemModifier.NONE
    )

    def __post_init__(self) -> None:
        self.health = self.max_health
        self.system_state = (
            HealthSystemState.DEAD if self.max_health < 0 else HealthSystemState.ALIVE
        )

    # Accessors

    def get_health(self) -> float:
        return self.health

    def get_health_max(self) -> float:
        return self.max_health

    def is_dead(self) -> bool:
        return self.system_state == HealthSystemState.DEAD

    def get_health_normalized(self) -> float:
        """Return ``health / max_health``.

        A zero ``max_health`` is not guarded against: the result is ``inf``,
        ``-inf`` or ``nan`` following IEEE float division, never an error.
        """
        return ratio(self.health, self.max_health)

    def get_modifier(self) -> HealthSystemModifier:
        return self.system_modifier

    def current_modifier_is(self, modifier: HealthSystemModifier) -> bool:
        return self.get_modifier() == modifier

    # Mutators

    def deal_damage(self, amount: float, force: bool = False) -> None:
        """Subtract ``amount`` from ``health`` and run the dead-check.

        Args:
            amount (float): Damage dealt. Not clamped; health may go negative.
            force (bool): Bypass the ``INVINCIBLE`` modifier for this call.
        """
        if self._blocked(force):
            logger.debug("Damage of %s blocked by %s", amount, self.system_modifier)
            return
        self.health -= amount
        self._check_is_dead()

    def kill_system(self, force: bool = False) -> None:
        """Set ``health`` to zero and the state to ``DEAD``.

        Args:
            force (bool): Bypass the ``INVINCIBLE`` modifier for this call.
        """
        if self._blocked(force):
            logger.debug("Kill blocked by %s", self.system_modifier)
            return
        self.health = 0.0
        self._set_dead()

    def revive_system(self, revive_type: ReviveHealType) -> float:
        """Flip the state back to ``ALIVE`` and restore hit points.

        Args:
            revive_type (ReviveHealType): How to restore hit points.

        Returns:
            float: The ``set_health`` overflow for ``HealTo``, else ``0.0``.

        Raises:
            TypeError: If ``revive_type`` is not a revive heal type.
        """
        if not isinstance(revive_type, (HealFull, HealPercentage, HealTo)):
            raise TypeError(f"Unknown revive heal type: {revive_type!r}")

        self.system_state = HealthSystemState.ALIVE
        overflow_amount = 0.0

        if isinstance(revive_type, HealFull):
            self.heal_full()
        elif isinstance(revive_type, HealPercentage):
            # Direct assignment: no clamp and no dead-check on this path.
            self.health = self.max_health * (revive_type.percentage / 100.0)
        else:
            overflow_amount = self.set_health(revive_type.value)

        logger.debug("Revived with %r, health=%s", revive_type, self.health)
        return overflow_amount

    def heal(self, amount: float) -> float:
        """Add ``amount`` to ``health`` without clamping.

        Returns:
            float: ``max_health - amount``, computed before healing.
        """
        overflow_value = self.max_health - amount
        self.health += amount
        return overflow_value

    def heal_full(self) -> None:
        self.health = self.max_health

    def set_health(self, value: float) -> float:
        """Store ``value`` clamped into ``[0, max_health]`` and run the dead-check.

        The clamped value is written before the dead-check, so
        ``set_health(0)`` kills a live system.

        Returns:
            float: ``max_health - value`` using the unclamped ``value``.
        """
        final_value = value
        if value < 0:
            final_value = 0.0
        elif value > self.max_health:
            final_value = self.max_health

        self.health = final_value
        self._check_is_dead()

        # overflow
        return self.max_health - value

    def set_health_max(self, value: float, heal_system: bool = False) -> None:
        """Set ``max_health`` (negative values clamp to zero).

        Args:
            value (float): New max health.
            heal_system (bool): Heal the current health to the new max.
        """
        self.max_health = max(value, 0.0)
        if heal_system:
            self.heal_full()
        self._check_is_dead()

    def set_modifier(self, value: HealthSystemModifier) -> None:
        self.change_modifier(value)

    def change_modifier(self, modifier: HealthSystemModifier) -> None:
        """Replace the modifier; ignored while the system is dead."""
        if self.is_dead():
            logger.debug("Modifier change to %s ignored: system is dead", modifier)
            return
        self.system_modifier = modifier

    # Internals

    def _blocked(self, force: bool) -> bool:
        return self.current_modifier_is(HealthSystemModifier.INVINCIBLE) and not force

    def _check_is_dead(self) -> None:
        if self.health <= 0:
            self._set_dead()

    def _set_dead(self) -> None:
        if self.system_state != HealthSystemState.DEAD:
            logger.debug("Health system died at health=%s", self.health)
        self.system_state = HealthSystemState.DEAD
