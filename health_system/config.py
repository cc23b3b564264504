"""Spawn configuration for health systems.

Hosts usually keep per-archetype settings (player, grunt, boss) in plain data
files; :meth:`HealthConfig.from_mapping` turns one such mapping into a typed
config, and :meth:`HealthConfig.build` produces the component at spawn.
"""

from dataclasses import dataclass, fields
from typing import Any, Mapping

from health_system.components import HealthSystem
from health_system.types import HealthSystemModifier


@dataclass(frozen=True)
class HealthConfig:
    """Settings applied to a freshly spawned :class:`HealthSystem`.

    Attributes:
        max_health: Starting (and max) health.
        modifier: Modifier applied right after construction. Has no effect
            when ``max_health`` is negative, since the system starts dead.
    """

    max_health: float = 100.0
    modifier: HealthSystemModifier = HealthSystemModifier.NONE

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "HealthConfig":
        """Build a config from a plain mapping.

        Raises:
            ValueError: On unknown keys, a non-numeric ``max_health`` or an
                unknown modifier name.
        """
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown health config keys: {sorted(unknown)}")

        kwargs: dict[str, Any] = {}
        if "max_health" in data:
            try:
                kwargs["max_health"] = float(data["max_health"])
            except (TypeError, ValueError) as exc:
                raise ValueError(
                    f"max_health must be a number, got {data['max_health']!r}"
                ) from exc
        if "modifier" in data:
            modifier = data["modifier"]
            if not isinstance(modifier, HealthSystemModifier):
                try:
                    modifier = HealthSystemModifier(str(modifier).lower())
                except ValueError as exc:
                    raise ValueError(f"Unknown modifier: {modifier!r}") from exc
            kwargs["modifier"] = modifier
        return cls(**kwargs)

    def build(self) -> HealthSystem:
        health_system = HealthSystem(self.max_health)
        health_system.set_modifier(self.modifier)
        return health_system
