"""Dead marker component (host-side)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Dead:
    """Marker set by :func:`death_system` when an entity's health system is dead."""

    pass
