"""Entity registry marker & ID allocation.

A host models each *thing* as an ``EntityID`` plus the components stored for
it on :class:`health_system.state.State`. IDs come from one process-wide
counter, so they are unique and increasing across every ``State`` built in
the process, and are never reused after an entity is removed.
"""

import itertools
from dataclasses import dataclass
from typing import List

from health_system.types import EntityID


@dataclass(frozen=True)
class Entity:
    """Registry marker for a spawned entity."""

    pass


_next_id = itertools.count()


def new_entity_id() -> EntityID:
    """Allocate one entity ID."""
    return next(_next_id)


def new_entity_ids(n: int) -> List[EntityID]:
    """Allocate ``n`` consecutive-order entity IDs for a batch spawn.

    Raises:
        ValueError: If ``n`` is negative.
    """
    if n < 0:
        raise ValueError(f"Cannot allocate {n} entity IDs")
    return [new_entity_id() for _ in range(n)]
