"""Minimal immutable host ``State``.

The component itself is mutated in place; this snapshot only records *which*
entities exist and which health system each one owns. Systems take a
``State`` and return a new one.

Design notes:

* Component stores are **persistent maps** (``pyrsistent.PMap``) keyed by
    ``EntityID``. Absence of a key means the entity does not currently possess
    that component.
* ``HealthSystem`` values are shared by reference between consecutive
    snapshots; mutating one through :func:`get_health_system` is visible from
    every snapshot that holds it.
"""

import logging
from dataclasses import dataclass, replace
from typing import Any, List, Sequence, Tuple, Union

from pyrsistent import PMap, pmap

from health_system.components import Dead, HealthSystem
from health_system.config import HealthConfig
from health_system.entity import Entity, new_entity_id, new_entity_ids
from health_system.types import EntityID

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class State:
    """Immutable host snapshot.

    Attributes:
        entity (PMap[EntityID, Entity]): Registry of spawned entities.
        health (PMap[EntityID, HealthSystem]): Health system owned by each entity.
        dead (PMap[EntityID, Dead]): Marker for entities awaiting removal.
    """

    entity: PMap[EntityID, Entity] = pmap()
    health: PMap[EntityID, HealthSystem] = pmap()
    dead: PMap[EntityID, Dead] = pmap()

    @property
    def description(self) -> PMap[str, Any]:
        """Sparse view of non-empty fields, for diagnostics."""
        description: PMap[str, Any] = pmap()
        for field in self.__dataclass_fields__:
            value = getattr(self, field)
            if isinstance(value, type(pmap())) and len(value) == 0:
                continue
            description = description.set(field, value)
        return description


def spawn(
    state: State, health: Union[float, HealthConfig]
) -> Tuple[State, EntityID]:
    """Register a new entity owning a fresh :class:`HealthSystem`.

    Args:
        state (State): Current snapshot.
        health (float | HealthConfig): Max health, or a full spawn config.

    Returns:
        Tuple[State, EntityID]: New snapshot and the allocated entity id.
    """
    eid = new_entity_id()
    return _register(state, eid, health), eid


def spawn_many(
    state: State, healths: Sequence[Union[float, HealthConfig]]
) -> Tuple[State, List[EntityID]]:
    """Register one entity per entry of ``healths`` in a single batch.

    IDs are allocated together and follow the order of ``healths``.

    Returns:
        Tuple[State, List[EntityID]]: New snapshot and the allocated ids.
    """
    eids = new_entity_ids(len(healths))
    for eid, health in zip(eids, healths):
        state = _register(state, eid, health)
    return state, eids


def _register(
    state: State, eid: EntityID, health: Union[float, HealthConfig]
) -> State:
    config = health if isinstance(health, HealthConfig) else HealthConfig(health)
    logger.debug("Spawned entity %s with max_health=%s", eid, config.max_health)
    return replace(
        state,
        entity=state.entity.set(eid, Entity()),
        health=state.health.set(eid, config.build()),
    )


def get_health_system(state: State, eid: EntityID) -> HealthSystem:
    """Return the health system owned by ``eid``.

    Raises:
        ValueError: If the entity owns no health system.
    """
    if eid not in state.health:
        raise ValueError(f"Entity {eid} has no HealthSystem")
    return state.health[eid]
