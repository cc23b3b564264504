"""Death bookkeeping systems.

Two phases, run by the host after gameplay has mutated health systems:

1. ``death_system``: mirror each health system's ``is_dead()`` into the
   ``Dead`` marker store (adding and clearing markers).
2. ``remove_dead_system``: drop marked entities and every component entry
   they own.

Hosts that respawn instead of removing simply skip phase 2 and call
``revive_system`` on the component; the next ``death_system`` pass clears the
marker.
"""

import logging
from dataclasses import replace
from typing import Any, Dict, Set, cast

from pyrsistent import pmap
from pyrsistent.typing import PMap

from health_system.components import Dead
from health_system.state import State
from health_system.types import EntityID

logger = logging.getLogger(__name__)


def dead_entities(state: State) -> Set[EntityID]:
    """Return IDs whose health system currently reports dead."""
    return {eid for eid, hs in state.health.items() if hs.is_dead()}


def alive_entities(state: State) -> Set[EntityID]:
    """Return IDs whose health system currently reports alive."""
    return set(state.health.keys()) - dead_entities(state)


def death_system(state: State) -> State:
    """Sync ``Dead`` markers with the health systems' state."""
    dead: PMap[EntityID, Dead] = state.dead
    now_dead = dead_entities(state)

    for eid in now_dead - set(dead.keys()):
        logger.debug("Entity %s died", eid)
        dead = dead.set(eid, Dead())
    for eid in set(dead.keys()) - now_dead:
        if eid in state.health:
            logger.debug("Entity %s revived", eid)
            dead = dead.remove(eid)

    return replace(state, dead=dead)


def remove_dead_system(state: State) -> State:
    """Prune every component map down to entities not marked ``Dead``."""
    removed = set(state.dead.keys())
    if not removed:
        return state

    new_fields: Dict[str, Any] = {}
    for field in state.__dataclass_fields__:
        value = getattr(state, field)
        if isinstance(value, type(pmap())):
            value_map = cast(PMap[EntityID, Any], value)
            new_fields[field] = pmap(
                {k: v for k, v in value_map.items() if k not in removed}
            )
    logger.debug("Removed dead entities %s", sorted(removed))
    return replace(state, **new_fields)
