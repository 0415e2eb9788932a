"""Entity placement system.

Writes an entity into a cell without any collision check: placement is
authoritative and overwrites whatever occupied the tile. Mobile entities are
recorded in the position index; static ones only occupy their cell.

Two bookkeeping rules keep the index consistent with the grid:

1. Re-placing an entity clears every other cell it occupied, static or mobile.
2. Overwriting a *different* mobile entity drops that entity from the index.
"""

from dataclasses import replace
import logging

from grid_room.components import Position
from grid_room.entity import Entity
from grid_room.state import RoomState
from grid_room.utils.grid import check_bounds, occupant_at

logger = logging.getLogger(__name__)


def placement_system(
    state: RoomState, entity: Entity, position: Position, is_static: bool
) -> RoomState:
    """Place ``entity`` at ``position``.

    Args:
        state (RoomState): Current state.
        entity (Entity): Entity to place.
        position (Position): Target cell.
        is_static (bool): If True the entity is never tracked or moved.

    Returns:
        RoomState: New state with the entity placed.

    Raises:
        OutOfBounds: If ``position`` is outside the grid. The state is left
            untouched.
    """
    check_bounds(state, position)

    grid = state.grid
    mobile = state.mobile

    for pos, occupant in state.grid.occupied():
        if occupant.name == entity.name and pos != position:
            grid = grid.set(pos.y, pos.x, None)

    displaced = occupant_at(state, position)
    if displaced is not None and displaced.name != entity.name:
        if displaced.name in mobile:
            logger.debug("Placement of %s displaces %s", entity.name, displaced.name)
        mobile = mobile.discard(displaced.name)

    grid = grid.set(position.y, position.x, entity)
    if is_static:
        mobile = mobile.discard(entity.name)
    else:
        mobile = mobile.set(entity.name, position)

    logger.debug(
        "Placed %s %s at %s",
        "static" if is_static else "mobile",
        entity.name,
        position,
    )
    return replace(state, grid=grid, mobile=mobile)
