"""Movement resolution system.

Resolves a :class:`~grid_room.components.Movement` for a mobile entity by
walking its tile path greedily:

1. Look up the entity's recorded position (``EntityNotMobile`` if absent).
2. Expand the movement into its traversed tiles (see :mod:`grid_room.moves`).
3. For each tile in order:

   * in bounds and empty: keep going;
   * in bounds and occupied: stop on the previous tile and report a
     :class:`~grid_room.results.Collision` with the occupant;
   * out of bounds on the first tile: raise ``OutOfBounds``, nothing moves;
   * out of bounds later: stop on the previous tile and report
     :class:`~grid_room.results.Failure`.

4. A fully clear path ends on the target with :class:`~grid_room.results.Success`.

Every stop is committed through :func:`grid_room.systems.position.swap`.
"""

import logging
from typing import Tuple

from grid_room.components import Movement
from grid_room.entity import Entity
from grid_room.errors import EntityNotMobile, OutOfBounds
from grid_room.moves import destination, traversed_tiles
from grid_room.results import Collision, Failure, MoveResult, Success
from grid_room.state import RoomState
from grid_room.systems.position import swap
from grid_room.utils.grid import is_in_bounds, occupant_at

logger = logging.getLogger(__name__)


def movement_system(
    state: RoomState, entity: Entity, movement: Movement
) -> Tuple[RoomState, MoveResult]:
    """Move ``entity`` along ``movement`` until done or blocked.

    Args:
        state (RoomState): Current state.
        entity (Entity): Mobile entity to move.
        movement (Movement): Requested direction and distance.

    Returns:
        Tuple[RoomState, MoveResult]: Next state and the movement outcome.

    Raises:
        EntityNotMobile: If ``entity`` is not tracked as mobile.
        OutOfBounds: If even the first tile of the path is off the grid.
    """
    start = state.mobile.get(entity.name)
    if start is None:
        raise EntityNotMobile(entity.name)

    path = traversed_tiles(start, movement)
    logger.debug(
        "Moving %s %s by %d from %s towards %s",
        entity.name,
        movement.direction,
        movement.distance,
        start,
        destination(start, movement),
    )

    resolved = start
    for index, tile in enumerate(path):
        if not is_in_bounds(state, tile):
            if index == 0:
                raise OutOfBounds(tile, state.size)
            logger.debug("%s left the grid at %s, stopping at %s", entity.name, tile, resolved)
            return swap(state, start, resolved), Failure()

        occupant = occupant_at(state, tile)
        if occupant is not None:
            logger.debug("Collision! %s ran into %s at %s", entity.name, occupant.name, tile)
            return swap(state, start, resolved), Collision((entity, occupant))

        resolved = tile

    return swap(state, start, resolved), Success()
