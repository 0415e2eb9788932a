"""Position commit system.

:func:`swap` is the only place a movement touches both the grid and the
mobile-position index. It relocates the occupant of ``start`` to ``end`` and
records ``end`` as that entity's position in a single new ``RoomState``.
"""

from dataclasses import replace
import logging

from grid_room.components import Position
from grid_room.errors import MapError
from grid_room.state import RoomState
from grid_room.utils.grid import check_bounds, occupant_at

logger = logging.getLogger(__name__)


def swap(state: RoomState, start: Position, end: Position) -> RoomState:
    """Move the occupant of ``start`` to ``end``.

    When ``start == end`` the cell stays occupied and only the index entry is
    refreshed.

    Args:
        state (RoomState): Current state.
        start (Position): Cell holding the entity being moved.
        end (Position): Cell the entity comes to rest on.

    Returns:
        RoomState: New state with the grid and index updated together.

    Raises:
        OutOfBounds: If ``start`` or ``end`` lies outside the grid.
        MapError: If ``start`` is empty.
    """
    check_bounds(state, start)
    check_bounds(state, end)
    entity = occupant_at(state, start)
    if entity is None:
        raise MapError(f"No entity to move at {(start.x, start.y)}")

    grid = state.grid
    if start != end:
        grid = grid.set(end.y, end.x, entity).set(start.y, start.x, None)
    logger.debug("Committed %s from %s to %s", entity.name, start, end)
    return replace(state, grid=grid, mobile=state.mobile.set(entity.name, end))
