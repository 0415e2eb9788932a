"""Grid lookup helpers.

Pure predicates and lookups over a :class:`~grid_room.state.RoomState`,
translating ``Position`` (x = column, y = row) into grid ``(row, col)``
access. Used by the placement and movement systems.
"""

from grid_room.components import Position
from grid_room.errors import OutOfBounds
from grid_room.state import RoomState
from grid_room.types import Cell


def is_in_bounds(state: RoomState, pos: Position) -> bool:
    """Return True if ``pos`` lies within the room rectangle."""
    return state.grid.in_bounds(pos.y, pos.x)


def check_bounds(state: RoomState, pos: Position) -> None:
    """Raise :class:`OutOfBounds` unless ``pos`` is inside the room."""
    if not is_in_bounds(state, pos):
        raise OutOfBounds(pos, state.size)


def occupant_at(state: RoomState, pos: Position) -> Cell:
    """Return the entity at ``pos`` or ``None`` if the tile is empty."""
    return state.grid.get(pos.y, pos.x)
