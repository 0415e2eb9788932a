"""Movement path enumeration.

:func:`traversed_tiles` expands a :class:`~grid_room.components.Movement`
into the ordered tiles an entity passes through: one tile per unit of
distance, starting one step beyond the current position and ending at the
target (inclusive). The movement system walks this path tile by tile so an
entity can slide until it is blocked instead of failing outright.

Tiles are produced without bounds checks; positions off the grid (including
negative coordinates) are left for the caller to reject.
"""

from typing import List

from grid_room.components import Movement, Position


def traversed_tiles(start: Position, movement: Movement) -> List[Position]:
    """Return the path from ``start`` for ``movement``, excluding ``start``."""
    dx, dy = movement.direction.delta
    return [start.offset(dx * step, dy * step) for step in range(1, movement.distance + 1)]


def destination(start: Position, movement: Movement) -> Position:
    """Return the target tile of ``movement`` (last tile of the path)."""
    dx, dy = movement.direction.delta
    return start.offset(dx * movement.distance, dy * movement.distance)
