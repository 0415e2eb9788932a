"""Room error taxonomy.

``OutOfBounds`` is the error callers deal with for any coordinate outside a
room. ``EntityNotMobile`` narrows it for lookups of entities that were never
placed or were placed as static: code that only catches ``OutOfBounds``
keeps working, while newer callers can tell the two causes apart.
"""

from typing import Optional

from grid_room.components import Position, Size


class MapError(Exception):
    """Base class for room errors."""


class OutOfBounds(MapError, IndexError):
    """Raised when a coordinate lies outside the room's grid."""

    def __init__(
        self,
        position: Optional[Position] = None,
        size: Optional[Size] = None,
        message: Optional[str] = None,
    ) -> None:
        self.position = position
        self.size = size
        if message is None:
            if position is not None and size is not None:
                message = f"Out of bounds: {(position.x, position.y)} for grid {size}"
            else:
                message = "Position out of bounds"
        super().__init__(message)


class EntityNotMobile(OutOfBounds):
    """Raised when a mobile-entity lookup fails (unknown or static entity)."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(message=f"Entity {name!r} is not a mobile entity of this room")
