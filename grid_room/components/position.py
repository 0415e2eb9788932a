"""Position component.

Integer grid coordinates. ``x`` is the column and ``y`` is the row. Path
tiles computed during movement may step below zero; such positions are
simply out of bounds for every room.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """Grid coordinate.

    Attributes:
        x: Column index (0 at left).
        y: Row index (0 at the first row).
    """

    x: int
    y: int

    def offset(self, dx: int, dy: int) -> "Position":
        """Return the position displaced by ``(dx, dy)``."""
        return Position(self.x + dx, self.y + dy)
