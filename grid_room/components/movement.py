"""Movement request component.

A :class:`Movement` is a single-axis displacement: a :class:`Direction` and
a positive tile ``distance``. ``UP`` increases the row index and ``DOWN``
decreases it; ``RIGHT`` increases the column index and ``LEFT`` decreases it.
"""

from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Dict, Tuple


class Direction(StrEnum):
    """Axis-aligned movement directions."""

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()

    @property
    def delta(self) -> Tuple[int, int]:
        """Unit ``(dx, dy)`` step for this direction."""
        return _DIRECTION_DELTAS[self]


_DIRECTION_DELTAS: Dict[Direction, Tuple[int, int]] = {
    Direction.UP: (0, 1),
    Direction.DOWN: (0, -1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


@dataclass(frozen=True)
class Movement:
    """Requested displacement.

    Attributes:
        distance: Number of tiles to travel (positive).
        direction: Axis and sense of travel.
    """

    distance: int
    direction: Direction

    def __post_init__(self) -> None:
        if not isinstance(self.distance, int) or isinstance(self.distance, bool):
            raise ValueError(f"Movement distance must be an integer: {self.distance!r}")
        if self.distance <= 0:
            raise ValueError(f"Movement distance must be positive: {self.distance}")
