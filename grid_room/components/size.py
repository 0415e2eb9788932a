"""Size component.

Room dimensions, fixed at construction. A room of size ``(width, height)``
accepts positions in ``[0, width) x [0, height)``.
"""

from dataclasses import dataclass

from .position import Position


@dataclass(frozen=True)
class Size:
    """Room dimensions in tiles.

    Attributes:
        width: Number of columns.
        height: Number of rows.
    """

    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Size must be positive, got {self.width}x{self.height}"
            )

    def contains(self, pos: Position) -> bool:
        """Return True if ``pos`` lies within the rectangle."""
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"
