"""Bounds-checked grid storage.

:class:`GridStore` is a dense ``height x width`` array of cells indexed by
``(row, col)``. Rows are persistent vectors, so writing a cell returns a new
store that shares every untouched row with the previous one. Reads and writes
outside the grid raise :class:`~grid_room.errors.OutOfBounds`.
"""

from dataclasses import dataclass
from typing import Iterator, Tuple

from pyrsistent import pvector
from pyrsistent.typing import PVector

from grid_room.components import Position, Size
from grid_room.entity import Entity
from grid_room.errors import OutOfBounds
from grid_room.types import Cell


@dataclass(frozen=True)
class GridStore:
    """Immutable 2D cell array.

    Attributes:
        size: Fixed grid dimensions.
        rows: ``rows[row][col]`` holds the occupant or ``None``.
    """

    size: Size
    rows: PVector[PVector[Cell]]

    @classmethod
    def empty(cls, size: Size) -> "GridStore":
        """Return a store of ``size`` with every cell empty."""
        row: PVector[Cell] = pvector([None] * size.width)
        return cls(size=size, rows=pvector([row] * size.height))

    @property
    def width(self) -> int:
        return self.size.width

    @property
    def height(self) -> int:
        return self.size.height

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    def get(self, row: int, col: int) -> Cell:
        """Return the occupant at ``(row, col)`` (``None`` if empty).

        Raises:
            OutOfBounds: If the coordinate lies outside the grid.
        """
        self._check_bounds(row, col)
        return self.rows[row][col]

    def set(self, row: int, col: int, occupant: Cell) -> "GridStore":
        """Return a new store with ``(row, col)`` replaced by ``occupant``.

        Raises:
            OutOfBounds: If the coordinate lies outside the grid.
        """
        self._check_bounds(row, col)
        new_row = self.rows[row].set(col, occupant)
        return GridStore(size=self.size, rows=self.rows.set(row, new_row))

    def occupied(self) -> Iterator[Tuple[Position, Entity]]:
        """Yield ``(position, occupant)`` for every non-empty cell, row-major."""
        for y, row in enumerate(self.rows):
            for x, cell in enumerate(row):
                if cell is not None:
                    yield Position(x, y), cell

    def _check_bounds(self, row: int, col: int) -> None:
        if not self.in_bounds(row, col):
            raise OutOfBounds(Position(col, row), self.size)
