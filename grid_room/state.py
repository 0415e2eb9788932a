"""Immutable ``RoomState`` snapshot.

A :class:`RoomState` captures everything a room knows at one moment: its
name, fixed size, the :class:`~grid_room.grid.GridStore` of cell occupants
and the mobile-position index. Systems are pure functions that take a state
and return a *new* one, so the grid and the index are always replaced
together and never observed half-updated.

Design notes:

* The mobile-position index is a persistent map (``pyrsistent.PMap``) keyed
  by entity name. Only entities placed as mobile appear in it; static
  entities occupy cells but are never tracked.
* For every ``name -> position`` entry, the grid cell at ``position`` holds
  the entity of that name. :func:`index_is_consistent` checks this.
"""

from dataclasses import dataclass

from pyrsistent import pmap
from pyrsistent.typing import PMap

from grid_room.components import Position, Size
from grid_room.grid import GridStore
from grid_room.types import EntityName


@dataclass(frozen=True)
class RoomState:
    """Immutable room snapshot.

    Attributes:
        name (str): Room label.
        size (Size): Fixed grid dimensions.
        grid (GridStore): Cell occupants.
        mobile (PMap[EntityName, Position]): Last known position of every
            mobile entity.
    """

    name: str
    size: Size
    grid: GridStore
    mobile: PMap[EntityName, Position] = pmap()

    @classmethod
    def create(cls, name: str, size: Size) -> "RoomState":
        """Return an empty room state of ``size``."""
        return cls(name=name, size=size, grid=GridStore.empty(size))

    @property
    def width(self) -> int:
        return self.size.width

    @property
    def height(self) -> int:
        return self.size.height


def index_is_consistent(state: RoomState) -> bool:
    """Return True if every indexed entity sits alone at its recorded cell.

    Each mobile entity must occupy exactly one cell, the one recorded in
    ``state.mobile``.
    """
    seen: dict[EntityName, int] = {}
    for _, occupant in state.grid.occupied():
        if occupant.name in state.mobile:
            seen[occupant.name] = seen.get(occupant.name, 0) + 1
    for name, pos in state.mobile.items():
        occupant = state.grid.get(pos.y, pos.x)
        if occupant is None or occupant.name != name or seen.get(name) != 1:
            return False
    return True
