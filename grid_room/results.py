"""Movement outcomes.

``move_entity`` always reports how far a requested movement got:

* :class:`Success`: the entity reached the target tile.
* :class:`Failure`: the path left the grid after at least one valid tile; the
  entity stopped on the last valid tile.
* :class:`Collision`: another occupant blocked the path; the entity stopped
  on the tile before it. ``entities`` holds ``(mover, occupant)``.

None of these are errors. ``MoveResult`` is the union callers match on.
"""

from dataclasses import dataclass
from typing import Tuple

from grid_room.entity import Entity


@dataclass(frozen=True)
class Success:
    pass


@dataclass(frozen=True)
class Failure:
    pass


@dataclass(frozen=True)
class Collision:
    """Movement stopped by an occupied tile.

    Attributes:
        entities: The moving entity followed by the occupant it ran into.
    """

    entities: Tuple[Entity, ...]

    @property
    def mover(self) -> Entity:
        return self.entities[0]

    @property
    def occupant(self) -> Entity:
        return self.entities[-1]


MoveResult = Success | Failure | Collision
