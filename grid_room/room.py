"""Room orchestrator.

:class:`Room` is the object callers work with. It holds the current
:class:`~grid_room.state.RoomState` and advances it through the pure
placement and movement systems, swapping in each new snapshot only after a
system returns. A raised error therefore leaves the room unchanged.

Rooms are not safe for concurrent use; callers serialize access.

Example:
    >>> from grid_room.room import Room
    >>> from grid_room.entity import Entity
    >>> from grid_room.components import Direction, Movement, Position, Size
    >>> room = Room("Kitchen", Size(5, 5))
    >>> cowboy = Entity("Bread Cowboy")
    >>> room.add_entity(cowboy, Position(2, 2))
    >>> room.move_entity(cowboy, Movement(2, Direction.UP))
    Success()
    >>> room.position_of(cowboy)
    Position(x=2, y=4)
"""

from typing import Mapping, Optional

from grid_room.components import Movement, Position, Size
from grid_room.config import RoomConfig
from grid_room.entity import Entity
from grid_room.errors import EntityNotMobile
from grid_room.results import MoveResult
from grid_room.state import RoomState
from grid_room.systems.movement import movement_system
from grid_room.systems.placement import placement_system
from grid_room.types import EntityName
from grid_room.utils.grid import occupant_at


class Room:
    """Bounded grid of entities with slide-until-blocked movement."""

    def __init__(self, name: str, size: Size) -> None:
        self._state = RoomState.create(name, size)

    @classmethod
    def from_config(cls, config: RoomConfig) -> "Room":
        return cls(config.name, config.size)

    @property
    def name(self) -> str:
        return self._state.name

    @property
    def size(self) -> Size:
        return self._state.size

    @property
    def state(self) -> RoomState:
        """Current immutable snapshot."""
        return self._state

    @property
    def mobile_positions(self) -> Mapping[EntityName, Position]:
        """Recorded position of every mobile entity, keyed by name."""
        return self._state.mobile

    def add_entity(
        self, entity: Entity, position: Position, is_static: bool = False
    ) -> None:
        """Place ``entity`` at ``position``, overwriting any occupant.

        Raises:
            OutOfBounds: If ``position`` lies outside the room.
        """
        self._state = placement_system(self._state, entity, position, is_static)

    def move_entity(self, entity: Entity, movement: Movement) -> MoveResult:
        """Slide a mobile entity along ``movement`` until done or blocked.

        Returns:
            MoveResult: ``Success``, ``Failure`` (left the grid part way) or
                ``Collision`` (blocked by another occupant).

        Raises:
            EntityNotMobile: If ``entity`` was never placed as mobile.
            OutOfBounds: If the first step already leaves the grid.
        """
        self._state, result = movement_system(self._state, entity, movement)
        return result

    def position_of(self, entity: Entity) -> Position:
        """Return the recorded position of a mobile entity.

        Raises:
            EntityNotMobile: If ``entity`` is not tracked as mobile.
        """
        pos = self._state.mobile.get(entity.name)
        if pos is None:
            raise EntityNotMobile(entity.name)
        return pos

    def entity_at(self, position: Position) -> Optional[Entity]:
        """Return the occupant of ``position`` (``None`` if empty).

        Raises:
            OutOfBounds: If ``position`` lies outside the room.
        """
        return occupant_at(self._state, position)

    def is_mobile(self, entity: Entity) -> bool:
        return entity.name in self._state.mobile

    def __repr__(self) -> str:
        return (
            f"Room(name={self.name!r}, size={self.size}, "
            f"mobile={dict(self._state.mobile)!r})"
        )
