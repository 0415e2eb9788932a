"""Entity identity.

An :class:`Entity` is the thing a room places and moves. Rooms never own
entities: grid cells and move results hold references to the same object,
while the mobile-position index refers to it by ``name``.

Examples
--------
>>> from grid_room.entity import Entity
>>> hero = Entity("Bread Cowboy")
>>> hero == Entity("Bread Cowboy")
True
"""

from dataclasses import dataclass

from grid_room.types import EntityName


@dataclass(frozen=True)
class Entity:
    """Named occupant of a room.

    Attributes:
        name: Unique identifier. Equality and hashing use the name only.
    """

    name: EntityName

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Entity name must be a non-empty string")
