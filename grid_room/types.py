"""Common type aliases.

The room keys its mobile-position index by entity name, so ``EntityName`` is
the identity used across systems. Grid cells hold ``Cell`` values: either an
entity reference or ``None`` for an empty tile.
"""

from typing import Optional, TYPE_CHECKING


if TYPE_CHECKING:
    from grid_room.entity import Entity

EntityName = str

Cell = Optional["Entity"]
