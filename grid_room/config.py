"""Room configuration and logging setup.

:class:`RoomConfig` is the plain-data description of a room used by
:meth:`grid_room.room.Room.from_config`. :func:`configure_logging` sets up the
root logger for scripts embedding the room; the library itself only logs at
DEBUG through module loggers.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any, Mapping

from grid_room.components import Size

LOG_LEVEL_ENV = "GRID_ROOM_LOG_LEVEL"


@dataclass(frozen=True)
class RoomConfig:
    name: str
    width: int
    height: int

    def __post_init__(self) -> None:
        Size(self.width, self.height)

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> RoomConfig:
        """Build a config from a mapping such as a parsed JSON object.

        Raises:
            ValueError: If a key is missing or a dimension is not an integer.
        """
        missing = [key for key in ("name", "width", "height") if key not in data]
        if missing:
            raise ValueError(f"Room config missing keys: {', '.join(missing)}")
        try:
            width = int(data["width"])
            height = int(data["height"])
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Room dimensions must be integers: {exc}") from exc
        return cls(name=str(data["name"]), width=width, height=height)


def configure_logging(default_level: int = logging.WARNING) -> int:
    """Configure the root logger and return the level applied.

    ``GRID_ROOM_LOG_LEVEL`` overrides ``default_level`` when set. It must name
    a standard level (``DEBUG``, ``info``, ...).

    Raises:
        ValueError: If ``GRID_ROOM_LOG_LEVEL`` is not a known level name.
    """
    level = default_level
    level_name = os.getenv(LOG_LEVEL_ENV, "").strip()
    if level_name:
        levels = logging.getLevelNamesMapping()
        if level_name.upper() not in levels:
            raise ValueError(
                f"{LOG_LEVEL_ENV}={level_name!r} is not a logging level; "
                f"expected one of {sorted(levels)}"
            )
        level = levels[level_name.upper()]
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    return level
