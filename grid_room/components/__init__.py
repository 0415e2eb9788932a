"""grid_room.components
=======================

Aggregate import surface for the value objects consumed by the room:
coordinates, dimensions and movement requests.

All components are frozen ``@dataclass`` value objects (or enums); they carry
no behavior beyond small derived helpers. The room and its systems combine
them during placement and movement resolution::

    from grid_room.components import Direction, Movement, Position, Size
"""

from .movement import Direction, Movement
from .position import Position
from .size import Size

__all__ = [
    "Direction",
    "Movement",
    "Position",
    "Size",
]
