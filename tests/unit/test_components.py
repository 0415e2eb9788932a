# tests/unit/test_components.py

import pytest

from grid_room.components import Direction, Movement, Position, Size
from grid_room.entity import Entity


@pytest.mark.parametrize(
    "direction, expected",
    [
        (Direction.UP, (0, 1)),
        (Direction.DOWN, (0, -1)),
        (Direction.LEFT, (-1, 0)),
        (Direction.RIGHT, (1, 0)),
    ],
)
def test_direction_delta(direction: Direction, expected: tuple[int, int]) -> None:
    assert direction.delta == expected


@pytest.mark.parametrize("distance", [0, -1])
def test_movement_rejects_non_positive_distance(distance: int) -> None:
    with pytest.raises(ValueError):
        Movement(distance, Direction.UP)


@pytest.mark.parametrize("width, height", [(0, 3), (3, 0), (-1, 2)])
def test_size_rejects_non_positive_dimensions(width: int, height: int) -> None:
    with pytest.raises(ValueError):
        Size(width, height)


@pytest.mark.parametrize(
    "pos, inside",
    [
        ((0, 0), True),
        ((2, 1), True),
        ((3, 1), False),
        ((2, 2), False),
        ((-1, 0), False),
        ((0, -1), False),
    ],
)
def test_size_contains(pos: tuple[int, int], inside: bool) -> None:
    assert Size(3, 2).contains(Position(*pos)) is inside


def test_position_offset() -> None:
    assert Position(2, 2).offset(-3, 1) == Position(-1, 3)


def test_entity_identity_by_name() -> None:
    assert Entity("Bread Bandit") == Entity("Bread Bandit")
    assert hash(Entity("Bread Bandit")) == hash(Entity("Bread Bandit"))
    assert Entity("Bread Bandit") != Entity("Bread Cowboy")


def test_entity_requires_name() -> None:
    with pytest.raises(ValueError):
        Entity("")


@pytest.mark.parametrize("distance", [1.5, 2.0, "2", True])
def test_movement_rejects_non_integer_distance(distance: object) -> None:
    with pytest.raises(ValueError):
        Movement(distance, Direction.UP)  # type: ignore[arg-type]
