# tests/unit/test_grid.py

import pytest

from grid_room.components import Position, Size
from grid_room.entity import Entity
from grid_room.errors import OutOfBounds
from grid_room.grid import GridStore


def test_empty_grid_has_no_occupants() -> None:
    grid = GridStore.empty(Size(4, 3))
    assert grid.width == 4
    assert grid.height == 3
    assert all(grid.get(row, col) is None for row in range(3) for col in range(4))
    assert list(grid.occupied()) == []


def test_set_returns_new_store() -> None:
    grid = GridStore.empty(Size(3, 3))
    entity = Entity("Test")
    updated = grid.set(1, 2, entity)
    assert updated.get(1, 2) == entity
    assert grid.get(1, 2) is None
    assert list(updated.occupied()) == [(Position(2, 1), entity)]


def test_rows_are_independent() -> None:
    grid = GridStore.empty(Size(2, 2)).set(0, 0, Entity("Test"))
    assert grid.get(1, 0) is None


@pytest.mark.parametrize(
    "row, col",
    [(-1, 0), (0, -1), (3, 0), (0, 4), (3, 4)],
)
def test_out_of_bounds_access(row: int, col: int) -> None:
    grid = GridStore.empty(Size(4, 3))
    assert not grid.in_bounds(row, col)
    with pytest.raises(OutOfBounds):
        grid.get(row, col)
    with pytest.raises(OutOfBounds):
        grid.set(row, col, Entity("Test"))


def test_out_of_bounds_is_index_error() -> None:
    grid = GridStore.empty(Size(2, 2))
    with pytest.raises(IndexError) as exc_info:
        grid.get(2, 0)
    assert exc_info.value.position == Position(0, 2)
    assert "2x2" in str(exc_info.value)
