import pytest

from grid_room.components import Position, Size
from grid_room.entity import Entity
from grid_room.errors import OutOfBounds
from grid_room.state import RoomState, index_is_consistent
from grid_room.utils.grid import check_bounds, is_in_bounds, occupant_at


def test_bounds_helpers() -> None:
    state = RoomState.create("Test", Size(3, 2))
    assert is_in_bounds(state, Position(2, 1))
    assert not is_in_bounds(state, Position(1, 2))
    check_bounds(state, Position(0, 0))
    with pytest.raises(OutOfBounds):
        check_bounds(state, Position(3, 0))


def test_occupant_at_uses_column_and_row() -> None:
    state = RoomState.create("Test", Size(3, 2))
    entity = Entity("Test")
    state = RoomState(
        name=state.name, size=state.size, grid=state.grid.set(1, 2, entity)
    )
    assert occupant_at(state, Position(2, 1)) == entity
    assert occupant_at(state, Position(1, 1)) is None


def test_index_consistency_detects_stale_entry() -> None:
    state = RoomState.create("Test", Size(3, 3))
    entity = Entity("Test")
    grid = state.grid.set(0, 0, entity)
    consistent = RoomState("Test", state.size, grid, state.mobile.set("Test", Position(0, 0)))
    stale = RoomState("Test", state.size, grid, state.mobile.set("Test", Position(1, 1)))
    assert index_is_consistent(consistent)
    assert not index_is_consistent(stale)
