import numpy as np
import pytest

from square_game.game import (
    FIELD_HEIGHT,
    FIELD_WIDTH,
    Block,
    CellOccupiedError,
    Color,
    Field,
    InvalidPositionError,
    Position,
)

from tests.helpers import fill


def test_default_dimensions():
    field = Field()
    assert (field.width, field.height) == (FIELD_WIDTH, FIELD_HEIGHT) == (8, 20)
    assert field.count_blocks() == 0


def test_place_and_get_block():
    field = Field()
    field.place_block(Position(2, 5), Block(Color.YELLOW))
    assert field.get_block(Position(2, 5)) == Block(Color.YELLOW)
    assert not field.is_empty(Position(2, 5))
    assert field.is_empty(Position(3, 5))


def test_place_on_occupied_cell_fails():
    field = Field()
    field.place_block(Position(0, 0), Block(Color.RED))
    with pytest.raises(CellOccupiedError):
        field.place_block(Position(0, 0), Block(Color.BLUE))
    assert field.get_block(Position(0, 0)) == Block(Color.RED)


def test_place_out_of_bounds_fails():
    field = Field()
    with pytest.raises(InvalidPositionError):
        field.place_block(Position(8, 0), Block(Color.RED))
    with pytest.raises(InvalidPositionError):
        field.remove_block(Position(0, 20))


def test_remove_is_idempotent():
    field = Field()
    field.place_block(Position(1, 1), Block(Color.RED))
    field.remove_block(Position(1, 1))
    field.remove_block(Position(1, 1))
    assert field.is_empty(Position(1, 1))


def test_get_block_out_of_bounds_is_empty():
    field = Field()
    assert field.get_block(Position(100, 100)) is None
    assert field.is_empty(Position(8, 19))


def test_top_row_detection():
    field = Field()
    assert not field.has_block_in_top_row()
    field.place_block(Position(0, 1), Block(Color.RED))
    assert not field.has_block_in_top_row()
    field.place_block(Position(7, 0), Block(Color.RED))
    assert field.has_block_in_top_row()


def test_clear_empties_everything():
    field = Field()
    fill(field, [(0, 0), (3, 10), (7, 19)], Color.BLUE)
    field.clear()
    assert field.count_blocks() == 0


def test_clone_is_independent():
    field = Field()
    fill(field, [(1, 19)], Color.RED)
    copy = field.clone()
    copy.place_block(Position(2, 19), Block(Color.BLUE))
    field.remove_block(Position(1, 19))
    assert copy.get_block(Position(1, 19)) == Block(Color.RED)
    assert field.is_empty(Position(2, 19))


def test_grid_accessor_returns_a_copy():
    field = Field()
    fill(field, [(0, 19)], Color.RED)
    grid = field.grid
    assert grid[19][0] == Block(Color.RED)
    assert grid[0][0] is None
    grid[19][0] = None
    grid[0][0] = Block(Color.BLUE)
    assert field.get_block(Position(0, 19)) == Block(Color.RED)
    assert field.is_empty(Position(0, 0))


def test_clone_state_encodes_colors():
    field = Field()
    fill(field, [(0, 19)], Color.YELLOW)
    state = field.clone_state()
    assert state.shape == (20, 8)
    assert state.dtype == np.int8
    assert state[19, 0] == int(Color.YELLOW)
    state[19, 0] = 0
    assert not field.is_empty(Position(0, 19))
