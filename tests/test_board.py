import pytest

from scrabble.board import (
    BOARD_PIXEL_SIZE,
    CENTER,
    GRID_SIZE,
    TILE_SIZE,
    Board,
    Bonus,
)
from scrabble.tiles import EMPTY_TILE, Tile


@pytest.fixture
def board():
    return Board()


def test_grid_size_bounds_the_board(board):
    assert TILE_SIZE * GRID_SIZE == BOARD_PIXEL_SIZE
    last = GRID_SIZE - 1
    board.place_tile(Tile("Z", 10), last, last)
    assert board.tile_at(last, last) == Tile("Z", 10)
    assert board.tile_at(GRID_SIZE, last) is None
    assert board.tile_at(last, GRID_SIZE) is None


def test_new_board_is_empty(board):
    assert list(board.occupied()) == []
    for row in range(GRID_SIZE):
        for col in range(GRID_SIZE):
            assert board.tile_at(row, col) == EMPTY_TILE
            assert not board.is_occupied(row, col)


def test_center_and_corner_bonuses(board):
    assert board.bonus_at(*CENTER) is Bonus.DOUBLE_WORD
    assert board.bonus_at(0, 0) is Bonus.TRIPLE_WORD
    assert board.bonus_at(1, 5) is Bonus.TRIPLE_LETTER
    assert board.bonus_at(0, 3) is Bonus.DOUBLE_LETTER
    assert board.bonus_at(0, 1) is Bonus.NONE


def test_bonus_grid_is_symmetric(board):
    last = GRID_SIZE - 1
    for row in range(GRID_SIZE):
        for col in range(GRID_SIZE):
            bonus = board.bonus_at(row, col)
            assert board.bonus_at(col, row) is bonus
            assert board.bonus_at(last - row, col) is bonus
            assert board.bonus_at(row, last - col) is bonus


@pytest.mark.parametrize("row,col", [(-1, 0), (0, -1), (15, 0), (0, 15)])
def test_off_board_positions(board, row, col):
    assert board.bonus_at(row, col) is Bonus.NONE
    assert board.tile_at(row, col) is None
    assert not board.is_occupied(row, col)
    board.place_tile(Tile("A", 1), row, col)
    assert list(board.occupied()) == []


def test_place_and_remove_round_trip(board):
    tile = Tile("Q", 10)
    board.place_tile(tile, 4, 9)
    assert board.tile_at(4, 9) == tile
    assert board.is_occupied(4, 9)
    board.remove_tile(4, 9)
    assert board.tile_at(4, 9) == EMPTY_TILE
    assert not board.is_occupied(4, 9)


def test_place_overwrites(board):
    board.place_tile(Tile("A", 1), 7, 7)
    board.place_tile(Tile("B", 3), 7, 7)
    assert board.tile_at(7, 7) == Tile("B", 3)


def test_blank_tile_does_not_count_as_occupied(board):
    board.place_tile(Tile(" ", 0), 3, 3)
    assert not board.is_occupied(3, 3)
    assert list(board.occupied()) == []


def test_occupied_is_in_row_major_order(board):
    board.place_tile(Tile("C", 3), 8, 1)
    board.place_tile(Tile("A", 1), 2, 9)
    board.place_tile(Tile("B", 3), 2, 4)
    assert list(board.occupied()) == [
        ((2, 4), Tile("B", 3)),
        ((2, 9), Tile("A", 1)),
        ((8, 1), Tile("C", 3)),
    ]


def test_remove_on_empty_square_is_harmless(board):
    board.place_tile(Tile("A", 1), 0, 0)
    board.remove_tile(5, 5)
    board.remove_tile(-3, 20)
    assert list(board.occupied()) == [((0, 0), Tile("A", 1))]