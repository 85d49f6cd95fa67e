import pygame
import pytest

from scrabble.app import board_cell_at, main, rack_tile_rect
from scrabble.board import (
    BOARD_PIXEL_SIZE,
    BOARD_X_OFFSET,
    BOARD_Y_OFFSET,
    GRID_SIZE,
    RACK_HEIGHT,
    RACK_TILE_SIZE,
    RACK_WIDTH,
    RACK_X,
    RACK_Y,
    TILE_SIZE,
)


def test_first_rack_tile_position():
    rect = rack_tile_rect(0)
    assert (rect.x, rect.y) == (RACK_X + 5, RACK_Y + (RACK_HEIGHT - RACK_TILE_SIZE) // 2)
    assert rect.size == (RACK_TILE_SIZE, RACK_TILE_SIZE)


def test_rack_tiles_are_evenly_spaced():
    lefts = [rack_tile_rect(i).x for i in range(7)]
    gaps = {b - a for a, b in zip(lefts, lefts[1:])}
    assert gaps == {RACK_TILE_SIZE + 5}


@pytest.mark.parametrize("index", range(7))
def test_full_rack_fits_inside_rack_area(index):
    rect = rack_tile_rect(index)
    assert rect.left >= RACK_X
    assert rect.right <= RACK_X + RACK_WIDTH
    assert rect.top >= RACK_Y
    assert rect.bottom <= RACK_Y + RACK_HEIGHT


def test_rack_tiles_do_not_overlap():
    rects = [rack_tile_rect(i) for i in range(7)]
    for i, rect in enumerate(rects):
        assert rect.collidelist(rects[i + 1:]) == -1


def test_board_top_left_corner():
    assert board_cell_at(BOARD_X_OFFSET, BOARD_Y_OFFSET) == (0, 0)


def test_board_bottom_right_corner():
    last_x = BOARD_X_OFFSET + BOARD_PIXEL_SIZE - 1
    last_y = BOARD_Y_OFFSET + BOARD_PIXEL_SIZE - 1
    assert board_cell_at(last_x, last_y) == (GRID_SIZE - 1, GRID_SIZE - 1)


def test_board_cell_returns_row_then_column():
    x = BOARD_X_OFFSET + 3 * TILE_SIZE + 1
    y = BOARD_Y_OFFSET + 9 * TILE_SIZE + 1
    assert board_cell_at(x, y) == (9, 3)


@pytest.mark.parametrize("row, col", [(0, 0), (7, 7), (14, 2), (5, 11)])
def test_every_point_of_a_square_maps_to_it(row, col):
    left = BOARD_X_OFFSET + col * TILE_SIZE
    top = BOARD_Y_OFFSET + row * TILE_SIZE
    corners = [
        (left, top),
        (left + TILE_SIZE - 1, top),
        (left, top + TILE_SIZE - 1),
        (left + TILE_SIZE - 1, top + TILE_SIZE - 1),
    ]
    assert {board_cell_at(x, y) for x, y in corners} == {(row, col)}


@pytest.mark.parametrize(
    "x, y",
    [
        (BOARD_X_OFFSET - 1, BOARD_Y_OFFSET),
        (BOARD_X_OFFSET, BOARD_Y_OFFSET - 1),
        (BOARD_X_OFFSET + BOARD_PIXEL_SIZE, BOARD_Y_OFFSET),
        (BOARD_X_OFFSET, BOARD_Y_OFFSET + BOARD_PIXEL_SIZE),
        (RACK_X + 10, RACK_Y + 10),
    ],
)
def test_points_off_the_board(x, y):
    assert board_cell_at(x, y) is None


def test_rack_is_not_on_the_board():
    rect = rack_tile_rect(0)
    assert isinstance(rect, pygame.Rect)
    assert board_cell_at(rect.centerx, rect.centery) is None


def test_main_fails_without_asset_directory(tmp_path):
    missing = tmp_path / "missing"
    assert main(["--assets", str(missing)]) == 1