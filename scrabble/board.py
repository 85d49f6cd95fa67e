"""The 15x15 board, its premium squares and the screen layout constants."""

from __future__ import annotations

import enum
from collections.abc import Iterator

from .tiles import EMPTY_TILE, Tile

SCREEN_WIDTH = 900
SCREEN_HEIGHT = 700

BOARD_X_OFFSET = 15
BOARD_Y_OFFSET = 15
BOARD_PIXEL_SIZE = 600
GRID_SIZE = 15
TILE_SIZE = BOARD_PIXEL_SIZE // GRID_SIZE

RACK_X = 150
RACK_Y = 625
RACK_WIDTH = 305
RACK_HEIGHT = 50
RACK_TILE_SIZE = 38

CENTER = (7, 7)


class Bonus(enum.Enum):
    NONE = enum.auto()
    DOUBLE_LETTER = enum.auto()
    TRIPLE_LETTER = enum.auto()
    DOUBLE_WORD = enum.auto()
    TRIPLE_WORD = enum.auto()


_PREMIUMS: dict[Bonus, tuple[tuple[int, int], ...]] = {
    Bonus.TRIPLE_WORD: (
        (0, 0), (0, 7), (0, 14),
        (7, 0), (7, 14),
        (14, 0), (14, 7), (14, 14),
    ),
    Bonus.DOUBLE_WORD: (
        (1, 1), (2, 2), (3, 3), (4, 4),
        (1, 13), (2, 12), (3, 11), (4, 10),
        (13, 1), (12, 2), (11, 3), (10, 4),
        (13, 13), (12, 12), (11, 11), (10, 10),
        (7, 7),
    ),
    Bonus.TRIPLE_LETTER: (
        (1, 5), (1, 9),
        (5, 1), (5, 5), (5, 9), (5, 13),
        (9, 1), (9, 5), (9, 9), (9, 13),
        (13, 5), (13, 9),
    ),
    Bonus.DOUBLE_LETTER: (
        (0, 3), (0, 11),
        (2, 6), (2, 8),
        (3, 0), (3, 7), (3, 14),
        (6, 2), (6, 6), (6, 8), (6, 12),
        (7, 3), (7, 11),
        (8, 2), (8, 6), (8, 8), (8, 12),
        (11, 0), (11, 7), (11, 14),
        (12, 6), (12, 8),
        (14, 3), (14, 11),
    ),
}

_BONUS_GRID: dict[tuple[int, int], Bonus] = {
    cell: bonus for bonus, cells in _PREMIUMS.items() for cell in cells
}


def _in_bounds(row: int, col: int) -> bool:
    return 0 <= row < GRID_SIZE and 0 <= col < GRID_SIZE


class Board:
    """The playing grid. Empty squares hold a blank tile with no value."""

    def __init__(self) -> None:
        self._cells: dict[tuple[int, int], Tile] = {}

    def place_tile(self, tile: Tile, row: int, col: int) -> None:
        """Put a tile on a square; positions off the board are ignored."""
        if _in_bounds(row, col):
            self._cells[(row, col)] = tile

    def tile_at(self, row: int, col: int) -> Tile | None:
        """The tile on a square, the empty tile if none, or None off the board."""
        if not _in_bounds(row, col):
            return None
        return self._cells.get((row, col), EMPTY_TILE)

    def remove_tile(self, row: int, col: int) -> None:
        """Clear a square; positions off the board are ignored."""
        self._cells.pop((row, col), None)

    def bonus_at(self, row: int, col: int) -> Bonus:
        """The premium of a square; squares off the board have none."""
        return _BONUS_GRID.get((row, col), Bonus.NONE)

    def is_occupied(self, row: int, col: int) -> bool:
        """True when the square holds a lettered tile."""
        tile = self.tile_at(row, col)
        return tile is not None and not tile.is_blank

    def occupied(self) -> Iterator[tuple[tuple[int, int], Tile]]:
        """Yield ((row, col), tile) for every lettered square, row by row."""
        for position in sorted(self._cells):
            tile = self._cells[position]
            if not tile.is_blank:
                yield position, tile