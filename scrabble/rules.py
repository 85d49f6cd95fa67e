"""Turn rules: racks, placing tiles, move validation and scoring."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

from .board import CENTER, GRID_SIZE, Board, Bonus
from .dictionary import Dictionary
from .tiles import Tile, TileBag

log = logging.getLogger(__name__)

RACK_SIZE = 7
BINGO_BONUS = 50

_LETTER_MULTIPLIERS = {Bonus.DOUBLE_LETTER: 2, Bonus.TRIPLE_LETTER: 3}
_WORD_MULTIPLIERS = {Bonus.DOUBLE_WORD: 2, Bonus.TRIPLE_WORD: 3}


class MoveError(Exception):
    """Raised when a move breaks the rules or cannot be made."""


class GameMode(enum.Enum):
    """The screens and modes the game can be in."""

    MAIN_MENU = enum.auto()
    PLAYING_PVP = enum.auto()
    PLAYING_AI = enum.auto()
    GUIDE = enum.auto()
    EXIT = enum.auto()


@dataclass(frozen=True)
class PlacedTile:
    """A tile put on the board during the current turn."""

    tile: Tile
    row: int
    col: int

    @property
    def position(self) -> tuple[int, int]:
        return (self.row, self.col)


class ScrabbleGame:
    """Two players taking turns on one board with a shared bag."""

    def __init__(
        self,
        dictionary: Dictionary,
        bag: TileBag | None = None,
        board: Board | None = None,
    ) -> None:
        self.dictionary = dictionary
        self.bag = bag if bag is not None else TileBag()
        self.board = board if board is not None else Board()
        self.current_player = 1
        self.racks: dict[int, list[Tile]] = {1: [], 2: []}
        self.scores: dict[int, int] = {1: 0, 2: 0}
        self.is_first_move = True
        self.placed: list[PlacedTile] = []

    def deal(self) -> None:
        """Empty both racks, shuffle the bag and deal up to seven tiles each."""
        for rack in self.racks.values():
            rack.clear()
        self.bag.shuffle()
        for _ in range(RACK_SIZE):
            for player in (1, 2):
                if not self.bag.is_empty():
                    self.racks[player].append(self.bag.draw_tile())

    def current_rack(self) -> list[Tile]:
        """The rack of the player whose turn it is."""
        return self.racks[self.current_player]

    def take_from_rack(self, index: int) -> Tile:
        """Lift a tile off the current rack, as when starting to drag it."""
        rack = self.current_rack()
        if not 0 <= index < len(rack):
            raise IndexError(f"no tile at rack position {index}")
        return rack.pop(index)

    def drop_tile(self, tile: Tile, index: int, row: int, col: int) -> bool:
        """Place a lifted tile on an empty square, or put it back in the rack.

        Returns True when the tile went onto the board.
        """
        square = self.board.tile_at(row, col)
        if square is not None and square.is_blank:
            self.board.place_tile(tile, row, col)
            self.placed.append(PlacedTile(tile, row, col))
            self.placed.sort(key=lambda placed: placed.position)
            return True
        self.current_rack().insert(index, tile)
        return False

    def recall_tiles(self) -> None:
        """Take back every tile placed this turn into the current rack."""
        rack = self.current_rack()
        for placed in self.placed:
            self.board.remove_tile(placed.row, placed.col)
            rack.append(placed.tile)
        self.placed.clear()
        log.info("Tiles recalled!")

    def _scan(
        self, row: int, col: int, d_row: int, d_col: int, new_cells: set[tuple[int, int]]
    ) -> tuple[str, bool]:
        """Read the run of letters through a square; report if it touches old tiles."""
        while (
            row - d_row >= 0
            and col - d_col >= 0
            and self.board.is_occupied(row - d_row, col - d_col)
        ):
            row -= d_row
            col -= d_col
        letters: list[str] = []
        touches_old = False
        while self.board.is_occupied(row, col):
            letters.append(self.board.tile_at(row, col).letter)
            if (row, col) not in new_cells:
                touches_old = True
            row += d_row
            col += d_col
        return "".join(letters), touches_old

    def validate_move(self) -> list[str]:
        """Check the tiles placed this turn and return the words they form, sorted."""
        tiles = self.placed
        if not tiles:
            raise MoveError("No tiles have been placed.")

        horizontal = len({placed.row for placed in tiles}) == 1
        vertical = len({placed.col for placed in tiles}) == 1
        if not horizontal and not vertical:
            raise MoveError("Tiles must be in a single row or column.")

        if self.is_first_move and not any(p.position == CENTER for p in tiles):
            raise MoveError("First move must cover the center star (7, 7).")

        new_cells = {placed.position for placed in tiles}
        single = len(tiles) == 1
        words: set[str] = set()
        connected = False
        for placed in tiles:
            directions = []
            if horizontal or single:
                directions.append((0, 1))
            if vertical or single:
                directions.append((1, 0))
            for d_row, d_col in directions:
                word, touches_old = self._scan(
                    placed.row, placed.col, d_row, d_col, new_cells
                )
                connected = connected or touches_old
                if len(word) > 1:
                    words.add(word)

        if not self.is_first_move and not connected:
            raise MoveError("New words must connect to existing tiles.")

        found = sorted(words)
        if not found and not (self.is_first_move or connected):
            raise MoveError("Must form a word of at least 2 letters.")

        for word in found:
            log.info("Found word: %s", word)
            if not self.dictionary.is_valid(word):
                raise MoveError(f"'{word}' is not a valid word.")
        return found

    def _read(self, row: int, col: int, d_row: int, d_col: int, length: int) -> str:
        return "".join(
            self.board.tile_at(row + i * d_row, col + i * d_col).letter
            for i in range(length)
        )

    def _locate(self, word: str) -> tuple[int, int, int, int]:
        """First square, scanning row by row, where the word reads across or down."""
        length = len(word)
        for row in range(GRID_SIZE):
            for col in range(GRID_SIZE):
                if col + length <= GRID_SIZE and self._read(row, col, 0, 1, length) == word:
                    return row, col, 0, 1
                if row + length <= GRID_SIZE and self._read(row, col, 1, 0, length) == word:
                    return row, col, 1, 0
        raise ValueError(f"'{word}' does not appear on the board")

    def calculate_score(self, placed_tiles: list[PlacedTile], words: list[str]) -> int:
        """Score the words, applying premiums only under newly placed tiles."""
        new_cells = {placed.position for placed in placed_tiles}
        total = 0
        for word in words:
            row, col, d_row, d_col = self._locate(word)
            word_score = 0
            word_multiplier = 1
            for i in range(len(word)):
                r, c = row + i * d_row, col + i * d_col
                letter_score = self.board.tile_at(r, c).value
                if (r, c) in new_cells:
                    bonus = self.board.bonus_at(r, c)
                    letter_score *= _LETTER_MULTIPLIERS.get(bonus, 1)
                    word_multiplier *= _WORD_MULTIPLIERS.get(bonus, 1)
                word_score += letter_score
            total += word_score * word_multiplier
        if len(placed_tiles) == RACK_SIZE:
            total += BINGO_BONUS
        return total

    def submit(self) -> int:
        """End the turn: score a valid move, refill the rack and pass play on.

        An invalid move has its tiles recalled and raises MoveError.
        """
        if not self.placed:
            raise MoveError("You haven't placed any tiles!")
        try:
            words = self.validate_move()
        except MoveError:
            log.info("Invalid move! Recalling tiles.")
            self.recall_tiles()
            raise

        score = self.calculate_score(self.placed, words)
        player = self.current_player
        self.scores[player] += score
        log.info(
            "Player %d scored: %d points. Total score: %d",
            player, score, self.scores[player],
        )

        rack = self.current_rack()
        for _ in range(len(self.placed)):
            if not self.bag.is_empty():
                rack.append(self.bag.draw_tile())

        self.placed.clear()
        self.is_first_move = False
        self.current_player = 2 if player == 1 else 1
        log.info("Next turn: Player %d", self.current_player)
        return score