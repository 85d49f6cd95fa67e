"""Letter tiles and the bag they are drawn from."""

from __future__ import annotations

import random
from collections.abc import Iterator
from dataclasses import dataclass

BLANK_LETTER = " "

# (count, letter, points) for the standard English set, blanks included.
DISTRIBUTION: tuple[tuple[int, str, int], ...] = (
    (9, "A", 1), (2, "B", 3), (2, "C", 3), (4, "D", 2), (12, "E", 1),
    (2, "F", 4), (3, "G", 2), (2, "H", 4), (9, "I", 1), (1, "J", 8),
    (1, "K", 5), (4, "L", 1), (2, "M", 3), (6, "N", 1), (8, "O", 1),
    (2, "P", 3), (1, "Q", 10), (6, "R", 1), (4, "S", 1), (6, "T", 1),
    (4, "U", 1), (2, "V", 4), (2, "W", 4), (1, "X", 8), (2, "Y", 4),
    (1, "Z", 10), (2, BLANK_LETTER, 0),
)


@dataclass(frozen=True)
class Tile:
    """A single tile: its letter (a space for a blank) and its point value."""

    letter: str
    value: int

    @property
    def is_blank(self) -> bool:
        return self.letter == BLANK_LETTER


EMPTY_TILE = Tile(BLANK_LETTER, 0)


def _full_set() -> Iterator[Tile]:
    for count, letter, value in DISTRIBUTION:
        for _ in range(count):
            yield Tile(letter, value)


class TileBag:
    """The bag of tiles players draw from, filled with the full tile set."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._tiles: list[Tile] = list(_full_set())

    def shuffle(self) -> None:
        """Shuffle the remaining tiles in place."""
        self._rng.shuffle(self._tiles)

    def draw_tile(self) -> Tile:
        """Take the top tile; an empty blank tile comes back once the bag is empty."""
        if not self._tiles:
            return EMPTY_TILE
        return self._tiles.pop()

    def is_empty(self) -> bool:
        return not self._tiles

    def __len__(self) -> int:
        return len(self._tiles)

    def __iter__(self) -> Iterator[Tile]:
        return iter(list(self._tiles))