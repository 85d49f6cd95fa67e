"""A two-player Scrabble game: tiles and bag, board, word list, turn rules and a pygame window."""

__version__ = "0.1.0"