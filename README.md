# scrabble

A two-player Scrabble game played on a 15×15 board. A pygame window shows the
board, the current player's rack and the Submit, Recall and Pass buttons.

## Installing

```
pip install .
```

## Playing

```
scrabble
scrabble --assets path/to/assets
```

The game loads its images, its font and its word list from an asset
directory, `assets` in the working directory unless `--assets` names another.
That directory holds:

- `board.png`: the board image
- `background.png`: the menu background
- `fonts/arial.ttf`: the menu font
- `Tileblue/A.png` … `Tileblue/Z.png`: player 1's tiles
- `Tilered/A.png` … `Tilered/Z.png`: player 2's tiles
- `tiles/BLANK.png`: the blank tile
- `buttons/submit.png`, `buttons/recall.png`, `buttons/pass.png`
- `dictionary.txt`: the word list, one word per line

If the directory does not exist the command exits with status 1. If
`dictionary.txt` cannot be opened, an error is logged and the game starts
with an empty word list, so every word is rejected.

Choose **1 vs 1** from the menu to start. Drag tiles from your rack onto an
empty square of the board, then press **Submit** to score the move or
**Recall** to take your tiles back. A tile dropped off the board goes back to
its place in the rack.

The rules checked on Submit:

- all tiles placed this turn lie in one row or one column;
- the first move covers the centre square (row 7, column 7);
- every later move touches a tile already on the board;
- each word of two or more letters that the move forms is in the word list.

Premium squares count only under newly placed tiles, and placing all seven
tiles earns 50 extra points. After a valid move the rack is refilled from the
bag and the other player takes the turn. An invalid move puts its tiles back
in the rack. Scores, the words found and the reasons a move was rejected are
written to the log (shown on the console), not drawn in the window.

## What the game does not do

- **1 vs AI** starts the same two-player game as **1 vs 1**; there is no
  computer opponent.
- **Guide** and **Pass** do nothing.
- Blank tiles cannot be given a letter, and a placed blank does not count as
  part of a word.
- The game has no end: it goes on until the window is closed, and nothing is
  saved.

## Using the rules without the window

`scrabble.tiles`, `scrabble.board`, `scrabble.dictionary` and
`scrabble.rules` do not need pygame:

```python
import random

from scrabble.board import Board
from scrabble.dictionary import Dictionary
from scrabble.rules import MoveError, ScrabbleGame
from scrabble.tiles import TileBag

dictionary = Dictionary(["CAT", "CATS"])
game = ScrabbleGame(dictionary, TileBag(random.Random(1)), Board())
game.deal()

tile = game.take_from_rack(0)
game.drop_tile(tile, 0, 7, 7)
try:
    score = game.submit()
except MoveError as error:
    print(error)
```

- `TileBag` holds the standard 100-tile English set; `draw_tile()` takes the
  top tile and `len(bag)` tells how many remain.
- `Board` gives `tile_at`, `place_tile`, `remove_tile`, `bonus_at`
  (a `Bonus` value), `is_occupied` and `occupied()`.
- `Dictionary(words)` or `Dictionary.from_file(path)` stores words in upper
  case; `is_valid(word)` and `word in dictionary` match the word exactly as
  given.
- `ScrabbleGame` keeps `racks`, `scores`, `current_player` and the tiles
  `placed` this turn. `validate_move()` returns the sorted words formed,
  `calculate_score(placed_tiles, words)` scores them, and `submit()` scores
  the move, refills the rack and passes the turn, or recalls the tiles and
  raises `MoveError`.

## Running the tests

```
pip install .[test]
pytest
```