"""The windowed game: main menu, board, racks and drag-and-drop play."""

from __future__ import annotations

import argparse
import logging
import string
from dataclasses import dataclass, field
from pathlib import Path

import pygame

from .board import (
    BOARD_PIXEL_SIZE,
    BOARD_X_OFFSET,
    BOARD_Y_OFFSET,
    RACK_HEIGHT,
    RACK_TILE_SIZE,
    RACK_WIDTH,
    RACK_X,
    RACK_Y,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    TILE_SIZE,
    Board,
)
from .dictionary import Dictionary
from .rules import GameMode, MoveError, ScrabbleGame
from .tiles import BLANK_LETTER, Tile, TileBag

log = logging.getLogger(__name__)

WINDOW_TITLE = "My Scrabble Game"
FRAME_RATE = 60
MENU_FONT_SIZE = 48

TEXT_COLOR = (255, 255, 255)
SCREEN_COLOR = (30, 30, 30)
GAME_BACKGROUND_COLOR = (100, 100, 100)
RACK_COLOR = (50, 30, 10)

MENU_ITEMS = (("pvp", "1 vs 1", 250), ("ai", "1 vs AI", 350), ("guide", "Guide", 450))
BUTTON_NAMES = ("submit", "recall", "pass")
BUTTON_X = BOARD_X_OFFSET + BOARD_PIXEL_SIZE + 50
BUTTON_TOP = 200
BUTTON_GAP = 20

_BOARD_RECT = pygame.Rect(BOARD_X_OFFSET, BOARD_Y_OFFSET, BOARD_PIXEL_SIZE, BOARD_PIXEL_SIZE)


def rack_tile_rect(index: int) -> pygame.Rect:
    """Screen rectangle of the tile at a rack position."""
    return pygame.Rect(
        RACK_X + 5 + index * (RACK_TILE_SIZE + 5),
        RACK_Y + (RACK_HEIGHT - RACK_TILE_SIZE) // 2,
        RACK_TILE_SIZE,
        RACK_TILE_SIZE,
    )


def board_cell_at(x: int, y: int) -> tuple[int, int] | None:
    """The (row, col) of the board square under a screen point, or None."""
    if not _BOARD_RECT.collidepoint(x, y):
        return None
    return (y - BOARD_Y_OFFSET) // TILE_SIZE, (x - BOARD_X_OFFSET) // TILE_SIZE


@dataclass
class _TileImages:
    """Tile images for one colour, sized for the board and for the rack."""

    on_board: dict[str, pygame.Surface] = field(default_factory=dict)
    on_rack: dict[str, pygame.Surface] = field(default_factory=dict)

    def add(self, letter: str, image: pygame.Surface) -> None:
        self.on_board[letter] = pygame.transform.smoothscale(image, (TILE_SIZE, TILE_SIZE))
        self.on_rack[letter] = pygame.transform.smoothscale(
            image, (RACK_TILE_SIZE, RACK_TILE_SIZE)
        )


@dataclass
class _Drag:
    tile: Tile
    index: int
    offset: tuple[int, int]


class App:
    """The game window and its main loop."""

    def __init__(self, asset_dir: str | Path = "assets") -> None:
        self._assets = Path(asset_dir)
        if not self._assets.is_dir():
            raise FileNotFoundError(f"asset directory not found: {self._assets}")

        pygame.init()
        self._screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)
        self._clock = pygame.time.Clock()

        font = pygame.font.Font(str(self._assets / "fonts" / "arial.ttf"), MENU_FONT_SIZE)
        self._menu_background = pygame.transform.smoothscale(
            self._load_image("background.png"), (SCREEN_WIDTH, SCREEN_HEIGHT)
        )
        self._menu_items: dict[str, tuple[pygame.Surface, pygame.Rect]] = {}
        for name, label, top in MENU_ITEMS:
            text = font.render(label, True, TEXT_COLOR)
            rect = text.get_rect(topleft=((SCREEN_WIDTH - text.get_width()) // 2, top))
            self._menu_items[name] = (text, rect)

        self._mode = GameMode.MAIN_MENU
        self._running = True
        self._game: ScrabbleGame | None = None
        self._board_image: pygame.Surface | None = None
        self._tile_images: dict[int, _TileImages] = {}
        self._buttons: dict[str, tuple[pygame.Surface, pygame.Rect]] = {}
        self._drag: _Drag | None = None

    def _load_image(self, *parts: str) -> pygame.Surface:
        return pygame.image.load(str(self._assets.joinpath(*parts))).convert_alpha()

    def _load_dictionary(self) -> Dictionary:
        path = self._assets / "dictionary.txt"
        try:
            return Dictionary.from_file(path)
        except OSError:
            log.error("Could not open dictionary file: %s", path)
            return Dictionary()

    def _load_tile_images(self, folder: str) -> _TileImages:
        images = _TileImages()
        for letter in string.ascii_uppercase:
            images.add(letter, self._load_image(folder, f"{letter}.png"))
        images.add(BLANK_LETTER, self._load_image("tiles", "BLANK.png"))
        return images

    def _load_buttons(self) -> None:
        images = {name: self._load_image("buttons", f"{name}.png") for name in BUTTON_NAMES}
        submit_h = images["submit"].get_height()
        recall_h = images["recall"].get_height()
        pass_h = images["pass"].get_height()
        tops = {
            "submit": BUTTON_TOP,
            "recall": BUTTON_TOP + recall_h + BUTTON_GAP,
            "pass": BUTTON_TOP + pass_h + BUTTON_GAP + pass_h + BUTTON_GAP,
        }
        del submit_h
        self._buttons = {
            name: (image, image.get_rect(topleft=(BUTTON_X, tops[name])))
            for name, image in images.items()
        }

    def _start_game(self) -> bool:
        """Prepare a game and its images; False if an asset could not be loaded."""
        try:
            if self._board_image is None:
                self._board_image = pygame.transform.smoothscale(
                    self._load_image("board.png"), (BOARD_PIXEL_SIZE, BOARD_PIXEL_SIZE)
                )
            if self._game is None:
                self._game = ScrabbleGame(self._load_dictionary(), TileBag(), Board())
            self._game.deal()
            if 1 not in self._tile_images:
                self._tile_images[1] = self._load_tile_images("Tileblue")
            if 2 not in self._tile_images:
                self._tile_images[2] = self._load_tile_images("Tilered")
            if not self._buttons:
                self._load_buttons()
        except (pygame.error, FileNotFoundError) as error:
            log.error("Failed to load game assets: %s", error)
            return False
        return True

    def run(self) -> None:
        """Run the main loop until the window is closed."""
        try:
            while self._running:
                for event in pygame.event.get():
                    self._handle_event(event)
                self._render()
                pygame.display.flip()
                self._clock.tick(FRAME_RATE)
        finally:
            pygame.quit()

    def _handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self._running = False
        if self._mode is GameMode.MAIN_MENU:
            self._handle_menu_event(event)
        elif self._mode in (GameMode.PLAYING_PVP, GameMode.PLAYING_AI):
            self._handle_game_event(event)

    def _handle_menu_event(self, event: pygame.event.Event) -> None:
        if event.type != pygame.MOUSEBUTTONDOWN:
            return
        if self._menu_items["pvp"][1].collidepoint(event.pos):
            if self._start_game():
                self._mode = GameMode.PLAYING_PVP
        elif self._menu_items["ai"][1].collidepoint(event.pos):
            if self._start_game():
                self._mode = GameMode.PLAYING_AI

    def _button_at(self, pos: tuple[int, int]) -> str | None:
        for name, (_, rect) in self._buttons.items():
            if rect.collidepoint(pos):
                return name
        return None

    def _handle_game_event(self, event: pygame.event.Event) -> None:
        game = self._game
        if game is None:
            return
        if event.type == pygame.MOUSEBUTTONDOWN and self._drag is None:
            button = self._button_at(event.pos)
            if button == "submit":
                try:
                    game.submit()
                except MoveError as error:
                    log.info("%s", error)
                return
            if button == "recall":
                game.recall_tiles()
                return
            if button == "pass":
                return
            for index in range(len(game.current_rack())):
                rect = rack_tile_rect(index)
                if rect.collidepoint(event.pos):
                    tile = game.take_from_rack(index)
                    offset = (event.pos[0] - rect.x, event.pos[1] - rect.y)
                    self._drag = _Drag(tile, index, offset)
                    break
        elif event.type == pygame.MOUSEBUTTONUP and self._drag is not None:
            drag, self._drag = self._drag, None
            cell = board_cell_at(*event.pos)
            if cell is None:
                game.current_rack().insert(drag.index, drag.tile)
            else:
                game.drop_tile(drag.tile, drag.index, *cell)

    def _render(self) -> None:
        self._screen.fill(SCREEN_COLOR)
        if self._mode is GameMode.MAIN_MENU:
            self._render_menu()
        elif self._mode in (GameMode.PLAYING_PVP, GameMode.PLAYING_AI):
            self._render_game()

    def _render_menu(self) -> None:
        self._screen.blit(self._menu_background, (0, 0))
        for text, rect in self._menu_items.values():
            self._screen.blit(text, rect)

    def _render_game(self) -> None:
        self._screen.fill(GAME_BACKGROUND_COLOR)
        game = self._game
        if game is None:
            return
        if self._board_image is not None:
            self._screen.blit(self._board_image, (BOARD_X_OFFSET, BOARD_Y_OFFSET))
        board_tiles = self._tile_images[1].on_board
        for (row, col), tile in game.board.occupied():
            image = board_tiles.get(tile.letter)
            if image is not None:
                self._screen.blit(
                    image, (BOARD_X_OFFSET + col * TILE_SIZE, BOARD_Y_OFFSET + row * TILE_SIZE)
                )

        pygame.draw.rect(
            self._screen, RACK_COLOR, pygame.Rect(RACK_X, RACK_Y, RACK_WIDTH, RACK_HEIGHT)
        )
        rack_tiles = self._tile_images[game.current_player].on_rack
        for index, tile in enumerate(game.current_rack()):
            image = rack_tiles.get(tile.letter)
            if image is not None:
                self._screen.blit(image, rack_tile_rect(index))

        for image, rect in self._buttons.values():
            self._screen.blit(image, rect)

        if self._drag is not None:
            image = rack_tiles.get(self._drag.tile.letter)
            if image is not None:
                mouse_x, mouse_y = pygame.mouse.get_pos()
                self._screen.blit(
                    image, (mouse_x - self._drag.offset[0], mouse_y - self._drag.offset[1])
                )


def main(argv: list[str] | None = None) -> int:
    """Open the game window and play until it is closed."""
    parser = argparse.ArgumentParser(prog="scrabble", description="Play Scrabble.")
    parser.add_argument(
        "--assets", default="assets", help="directory holding images, fonts and the word list"
    )
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    try:
        app = App(args.assets)
    except (pygame.error, FileNotFoundError) as error:
        log.error("Could not start the game: %s", error)
        return 1
    app.run()
    return 0