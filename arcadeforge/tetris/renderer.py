"""Drawing of the falling-block game: field, preview, bitmap text and menu."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

import pygame

from arcadeforge.imageloader import load_image
from arcadeforge.tetris.board import BlockColor, BlockType, Board, Direction
from arcadeforge.tetris.menu import X_MENU_POS, X_SHIFT, Y_MENU_POS, Y_SHIFT, Menu
from arcadeforge.tetris.pieces import NextBlock

DIR_IMAGE = "image/"
NUMBER_OF_SKINS = 2
BLOCK_SIZE = 32

X_MAIN_FIELD = 12
Y_MAIN_FIELD = 90

X_FIELD_NEXT_BLOCK = 357
Y_FIELD_NEXT_BLOCK = 23
X_FIELD_NEXT_BLOCK_SIZE = 5
Y_FIELD_NEXT_BLOCK_SIZE = 5
X_SQARE_OFFSET = 405
Y_SQARE_OFFSET = 71

GAME_OVER_POSITION = (23, 101)

BACKGROUND_FILE = "tetris_background.png"
SKIN_FILES = ("tetris_block_new.png", "tetris_block.png")
GAME_OVER_FILE = "tetris_game_over.png"
SYMBOLS_FILE = "symbols.png"
MENU_BACKGROUND_FILE = "menu_background.png"
MENU_TEXT_FILE = "menu_text.png"

Point = tuple[int, int]


@dataclass(frozen=True)
class Glyph:
    """Where a character sits in the symbol sheet and how wide it is drawn.

    A blank glyph only restores the background under it.
    """

    x: int
    y: int
    width: int
    height: int
    blank: bool = False

    @property
    def rect(self) -> pygame.Rect:
        return pygame.Rect(self.x, self.y, self.width, self.height)


_SPECIAL_GLYPHS = {
    ":": Glyph(0, 48, 5, 18),
    "!": Glyph(5, 48, 5, 18),
    ".": Glyph(10, 48, 5, 18),
    ",": Glyph(15, 48, 5, 18),
    "?": Glyph(20, 48, 8, 18),
    " ": Glyph(0, 0, 5, 5, blank=True),
}


def glyph_for(ch: str) -> Glyph | None:
    """Return the glyph for a character, or None if the font lacks it."""
    if len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")
    if "0" <= ch <= "9":
        return Glyph(10 * (ord(ch) - ord("0")), 0, 10, 13)
    if "a" <= ch <= "z":
        if ch in "il":
            return Glyph((ord(ch) - ord("a")) * 9, 13, 4, 18)
        if ch == "m":
            return Glyph((ord("l") - ord("a")) * 9 + 4, 13, 12, 18)
        return Glyph((ord(ch) - ord("a")) * 9, 13, 9, 18)
    if "A" <= ch <= "Z":
        return Glyph(11 * (ord(ch) - ord("A")), 31, 11, 17)
    return _SPECIAL_GLYPHS.get(ch)


_BLOCK_SOURCES = {
    BlockColor.BACKGROUND: ("background", (X_MAIN_FIELD, Y_MAIN_FIELD)),
    BlockColor.RED: ("block", (32, 0)),
    BlockColor.BLUE: ("block", (32, 32)),
    BlockColor.GREEN: ("block", (0, 0)),
    BlockColor.PURPLE: ("block", (0, 32)),
}


def block_source_rect(color: BlockColor) -> tuple[str, pygame.Rect] | None:
    """Return which image ("background" or "block") and which square a colour comes from."""
    entry = _BLOCK_SOURCES.get(color)
    if entry is None:
        return None
    source, (x, y) = entry
    return source, pygame.Rect(x, y, BLOCK_SIZE, BLOCK_SIZE)


_JT_KNOBS = {
    Direction.UP: {BlockType.JL: (32, 48), BlockType.JR: (96, 48), BlockType.T: (64, 48)},
    Direction.DOWN: {BlockType.JL: (96, 80), BlockType.JR: (32, 80), BlockType.T: (64, 80)},
    Direction.RIGHT: {BlockType.JL: (80, 32), BlockType.JR: (80, 96), BlockType.T: (80, 64)},
    Direction.LEFT: {BlockType.JL: (48, 96), BlockType.JR: (48, 32), BlockType.T: (48, 64)},
}


def _jt_cells(direction: Direction, block_type: BlockType) -> list[Point]:
    if direction is Direction.UP:
        bar = [(i * 32, 80) for i in range(1, 4)]
    elif direction is Direction.DOWN:
        bar = [(i * 32, 48) for i in range(1, 4)]
    elif direction is Direction.RIGHT:
        bar = [(48, j * 32) for j in range(1, 4)]
    elif direction is Direction.LEFT:
        bar = [(80, j * 32) for j in range(1, 4)]
    else:
        return []
    return bar + [_JT_KNOBS[direction][block_type]]


def _n_cells(direction: Direction, block_type: BlockType) -> list[Point]:
    left = block_type is BlockType.NL
    if direction in (Direction.UP, Direction.DOWN):
        cells = [(64, 48), (64, 80)]
        cells += [(96, 48), (32, 80)] if left else [(32, 48), (96, 80)]
    elif direction in (Direction.RIGHT, Direction.LEFT):
        cells = [(48, 64), (80, 64)]
        cells += [(48, 32), (80, 96)] if left else [(48, 96), (80, 32)]
    else:
        return []
    return cells


def next_block_cells(next_block: NextBlock) -> list[Point]:
    """Return the screen positions of the squares that preview the next piece."""
    block_type, direction = next_block.type, next_block.direction
    if block_type is BlockType.SQUARE:
        return [
            (X_SQARE_OFFSET + i * 32, Y_SQARE_OFFSET + j * 32)
            for i in range(2)
            for j in range(2)
        ]
    if block_type is BlockType.LINE:
        if direction in (Direction.UP, Direction.DOWN):
            local = [(i * 32 + 16, 64) for i in range(X_FIELD_NEXT_BLOCK_SIZE - 1)]
        elif direction in (Direction.RIGHT, Direction.LEFT):
            local = [(64, j * 32 - 16) for j in range(1, Y_FIELD_NEXT_BLOCK_SIZE)]
        else:
            local = []
    elif block_type in (BlockType.JL, BlockType.JR, BlockType.T):
        local = _jt_cells(direction, block_type)
    elif block_type in (BlockType.NL, BlockType.NR):
        local = _n_cells(direction, block_type)
    else:
        local = []
    return [(X_FIELD_NEXT_BLOCK + x, Y_FIELD_NEXT_BLOCK + y) for x, y in local]


@dataclass
class TetrisImages:
    """Every picture the game draws with, and the selected block skin."""

    background: pygame.Surface
    blocks: list[pygame.Surface]
    game_over: pygame.Surface
    symbols: pygame.Surface
    menu_background: pygame.Surface
    menu_text: pygame.Surface
    skin: int = field(default=0)

    def __post_init__(self) -> None:
        self.blocks = list(self.blocks)
        if not self.blocks:
            raise ValueError("at least one block skin is needed")
        self.skin %= len(self.blocks)

    @property
    def block(self) -> pygame.Surface:
        return self.blocks[self.skin]

    @classmethod
    def load(cls, directory: str | os.PathLike[str] = DIR_IMAGE) -> TetrisImages:
        """Load the game's images from ``directory``."""

        def path(name: str) -> str:
            return os.path.join(directory, name)

        return cls(
            background=load_image(path(BACKGROUND_FILE)),
            blocks=[load_image(path(name)) for name in SKIN_FILES],
            game_over=load_image(path(GAME_OVER_FILE)),
            symbols=load_image(path(SYMBOLS_FILE)),
            menu_background=load_image(path(MENU_BACKGROUND_FILE)),
            menu_text=load_image(path(MENU_TEXT_FILE)),
        )

    def swap_skin(self) -> int:
        """Select the next block skin and return its index."""
        self.skin = (self.skin + 1) % len(self.blocks)
        return self.skin


class TetrisRenderer:
    """Draws the game onto a screen surface."""

    def __init__(self, screen: pygame.Surface, images: TetrisImages) -> None:
        self.screen = screen
        self.images = images

    def draw_background(self) -> None:
        """Clear the screen to black and draw the background picture."""
        self.screen.fill((0x00, 0x00, 0x00, 0xFF))
        self.screen.blit(self.images.background, (0, 0))

    def draw_block(self, color: BlockColor, dst: Point, offset: Point = (0, 0)) -> None:
        """Draw one field square of ``color`` at ``dst`` shifted by ``offset``."""
        source = block_source_rect(color)
        if source is None:
            return
        name, area = source
        image = self.images.background if name == "background" else self.images.block
        self.screen.blit(image, (dst[0] + offset[0], dst[1] + offset[1]), area)

    def draw_text(self, text: str, dst: Point, offset: Point = (0, 0)) -> int:
        """Draw ``text`` in the bitmap font; return the x just after the last glyph."""
        x, y = dst[0] + offset[0], dst[1] + offset[1]
        for ch in text:
            glyph = glyph_for(ch)
            if glyph is None:
                continue
            self.screen.blit(
                self.images.background, (x, y), pygame.Rect(x, y, glyph.width, glyph.height)
            )
            if not glyph.blank:
                self.screen.blit(self.images.symbols, (x, y), glyph.rect)
            x += glyph.width
        return x

    def draw_field(self, board: Board) -> None:
        """Draw every square of the playing field."""
        for i in range(board.width):
            for j in range(board.height):
                self.draw_block(
                    board[i, j].color,
                    (i * BLOCK_SIZE, j * BLOCK_SIZE),
                    (X_MAIN_FIELD, Y_MAIN_FIELD),
                )

    def draw_next_block(self, next_block: NextBlock) -> None:
        """Clear the preview box and draw the next piece in it."""
        for i in range(X_FIELD_NEXT_BLOCK_SIZE):
            for j in range(Y_FIELD_NEXT_BLOCK_SIZE):
                self.draw_block(
                    BlockColor.BACKGROUND,
                    (i * BLOCK_SIZE, j * BLOCK_SIZE),
                    (X_FIELD_NEXT_BLOCK, Y_FIELD_NEXT_BLOCK),
                )
        for cell in next_block_cells(next_block):
            self.draw_block(next_block.color, cell)

    def draw_menu(self, menu: Menu) -> None:
        """Draw the menu panel with its entries, the selected one highlighted."""
        self.screen.blit(self.images.menu_background, (X_MAIN_FIELD, Y_MAIN_FIELD))
        for pos, (item, selected) in enumerate(menu.entries()):
            area = pygame.Rect(int(selected) * X_SHIFT, item.value * Y_SHIFT, X_SHIFT, Y_SHIFT)
            self.screen.blit(
                self.images.menu_text, (X_MENU_POS, Y_MENU_POS + pos * Y_SHIFT), area
            )

    def draw_game_over(self) -> None:
        """Draw the game-over banner over the field."""
        self.screen.blit(self.images.game_over, GAME_OVER_POSITION)