"""The falling-block playing field: cells, pieces, movement, rotation and line clearing."""

from __future__ import annotations

import random
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum

FIELD_WIDTH = 10
FIELD_HEIGHT = 20
SQUARE_SIZE = 2
LINE_LENGTH = 4
NUMBER_OF_COLORS = 4
NUMBER_OF_TYPES = 7
NUMBER_OF_DIRECTIONS = 4
SPAWN_COLUMN = 4
LINE_SPAWN_COLUMN = 3

DOWN_SPEED = 30
MAX_SPEED = 6
BOOST = 10000
FAST_DROP_SPEED = 10
LINE_POINTS = 100


class BlockColor(Enum):
    """The colour of a cell; RANDOM asks for one to be chosen."""

    BACKGROUND = 0
    RANDOM = 1
    RED = 2
    BLUE = 3
    GREEN = 4
    PURPLE = 5


class BlockStatus(Enum):
    """What a cell holds: nothing, a settled block or part of the falling piece."""

    BACKGROUND = 0
    BASIS = 1
    RESTRUCTURE = 2
    MOVES = 3


class BlockType(Enum):
    """The shape of a piece; RANDOM asks for one to be chosen."""

    RANDOM = 0
    SQUARE = 1
    LINE = 2
    JL = 3
    JR = 4
    T = 5
    NL = 6
    NR = 7


class Direction(Enum):
    """A movement or orientation; RANDOM asks for one to be chosen."""

    RANDOM = 0
    UP = 1
    RIGHT = 2
    DOWN = 3
    LEFT = 4


_STEPS = {
    Direction.RANDOM: (0, 0),
    Direction.UP: (0, -1),
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
}

_VERTICAL = (Direction.RIGHT, Direction.LEFT)
_HORIZONTAL = (Direction.UP, Direction.DOWN)

# Orientation reached by a quarter turn, and which way the column may shift to fit.
_JT_TURNS = {
    Direction.UP: (Direction.RIGHT, 1),
    Direction.RIGHT: (Direction.DOWN, -1),
    Direction.DOWN: (Direction.LEFT, 1),
    Direction.LEFT: (Direction.UP, -1),
}


@dataclass(frozen=True)
class Cell:
    """One square of the field."""

    color: BlockColor = BlockColor.BACKGROUND
    status: BlockStatus = BlockStatus.BACKGROUND


EMPTY = Cell()


@dataclass
class PieceState:
    """The falling piece: its shape, orientation, colour and top-left corner."""

    type: BlockType = BlockType.RANDOM
    direction: Direction = Direction.RANDOM
    color: BlockColor = BlockColor.BACKGROUND
    i: int = 0
    j: int = 0


@dataclass
class Gravity:
    """The fall timer that speeds up slowly over the course of a game."""

    speed: int = 0
    sum_speed: int = 1
    boost: int = 0
    sum_boost: int = 0

    def step(self, fast: bool = False) -> bool:
        """Advance one frame; return True when the piece should drop a row."""
        if fast:
            self.speed += FAST_DROP_SPEED
        fall = self._advance_speed()
        self._advance_boost()
        return fall

    def _advance_speed(self) -> bool:
        if self.speed < DOWN_SPEED:
            self.speed += self.sum_speed + self.sum_boost
            return False
        self.speed = 0
        return True

    def _advance_boost(self) -> bool:
        if self.boost < BOOST:
            self.boost += 1
            return False
        if self.sum_speed + self.sum_boost < MAX_SPEED:
            self.sum_boost += 1
        self.boost = 0
        return True


def _random_color(rng: random.Random) -> BlockColor:
    return BlockColor(rng.randrange(NUMBER_OF_COLORS) + 2)


def _random_type(rng: random.Random) -> BlockType:
    return BlockType(rng.randrange(NUMBER_OF_TYPES) + 1)


def _random_direction(rng: random.Random) -> Direction:
    return Direction(rng.randrange(NUMBER_OF_DIRECTIONS) + 1)


class Board:
    """The playing field, indexed as ``board[column, row]`` with row 0 at the top."""

    width = FIELD_WIDTH
    height = FIELD_HEIGHT

    def __init__(self) -> None:
        self._cells = [[EMPTY] * FIELD_HEIGHT for _ in range(FIELD_WIDTH)]
        self.piece = PieceState()
        self.can_create = True

    def __getitem__(self, position: tuple[int, int]) -> Cell:
        i, j = position
        if not self._in_bounds(i, j):
            raise IndexError(f"cell ({i}, {j}) is outside the field")
        return self._cells[i][j]

    def _in_bounds(self, i: int, j: int) -> bool:
        return 0 <= i < FIELD_WIDTH and 0 <= j < FIELD_HEIGHT

    def _set(self, i: int, j: int, color: BlockColor, status: BlockStatus) -> None:
        self._cells[i][j] = Cell(color, status)

    def _paint(
        self, color: BlockColor, status: BlockStatus, cells: Iterable[tuple[int, int]]
    ) -> None:
        for i, j in cells:
            self._set(i, j, color, status)

    def _moving(self) -> Iterator[tuple[int, int, Cell]]:
        for i, column in enumerate(self._cells):
            for j, cell in enumerate(column):
                if cell.status is BlockStatus.MOVES:
                    yield i, j, cell

    def spawn(
        self,
        color: BlockColor = BlockColor.RANDOM,
        block_type: BlockType = BlockType.RANDOM,
        direction: Direction = Direction.RANDOM,
        rng: random.Random | None = None,
    ) -> bool:
        """Place a new falling piece at the top; False (and game over) if it does not fit."""
        if rng is None:
            rng = random.Random()
        if color is BlockColor.RANDOM:
            color = _random_color(rng)
        if block_type is BlockType.RANDOM:
            block_type = _random_type(rng)
        if direction is Direction.RANDOM:
            direction = _random_direction(rng)

        self.piece.direction = direction
        self.piece.type = block_type
        self.piece.color = color

        if block_type is BlockType.SQUARE:
            column = SPAWN_COLUMN
            placed = self.create_square(color, BlockStatus.MOVES, SQUARE_SIZE, column, 0)
        elif block_type is BlockType.LINE:
            column = LINE_SPAWN_COLUMN + (1 if direction in _VERTICAL else 0)
            placed = self.create_line(color, BlockStatus.MOVES, column, 0, direction)
        else:
            column = SPAWN_COLUMN
            placed = self.create_jt(
                color, BlockStatus.MOVES, column, 0, direction, block_type
            )

        if not placed:
            self.can_create = False
            return False
        self.piece.i = column
        self.piece.j = 0
        return True

    def check_create(self, begin_i: int, begin_j: int, end_i: int, end_j: int) -> bool:
        """Return True if the rectangle lies on the field and holds no settled block."""
        if begin_i < 0 or end_i >= FIELD_WIDTH or begin_j < 0 or end_j >= FIELD_HEIGHT:
            return False
        return not any(
            self._cells[i][j].status is BlockStatus.BASIS
            for i in range(begin_i, end_i + 1)
            for j in range(begin_j, end_j + 1)
        )

    def create_square(
        self, color: BlockColor, status: BlockStatus, size: int, i: int, j: int
    ) -> bool:
        """Paint a ``size`` by ``size`` square with its top-left corner at (i, j)."""
        if not self.check_create(i, j, i + size - 1, j + size - 1):
            return False
        self._paint(color, status, ((i + x, j + y) for x in range(size) for y in range(size)))
        return True

    def create_line(
        self, color: BlockColor, status: BlockStatus, i: int, j: int, direction: Direction
    ) -> bool:
        """Paint a straight piece: horizontal for UP/DOWN, vertical for RIGHT/LEFT."""
        if direction in _HORIZONTAL:
            end = (i + LINE_LENGTH - 1, j)
            cells = [(i + x, j) for x in range(LINE_LENGTH)]
        elif direction in _VERTICAL:
            end = (i, j + LINE_LENGTH - 1)
            cells = [(i, j + y) for y in range(LINE_LENGTH)]
        else:
            return False
        if not self.check_create(i, j, *end):
            return False
        self._paint(color, status, cells)
        return True

    def create_jt(
        self,
        color: BlockColor,
        status: BlockStatus,
        i: int,
        j: int,
        direction: Direction,
        block_type: BlockType,
    ) -> bool:
        """Paint a J, T or N shaped piece with its bounding box at (i, j)."""
        if block_type in (BlockType.NL, BlockType.NR):
            return self._create_n(color, status, i, j, direction, block_type)

        if direction is Direction.UP:
            end = (i + 2, j + 1)
            extra = {BlockType.JL: (i, j), BlockType.T: (i + 1, j), BlockType.JR: (i + 2, j)}
            bar = [(i + x, j + 1) for x in range(3)]
        elif direction is Direction.DOWN:
            end = (i + 2, j + 1)
            extra = {
                BlockType.JL: (i + 2, j + 1),
                BlockType.T: (i + 1, j + 1),
                BlockType.JR: (i, j + 1),
            }
            bar = [(i + x, j) for x in range(3)]
        elif direction is Direction.RIGHT:
            end = (i + 1, j + 2)
            extra = {
                BlockType.JL: (i + 1, j),
                BlockType.T: (i + 1, j + 1),
                BlockType.JR: (i + 1, j + 2),
            }
            bar = [(i, j + y) for y in range(3)]
        elif direction is Direction.LEFT:
            end = (i + 1, j + 2)
            extra = {BlockType.JL: (i, j + 2), BlockType.T: (i, j + 1), BlockType.JR: (i, j)}
            bar = [(i + 1, j + y) for y in range(3)]
        else:
            return False

        if not self.check_create(i, j, *end):
            return False
        knob = extra.get(block_type)
        if knob is not None:
            self._set(*knob, color, status)
        self._paint(color, status, bar)
        return True

    def _create_n(
        self,
        color: BlockColor,
        status: BlockStatus,
        i: int,
        j: int,
        direction: Direction,
        block_type: BlockType,
    ) -> bool:
        left = block_type is BlockType.NL
        if direction in _HORIZONTAL:
            end = (i + 2, j + 1)
            cells = [(i + 1, j), (i + 1, j + 1)]
            cells += [(i, j + 1), (i + 2, j)] if left else [(i, j), (i + 2, j + 1)]
        elif direction in _VERTICAL:
            end = (i + 1, j + 2)
            cells = [(i, j + 1), (i + 1, j + 1)]
            cells += [(i, j), (i + 1, j + 2)] if left else [(i, j + 2), (i + 1, j)]
        else:
            return False
        if not self.check_create(i, j, *end):
            return False
        self._paint(color, status, cells)
        return True

    def moves_to_basis(self) -> None:
        """Settle every falling cell."""
        for i, j, cell in list(self._moving()):
            self._set(i, j, cell.color, BlockStatus.BASIS)

    def blocks_to_moves(self, border: int) -> None:
        """Make every occupied cell in the rows above ``border`` fall again."""
        for i, column in enumerate(self._cells):
            for j in range(border):
                cell = column[j]
                if cell.status is not BlockStatus.BACKGROUND:
                    self._set(i, j, cell.color, BlockStatus.MOVES)

    def has_moving(self) -> bool:
        """Return True if any cell belongs to the falling piece."""
        return any(True for _ in self._moving())

    def can_move(self, direction: Direction) -> bool:
        """Return True if there is a falling piece and it can shift one cell."""
        di, dj = _STEPS[direction]
        found = False
        for i, j, _ in self._moving():
            found = True
            ni, nj = i + di, j + dj
            if not self._in_bounds(ni, nj) or self._cells[ni][nj].status is BlockStatus.BASIS:
                return False
        return found

    def move(self, direction: Direction) -> bool:
        """Shift the falling piece one cell; a blocked downward move settles it."""
        if not self.can_move(direction):
            if direction is Direction.DOWN:
                self.moves_to_basis()
            return False
        self._shift_piece_index(direction)
        di, dj = _STEPS[direction]
        moving = [(i, j, cell.color) for i, j, cell in self._moving()]
        for i, j, _ in moving:
            self._cells[i][j] = EMPTY
        for i, j, color in moving:
            self._set(i + di, j + dj, color, BlockStatus.MOVES)
        return True

    def _shift_piece_index(self, direction: Direction) -> None:
        di, dj = _STEPS[direction]
        self.piece.i += di
        self.piece.j += dj

    def rotate(self) -> None:
        """Turn the falling piece a quarter turn when there is room for it."""
        piece = self.piece
        if piece.type is BlockType.LINE:
            self._rotate_line()
        elif piece.type in (
            BlockType.JL,
            BlockType.JR,
            BlockType.T,
            BlockType.NL,
            BlockType.NR,
        ):
            self._rotate_jt()

    def _rotate_line(self) -> None:
        piece = self.piece
        i, j = piece.i, piece.j
        if piece.direction in _HORIZONTAL:
            if self.check_create(i, j, i, j + LINE_LENGTH - 1):
                self.create_line(
                    BlockColor.BACKGROUND, BlockStatus.BACKGROUND, i, j, Direction.UP
                )
                self.create_line(piece.color, BlockStatus.MOVES, i, j, Direction.RIGHT)
                piece.direction = Direction.RIGHT
        elif piece.direction in _VERTICAL:
            for k in range(LINE_LENGTH):
                if self.check_create(i - k, j, i - k + LINE_LENGTH - 1, j):
                    self.create_line(
                        BlockColor.BACKGROUND, BlockStatus.BACKGROUND, i, j, Direction.RIGHT
                    )
                    self.create_line(piece.color, BlockStatus.MOVES, i - k, j, Direction.UP)
                    piece.i -= k
                    piece.direction = Direction.UP
                    break

    def _rotate_jt(self) -> None:
        piece = self.piece
        turn = _JT_TURNS.get(piece.direction)
        if turn is None:
            return
        target, sign = turn
        width, height = (1, 2) if target in _VERTICAL else (2, 1)
        i, j = piece.i, piece.j
        for k in range(2):
            ni = i + sign * k
            if self.check_create(ni, j, ni + width, j + height) and self.create_jt(
                BlockColor.BACKGROUND,
                BlockStatus.BACKGROUND,
                i,
                j,
                piece.direction,
                piece.type,
            ):
                self.create_jt(piece.color, BlockStatus.MOVES, ni, j, target, piece.type)
                piece.i = ni
                piece.direction = target
                break

    def _full_row(self) -> int | None:
        for j in reversed(range(FIELD_HEIGHT)):
            if all(column[j].status is BlockStatus.BASIS for column in self._cells):
                return j
        return None

    def clear_full_lines(self, boost: int = 0) -> int:
        """Remove full rows, drop what lies above, and return the points earned."""
        award = LINE_POINTS + LINE_POINTS * boost
        total = 0
        while (row := self._full_row()) is not None:
            for column in self._cells:
                column[row] = EMPTY
            self.blocks_to_moves(row)
            while self.can_move(Direction.DOWN):
                self.move(Direction.DOWN)
            self.moves_to_basis()
            total += award
            award += LINE_POINTS + LINE_POINTS * boost
        return total