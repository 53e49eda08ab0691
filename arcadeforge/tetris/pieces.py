"""Random choice of pieces and the preview of the piece that comes next."""

from __future__ import annotations

import random
from dataclasses import dataclass

from arcadeforge.tetris.board import (
    NUMBER_OF_COLORS,
    NUMBER_OF_DIRECTIONS,
    NUMBER_OF_TYPES,
    BlockColor,
    BlockType,
    Board,
    Direction,
)


def random_color(rng: random.Random) -> BlockColor:
    """Return one of the four drawable colours."""
    return BlockColor(rng.randrange(NUMBER_OF_COLORS) + 2)


def random_type(rng: random.Random) -> BlockType:
    """Return one of the seven piece shapes."""
    return BlockType(rng.randrange(NUMBER_OF_TYPES) + 1)


def random_direction(rng: random.Random) -> Direction:
    """Return one of the four orientations."""
    return Direction(rng.randrange(NUMBER_OF_DIRECTIONS) + 1)


@dataclass
class NextBlock:
    """The piece that will be spawned next."""

    type: BlockType = BlockType.RANDOM
    color: BlockColor = BlockColor.BACKGROUND
    direction: Direction = Direction.RANDOM


class PieceGenerator:
    """Spawns pieces on a board and keeps the next one ready for preview."""

    def __init__(self, board: Board, rng: random.Random | None = None) -> None:
        self.board = board
        self.rng = rng if rng is not None else random.Random()
        self.next_block = NextBlock()

    def _choose_next(self) -> None:
        self.next_block = NextBlock(
            type=random_type(self.rng),
            color=random_color(self.rng),
            direction=random_direction(self.rng),
        )

    def start(self) -> bool:
        """Spawn a random first piece and pick the one after it."""
        placed = self.board.spawn(
            BlockColor.RANDOM, BlockType.RANDOM, Direction.RANDOM, self.rng
        )
        self._choose_next()
        return placed

    def spawn_next(self) -> bool:
        """Spawn the previewed piece; on success pick a new one. False if it did not fit."""
        upcoming = self.next_block
        if not self.board.spawn(upcoming.color, upcoming.type, upcoming.direction, self.rng):
            return False
        self._choose_next()
        return True