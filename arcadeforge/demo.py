"""A minimal arcade demo: a steerable arrow on a black screen."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from enum import Enum, auto

import pygame

from arcadeforge.body import PhysicsBody
from arcadeforge.fpsmanager import FrameRateManager
from arcadeforge.input import KeyState
from arcadeforge.renderer import draw_line
from arcadeforge.vector import Vector
from arcadeforge.window import Window

SCREEN_TITLE = "SDL-ArcadeEngine"
SCREEN_WIDTH = 1024
SCREEN_HEIGHT = 640
FRAME_RATE = 200
PLAYER_LENGTH = 16
WHITE = (255, 255, 255, 255)


class ProgramState(Enum):
    """The top-level mode of the program."""

    MENU = auto()
    PLAY = auto()
    PAUSE = auto()


class GameState(Enum):
    """The phase of a running game."""

    BEGIN = auto()
    PLAY = auto()
    OVER = auto()


def _initial_body() -> PhysicsBody:
    return PhysicsBody(position=Vector(15, 15), direction=Vector(0, 1), velocity=0.0)


@dataclass
class Player:
    """The player's arrow."""

    body: PhysicsBody = field(default_factory=_initial_body)


@dataclass
class Game:
    """The demo game: a player steered with the arrow keys."""

    state: GameState = GameState.PLAY
    player: Player = field(default_factory=Player)

    def tick(self, keys: KeyState) -> None:
        """Advance one frame using the currently held keys."""
        if self.state is not GameState.PLAY:
            return
        body = self.player.body
        if keys.is_held(pygame.K_UP):
            body.position = body.position + body.direction
        if keys.is_held(pygame.K_LEFT):
            body.direction = body.direction.rotated(-1)
        if keys.is_held(pygame.K_RIGHT):
            body.direction = body.direction.rotated(1)

    def render(self, surface: pygame.Surface) -> None:
        """Draw the current frame."""
        if self.state is GameState.PLAY:
            draw_player(surface, self.player)


def draw_player(surface: pygame.Surface, player: Player) -> None:
    """Draw the player as a short line pointing along its heading."""
    start = player.body.position
    end = start + player.body.direction * PLAYER_LENGTH
    draw_line(surface, start, end, WHITE)


def main(argv: list[str] | None = None) -> int:
    """Open the window and run the demo until it is closed."""
    parser = argparse.ArgumentParser(description="Steer an arrow with the arrow keys.")
    parser.parse_args(argv)

    keys = KeyState(max_keys=None)
    game = Game()
    state = ProgramState.PLAY
    try:
        with Window(SCREEN_TITLE, SCREEN_WIDTH, SCREEN_HEIGHT) as window:
            fps = FrameRateManager(FRAME_RATE)
            running = True
            while running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                    elif event.type == pygame.KEYDOWN:
                        keys.press(event.key)
                    elif event.type == pygame.KEYUP:
                        keys.release(event.key)
                if state is ProgramState.PLAY:
                    game.tick(keys)
                window.clear(0x00, 0x00, 0x00, 0xFF)
                if state is ProgramState.PLAY:
                    game.render(window.screen)
                window.flip()
                fps.delay()
    finally:
        pygame.quit()
    return 0