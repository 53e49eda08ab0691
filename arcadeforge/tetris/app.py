"""The falling-block game: its rules per frame, key handling and main loop."""

from __future__ import annotations

import argparse
import random
import sys

import pygame

from arcadeforge.fpsmanager import FrameRateManager
from arcadeforge.imageloader import ImageLoadError
from arcadeforge.sound import DIR_SOUND
from arcadeforge.tetris.board import Board, Direction, Gravity
from arcadeforge.tetris.controls import TetrisKeys, is_left, is_right, is_up
from arcadeforge.tetris.menu import GameState, Menu, MenuAction, ProgramState
from arcadeforge.tetris.music import TetrisMusic
from arcadeforge.tetris.pieces import PieceGenerator
from arcadeforge.tetris.renderer import DIR_IMAGE, TetrisImages, TetrisRenderer
from arcadeforge.tetris.score import FILE_SCORE, Score
from arcadeforge.window import Window, WindowError

SCREEN_TITLE = "Tetris"
SCREEN_WIDTH = 540
SCREEN_HEIGHT = 742
FRAME_RATE = 60

_HINTS = (
    ("Press plus or minus", (360, 200)),
    ("to music.", (400, 218)),
    ("Press c to swap", (360, 270)),
    ("texture.", (400, 288)),
)


class TetrisGame:
    """The whole game: program state, field, score, menu and optional output."""

    def __init__(self, score_path=FILE_SCORE, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.score = Score(score_path)
        self.keys = TetrisKeys()
        self.gravity = Gravity()
        self.menu = Menu()
        self.board = Board()
        self.generator = PieceGenerator(self.board, self.rng)
        self.state = ProgramState.MENU
        self.game_state = GameState.PLAY
        self.running = True
        self.renderer: TetrisRenderer | None = None
        self.music: TetrisMusic | None = None

    def start(self) -> None:
        """Begin a new game on an empty field."""
        self.board = Board()
        self.keys.reset()
        self.generator = PieceGenerator(self.board, self.rng)
        self.generator.start()
        self.score.reset()
        self.gravity.sum_boost = 0
        self.game_state = GameState.PLAY
        if self.renderer is not None:
            self.renderer.draw_background()
            for text, position in _HINTS:
                self.renderer.draw_text(text, position)
            self._draw_score()

    def _game_tick(self, keys: TetrisKeys) -> None:
        if self.game_state is not GameState.PLAY:
            return
        if not self.board.has_moving():
            keys.release_down()
            self.generator.spawn_next()
        if self.gravity.step(keys.down_pressed()):
            self.board.move(Direction.DOWN)
        points = self.board.clear_full_lines(self.gravity.sum_boost)
        if points:
            self.score.add(points)

    def tick(self, keys: TetrisKeys | None = None) -> ProgramState:
        """Run one frame of game logic and return the program state."""
        keys = self.keys if keys is None else keys
        if self.state is ProgramState.PLAY:
            self._game_tick(keys)
            if self.is_over():
                self.score.commit_high_score()
                self.state = ProgramState.END
        elif self.state is ProgramState.END:
            if keys.is_held(pygame.K_RETURN):
                self.start()
                self.state = ProgramState.PLAY
        elif self.state is ProgramState.OUT:
            self.running = False
        return self.state

    def is_over(self) -> bool:
        """Return True once a new piece no longer fits on the field."""
        return not self.board.can_create

    def handle_key(self, key: int) -> ProgramState:
        """React to a key being pressed and return the program state."""
        self.keys.press(key)
        if self.music is not None:
            self.music.handle_key(key)

        self.state, action = self.menu.handle_key(key, self.state)
        if action is MenuAction.PAUSE:
            self.game_state = GameState.PAUSE
        elif action is MenuAction.RESUME:
            self.game_state = GameState.PLAY
        elif action is MenuAction.TOGGLE_MUSIC and self.music is not None:
            self.music.toggle()

        if key == pygame.K_c and self.renderer is not None:
            self.renderer.images.swap_skin()
            self.renderer.draw_field(self.board)
            self.renderer.draw_next_block(self.generator.next_block)

        if self.state is ProgramState.PLAY:
            if is_right(key):
                self.board.move(Direction.RIGHT)
            if is_left(key):
                self.board.move(Direction.LEFT)
            if is_up(key):
                self.board.rotate()
        return self.state

    def _draw_score(self) -> None:
        renderer = self.renderer
        if renderer is None:
            return
        renderer.draw_text("High score:", (13, 13))
        renderer.draw_text(str(self.score.high), (102, 14))
        renderer.draw_text("You score:", (13, 35))
        renderer.draw_text(str(self.score.current), (102, 35))

    def _render(self) -> None:
        renderer = self.renderer
        if renderer is None:
            return
        if self.state in (ProgramState.MENU, ProgramState.PAUSE):
            renderer.draw_menu(self.menu)
        elif self.state is ProgramState.PLAY:
            renderer.draw_field(self.board)
            renderer.draw_next_block(self.generator.next_block)
            self._draw_score()
        elif self.state is ProgramState.END:
            renderer.draw_game_over()
            self._draw_score()


def main(argv: list[str] | None = None) -> int:
    """Open the window and play until the window is closed or Exit is chosen."""
    parser = argparse.ArgumentParser(description="Play the falling-block game.")
    parser.add_argument("--images", default=DIR_IMAGE, help="directory of the pictures")
    parser.add_argument("--music", default=DIR_SOUND + "tetris.wav", help="music file")
    parser.add_argument("--score-file", default=FILE_SCORE, help="high score file")
    args = parser.parse_args(argv)

    game = TetrisGame(args.score_file)
    music: TetrisMusic | None = None
    try:
        with Window(SCREEN_TITLE, SCREEN_WIDTH, SCREEN_HEIGHT) as window:
            game.renderer = TetrisRenderer(window.screen, TetrisImages.load(args.images))
            music = TetrisMusic(args.music)
            game.music = music
            fps = FrameRateManager(FRAME_RATE)
            game.start()
            while game.running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        game.running = False
                    elif event.type == pygame.KEYDOWN:
                        game.handle_key(event.key)
                    elif event.type == pygame.KEYUP:
                        game.keys.release(event.key)
                game.tick()
                game._render()
                window.flip()
                fps.delay()
    except (WindowError, ImageLoadError, RuntimeError) as exc:
        print(f"{exc}\nForce quit.", file=sys.stderr)
        return 1
    finally:
        if music is not None:
            music.close()
        pygame.quit()
    return 0