import random

import pygame
import pytest

from arcadeforge.tetris.app import TetrisGame
from arcadeforge.tetris.board import BlockColor, BlockStatus, Board, Direction
from arcadeforge.tetris.menu import GameState, ProgramState
from arcadeforge.tetris.renderer import TetrisImages, TetrisRenderer
from arcadeforge.tetris.score import load_high_score


@pytest.fixture
def game(tmp_path):
    g = TetrisGame(tmp_path / "score.txt", random.Random(7))
    g.start()
    return g


def _snapshot(board):
    return [[board[i, j] for j in range(Board.height)] for i in range(Board.width)]


def test_start_spawns_a_piece_in_menu(game):
    assert game.state is ProgramState.MENU
    assert game.game_state is GameState.PLAY
    assert game.board.has_moving()
    assert game.score.current == 0


def test_enter_in_menu_starts_play(game):
    assert game.handle_key(pygame.K_RETURN) is ProgramState.PLAY


def test_escape_pauses_and_resumes(game):
    game.handle_key(pygame.K_RETURN)
    assert game.handle_key(pygame.K_ESCAPE) is ProgramState.PAUSE
    assert game.game_state is GameState.PAUSE
    before = _snapshot(game.board)
    for _ in range(100):
        game.tick()
    assert _snapshot(game.board) == before
    assert game.handle_key(pygame.K_ESCAPE) is ProgramState.PLAY
    assert game.game_state is GameState.PLAY


def test_music_entry_without_music_keeps_menu(game):
    game.handle_key(pygame.K_DOWN)
    assert game.handle_key(pygame.K_RETURN) is ProgramState.MENU


def test_exit_entry_stops_running(game):
    game.handle_key(pygame.K_DOWN)
    game.handle_key(pygame.K_DOWN)
    assert game.handle_key(pygame.K_RETURN) is ProgramState.OUT
    game.tick()
    assert game.running is False


def test_handle_key_marks_key_held(game):
    game.handle_key(pygame.K_a)
    assert game.keys.is_held(pygame.K_a)


def test_right_key_shifts_piece(game):
    game.handle_key(pygame.K_RETURN)
    column = game.board.piece.i
    assert game.board.can_move(Direction.RIGHT)
    game.handle_key(pygame.K_RIGHT)
    assert game.board.piece.i == column + 1


def test_full_row_is_scored(game):
    game.state = ProgramState.PLAY
    board = game.board
    assert board.create_line(BlockColor.RED, BlockStatus.BASIS, 0, 19, Direction.UP)
    assert board.create_line(BlockColor.RED, BlockStatus.BASIS, 4, 19, Direction.UP)
    assert board.create_square(BlockColor.BLUE, BlockStatus.BASIS, 2, 8, 18)
    game.tick()
    assert game.score.current == 100
    assert board[8, 19] == board[9, 19]
    assert board[8, 19].status is BlockStatus.BASIS
    assert board[0, 19].status is BlockStatus.BACKGROUND


def test_game_runs_until_over_then_restarts(game):
    game.state = ProgramState.PLAY
    for _ in range(10000):
        game.keys.press(pygame.K_DOWN)
        if game.tick() is ProgramState.END:
            break
    assert game.is_over()
    assert game.state is ProgramState.END

    game.keys.press(pygame.K_RETURN)
    assert game.tick() is ProgramState.PLAY
    assert not game.is_over()
    assert game.board.has_moving()


def test_game_over_stores_new_high_score(game, tmp_path):
    game.state = ProgramState.PLAY
    game.score.add(50)
    game.board.can_create = False
    assert game.tick() is ProgramState.END
    assert load_high_score(tmp_path / "score.txt") == 50


def test_c_key_swaps_skin_with_renderer(game):
    screen = pygame.Surface((540, 742), 0, 32)

    def surface(size):
        return pygame.Surface(size, 0, 32)

    images = TetrisImages(
        background=surface((540, 742)),
        blocks=[surface((64, 64)), surface((64, 64))],
        game_over=surface((10, 10)),
        symbols=surface((300, 70)),
        menu_background=surface((320, 640)),
        menu_text=surface((300, 140)),
    )
    game.renderer = TetrisRenderer(screen, images)
    game.handle_key(pygame.K_c)
    assert images.skin == 1
    game.handle_key(pygame.K_c)
    assert images.skin == 0