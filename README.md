# arcadeforge

A small arcade engine built on pygame, with two programs on top of it:

- a steering demo: a short white line you drive around a black screen with the
  arrow keys;
- a falling-block puzzle game with a menu, music, a next-piece preview and a
  high score kept between runs.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Playing

### Steering demo

```
arcadeforge-demo
```

Up moves the line forward one pixel per frame along its heading, Left and Right
turn it by one degree per frame. Close the window to quit. The demo runs at 200
frames per second in a 1024×640 window.

### Puzzle game

```
arcadeforge-tetris [--images DIR] [--music FILE] [--score-file FILE]
```

- `--images` — directory holding the pictures (default `image/`):
  `tetris_background.png`, `tetris_block_new.png`, `tetris_block.png`,
  `tetris_game_over.png`, `symbols.png`, `menu_background.png`, `menu_text.png`;
- `--music` — the music file (default `sound/tetris.wav`);
- `--score-file` — where the high score is kept (default `gamescore.txt`).

All paths are relative to the working directory. If the window cannot be opened,
or a picture or the music cannot be loaded, the game prints the error and exits
with status 1. A missing or unreadable score file counts as a high score of 0;
the file is written when a game ends with a new high score.

The game opens on the menu, with the entries Start, Music and Exit.

Controls:

- in the menu: Up / W and Down / S choose an entry (wrapping round), Enter or
  Space selects it; Music turns the music on or off, Exit quits;
- while playing: Left / A and Right / D move the piece, Down / S drops it faster,
  Up / W rotates it, Escape pauses and shows the menu; in the pause menu Escape
  or Start resumes;
- after game over, Return starts a new game;
- C switches between the two block skins;
- 0 turns the music on or off, 9 pauses and resumes it, keypad plus and minus
  change its volume.

Each cleared line is worth 100 points, plus 100 for every step the fall speed
has risen; when several lines clear at once, each further line is worth that
much more than the one before. The fall speed rises slowly over the course of
a game.

## Using the engine

The engine parts can be used on their own:

- `arcadeforge.vector` — the immutable `Vector` (`+`, `-`, `*`, `magnitude()`,
  `normalised()`, `rotated(degrees)`), `classify()` of a point against a directed
  segment, returning a `Position`, and `point_in_triangle()`;
- `arcadeforge.input` — `KeyState`, the set of held keys, raising `KeyCodeError`
  for codes out of range;
- `arcadeforge.fpsmanager` — `FrameRateManager`, which sleeps to keep a loop at
  1 to 200 frames per second; the clock and the sleep function can be passed in;
- `arcadeforge.window` — `Window`, a titled display usable as a context manager;
- `arcadeforge.imageloader` — `load_image()` and `load_images()`, raising
  `ImageLoadError`;
- `arcadeforge.sound` — `Volume` and `MusicPlayer`, looping music with a stepped
  volume;
- `arcadeforge.body` — `PhysicsBody`, with a polygon collider of up to 16 points,
  that moves, rotates and wraps around the screen;
- `arcadeforge.randomizer` — `Randomizer` for random integers, signs, screen
  positions and unit headings;
- `arcadeforge.renderer` — `line_points()`, `draw_point()`, `draw_line()` and
  `draw_image()`;
- `arcadeforge.outline` — wire-frame shapes: `body_outline()`,
  `ship_icon_segments()`, `exhaust_body()`, `crash_fragments()` and `draw_body()`.

```python
from arcadeforge.vector import Vector, point_in_triangle

heading = Vector(0, 1).rotated(90)
position = Vector(15, 15) + heading * 2
print(position.magnitude())
print(point_in_triangle(Vector(1, 1), Vector(0, 0), Vector(0, 4), Vector(4, 0)))
```

The puzzle game's rules live in `arcadeforge.tetris` and need no display:
`board.Board` (pieces, movement, rotation, line clearing), `board.Gravity`,
`pieces.PieceGenerator`, `score.Score`, `menu.Menu`, `controls.TetrisKeys` and
`app.TetrisGame`.

```python
from arcadeforge.tetris.board import Board, BlockColor, BlockType, Direction

board = Board()
board.spawn(BlockColor.RED, BlockType.LINE, Direction.UP, rng=None)
while board.can_move(Direction.DOWN):
    board.move(Direction.DOWN)
board.moves_to_basis()
print(board[3, 19])
```

## What is not included

There is no asteroids game: the package has the pieces such a game would be
drawn with (physics bodies, wrapping, random headings, ship outlines, exhaust
and crash debris), but no ship, bullets, asteroids, collisions or game loop
built from them. The steering demo has no menu or pause screen, and nothing in
the package plays sound effects.