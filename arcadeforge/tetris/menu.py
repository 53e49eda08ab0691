"""The start and pause menu of the falling-block game."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

import pygame

from arcadeforge.tetris.controls import is_down, is_enter, is_up

X_SHIFT = 150
Y_SHIFT = 28
X_MENU_POS = 100
Y_MENU_POS = 300


class ProgramState(Enum):
    """The top-level mode of the program."""

    MENU = auto()
    PLAY = auto()
    PAUSE = auto()
    END = auto()
    OUT = auto()


class GameState(Enum):
    """Whether the game itself is running or paused."""

    PLAY = auto()
    PAUSE = auto()


class MenuItem(Enum):
    """A menu entry; the value is its row in the menu text sprite sheet."""

    START = 0
    OPTIONS = 1
    EXIT = 2
    NEW_GAME = 3
    MUSIC = 4


class MenuAction(Enum):
    """What the game should do after the menu handled a key."""

    NOTHING = auto()
    START_GAME = auto()
    RESUME = auto()
    PAUSE = auto()
    TOGGLE_MUSIC = auto()
    QUIT = auto()


_DISPLAYED = (MenuItem.START, MenuItem.MUSIC, MenuItem.EXIT)
_NEXT = {MenuItem.START: MenuItem.MUSIC, MenuItem.MUSIC: MenuItem.EXIT, MenuItem.EXIT: MenuItem.START}
_PREVIOUS = {value: key for key, value in _NEXT.items()}


@dataclass
class Menu:
    """The menu's highlighted entry and its key handling."""

    selected: MenuItem = MenuItem.START

    def move_selection(self, key: int) -> MenuItem:
        """Move the highlight down or up, wrapping round; return the new entry."""
        if is_down(key):
            self.selected = _NEXT.get(self.selected, self.selected)
        if is_up(key):
            self.selected = _PREVIOUS.get(self.selected, self.selected)
        return self.selected

    def handle_key(
        self, key: int, state: ProgramState
    ) -> tuple[ProgramState, MenuAction]:
        """React to a key press in ``state``; return the new state and the action."""
        if state is ProgramState.PLAY:
            if key == pygame.K_ESCAPE:
                return ProgramState.PAUSE, MenuAction.PAUSE
            return state, MenuAction.NOTHING

        if state is ProgramState.PAUSE:
            self.move_selection(key)
            enter = is_enter(key)
            if key == pygame.K_ESCAPE or (enter and self.selected is MenuItem.START):
                return ProgramState.PLAY, MenuAction.RESUME
            if enter and self.selected is MenuItem.EXIT:
                return ProgramState.OUT, MenuAction.QUIT
            if enter and self.selected is MenuItem.MUSIC:
                return state, MenuAction.TOGGLE_MUSIC
            return state, MenuAction.NOTHING

        if state is ProgramState.MENU:
            self.move_selection(key)
            if is_enter(key):
                if self.selected is MenuItem.START:
                    return ProgramState.PLAY, MenuAction.START_GAME
                if self.selected is MenuItem.MUSIC:
                    return state, MenuAction.TOGGLE_MUSIC
                if self.selected is MenuItem.EXIT:
                    return ProgramState.OUT, MenuAction.QUIT
            return state, MenuAction.NOTHING

        return state, MenuAction.NOTHING

    def entries(self) -> list[tuple[MenuItem, bool]]:
        """Return the displayed entries from top to bottom, with their highlight."""
        return [(item, item is self.selected) for item in _DISPLAYED]