"""Key bindings and held-key tracking for the falling-block game."""

from __future__ import annotations

from dataclasses import dataclass

import pygame

from arcadeforge.input import KeyState

_ENTER_KEYS = frozenset({pygame.K_RETURN, pygame.K_SPACE})
_UP_KEYS = frozenset({pygame.K_UP, pygame.K_w})
_DOWN_KEYS = frozenset({pygame.K_DOWN, pygame.K_s})
_RIGHT_KEYS = frozenset({pygame.K_RIGHT, pygame.K_d})
_LEFT_KEYS = frozenset({pygame.K_LEFT, pygame.K_a})


def is_enter(key: int) -> bool:
    """Return True for Return or Space."""
    return key in _ENTER_KEYS


def is_up(key: int) -> bool:
    """Return True for the up arrow or W."""
    return key in _UP_KEYS


def is_down(key: int) -> bool:
    """Return True for the down arrow or S."""
    return key in _DOWN_KEYS


def is_right(key: int) -> bool:
    """Return True for the right arrow or D."""
    return key in _RIGHT_KEYS


def is_left(key: int) -> bool:
    """Return True for the left arrow or A."""
    return key in _LEFT_KEYS


@dataclass
class TetrisKeys(KeyState):
    """Held keys, with helpers for the soft-drop keys."""

    max_keys: int | None = None

    def release_down(self) -> None:
        """Forget that a drop key is held, so a new piece does not fall fast."""
        for key in _DOWN_KEYS:
            self.release(key)

    def down_pressed(self) -> bool:
        """Return True while a drop key is held."""
        return any(self.is_held(key) for key in _DOWN_KEYS)