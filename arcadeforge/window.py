"""The game window and its double-buffered screen surface."""

from __future__ import annotations

import pygame

SCREEN_DEPTH = 32


class WindowError(RuntimeError):
    """Raised when the display cannot be opened."""


class Window:
    """A titled display window; usable as a context manager."""

    def __init__(self, title: str, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise WindowError(f"invalid window size {width}x{height}")
        try:
            pygame.display.init()
            self.screen = pygame.display.set_mode((width, height), 0, SCREEN_DEPTH)
        except pygame.error as exc:
            raise WindowError(str(exc)) from exc
        pygame.display.set_caption(title)
        self.title = title
        self._open = True

    def clear(self, r: int, g: int, b: int, a: int = 0xFF) -> None:
        """Fill the whole screen with one colour."""
        self.screen.fill((r, g, b, a))

    def apply_surface(self, x: int, y: int, source: pygame.Surface) -> None:
        """Blit ``source`` onto the screen with its top-left corner at (x, y)."""
        self.screen.blit(source, (x, y))

    def flip(self) -> None:
        """Swap the display buffers."""
        pygame.display.flip()

    def close(self) -> None:
        """Shut the display down; calling it again does nothing."""
        if self._open:
            pygame.display.quit()
            self._open = False

    def __enter__(self) -> Window:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()