"""Loading of image files into display-ready surfaces."""

from __future__ import annotations

import os
from collections.abc import Iterable

import pygame


class ImageLoadError(OSError):
    """Raised when an image file cannot be loaded."""


def load_image(filename: str | os.PathLike[str]) -> pygame.Surface:
    """Load an image, converted to the display format with alpha when a display exists."""
    try:
        image = pygame.image.load(os.fspath(filename))
    except (pygame.error, OSError) as exc:
        raise ImageLoadError(f"Error loading image {os.fspath(filename)}") from exc
    if pygame.display.get_init() and pygame.display.get_surface() is not None:
        return image.convert_alpha()
    return image


def load_images(
    directory: str | os.PathLike[str], names: Iterable[str]
) -> dict[str, pygame.Surface]:
    """Load each named file from ``directory``, keyed by the given name."""
    return {name: load_image(os.path.join(directory, name)) for name in names}