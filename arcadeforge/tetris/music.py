"""Background music for the falling-block game, controlled from the keyboard."""

from __future__ import annotations

import os

import pygame

from arcadeforge.sound import DIR_SOUND, MAX_VOLUME, Volume


class TetrisMusic:
    """Loads a looping tune and starts it at once."""

    def __init__(self, filename: str | os.PathLike[str] = DIR_SOUND + "tetris.wav") -> None:
        try:
            pygame.mixer.init(frequency=44100, size=-16, channels=2, buffer=2048)
        except pygame.error as exc:
            raise RuntimeError(f"cannot open audio: {exc}") from exc
        try:
            pygame.mixer.music.load(os.fspath(filename))
        except (pygame.error, OSError) as exc:
            raise RuntimeError(f"Failed to load music! {os.fspath(filename)}") from exc
        self._volume = Volume()
        self._playing = False
        self._paused = False
        self._loaded = True
        self.toggle()

    @property
    def playing(self) -> bool:
        return self._playing

    @property
    def paused(self) -> bool:
        return self._paused

    @property
    def volume(self) -> int:
        return self._volume.level

    def toggle(self) -> None:
        """Stop the music if it is on, otherwise start it looping."""
        if self._playing:
            pygame.mixer.music.stop()
            self._playing = False
            self._paused = False
        else:
            pygame.mixer.music.play(-1)
            self._playing = True
            self._paused = False

    def toggle_pause(self) -> None:
        """Pause or resume the music; does nothing while it is stopped."""
        if not self._playing:
            return
        if self._paused:
            pygame.mixer.music.unpause()
            self._paused = False
        else:
            pygame.mixer.music.pause()
            self._paused = True

    def _apply_volume(self) -> None:
        pygame.mixer.music.set_volume(self._volume.level / MAX_VOLUME)

    def volume_up(self) -> int:
        """Raise the volume one step and return the new level."""
        level = self._volume.increase()
        self._apply_volume()
        return level

    def volume_down(self) -> int:
        """Lower the volume one step and return the new level."""
        level = self._volume.decrease()
        self._apply_volume()
        return level

    def handle_key(self, key: int) -> bool:
        """Act on a music key (0, 9, keypad plus or minus); True if it was one."""
        if key == pygame.K_0:
            self.toggle()
        elif key == pygame.K_KP_PLUS:
            self.volume_up()
        elif key == pygame.K_KP_MINUS:
            self.volume_down()
        elif key == pygame.K_9:
            self.toggle_pause()
        else:
            return False
        return True

    def close(self) -> None:
        """Stop and release the music; calling it again does nothing."""
        if not self._loaded:
            return
        pygame.mixer.music.stop()
        pygame.mixer.music.unload()
        self._playing = False
        self._paused = False
        self._loaded = False