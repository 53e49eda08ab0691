"""Background music playback with a stepped volume control."""

from __future__ import annotations

import os
from dataclasses import dataclass

import pygame

MAX_VOLUME = 128
VOLUME_STEP = 5
VOLUME_START = 5
DIR_SOUND = "sound/"


@dataclass
class Volume:
    """A music volume in the range 0..MAX_VOLUME, changed in fixed steps."""

    level: int = MAX_VOLUME

    def increase(self) -> int:
        """Raise the volume one step unless that would reach the maximum."""
        if self.level < MAX_VOLUME - VOLUME_STEP:
            self.level += VOLUME_STEP
        return self.level

    def decrease(self) -> int:
        """Lower the volume one step unless that would go below zero."""
        if self.level > VOLUME_STEP - 1:
            self.level -= VOLUME_STEP
        return self.level


class MusicPlayer:
    """Opens the audio device, loads a music file and starts it looping."""

    def __init__(self, filename: str | os.PathLike[str] = DIR_SOUND + "sound.wav") -> None:
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
        self.toggle_pause()

    @property
    def playing(self) -> bool:
        return self._playing

    @property
    def paused(self) -> bool:
        return self._paused

    @property
    def volume(self) -> int:
        return self._volume.level

    def _apply_volume(self) -> None:
        pygame.mixer.music.set_volume(self._volume.level / MAX_VOLUME)

    def toggle_pause(self) -> None:
        """Start the music if stopped, otherwise pause or resume it."""
        if not self._playing:
            pygame.mixer.music.play(-1)
            self._volume.level = VOLUME_START
            self._apply_volume()
            self._playing = True
            self._paused = False
        elif self._paused:
            pygame.mixer.music.unpause()
            self._paused = False
        else:
            pygame.mixer.music.pause()
            self._paused = True

    def stop(self) -> None:
        """Halt the music."""
        pygame.mixer.music.stop()
        self._playing = False
        self._paused = False

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