"""Frame rate control that keeps a loop at a fixed number of frames per second."""

from __future__ import annotations

import time
from collections.abc import Callable

FPS_LOWER_LIMIT = 1
FPS_UPPER_LIMIT = 200
FPS_DEFAULT = 30


def _monotonic_ms() -> float:
    return time.monotonic() * 1000.0


def _sleep_ms(milliseconds: float) -> None:
    time.sleep(milliseconds / 1000.0)


class FrameRateManager:
    """Paces frames against a millisecond clock, catching up after slow frames."""

    def __init__(
        self,
        frequency: int = FPS_DEFAULT,
        clock: Callable[[], float] | None = None,
        sleeper: Callable[[float], None] | None = None,
    ) -> None:
        self._clock = clock or _monotonic_ms
        self._sleeper = sleeper or _sleep_ms
        self._frame_count = 0
        self._rate = FPS_DEFAULT
        self._rate_ticks = 1000.0 / FPS_DEFAULT
        self._base_ticks = self._clock()
        self._last_ticks = self._base_ticks
        self.set_frequency(frequency)

    @property
    def frequency(self) -> int:
        return self._rate

    @property
    def frame_count(self) -> int:
        return self._frame_count

    def set_frequency(self, frequency: int) -> None:
        """Set the target frame rate; raises ValueError outside 1..200."""
        if not FPS_LOWER_LIMIT <= frequency <= FPS_UPPER_LIMIT:
            raise ValueError(
                f"frequency must be between {FPS_LOWER_LIMIT} and {FPS_UPPER_LIMIT}, "
                f"got {frequency}"
            )
        self._frame_count = 0
        self._rate = frequency
        self._rate_ticks = 1000.0 / frequency

    def delay(self) -> float:
        """Sleep until the next frame is due; return ms since the previous call."""
        self._frame_count += 1
        now = self._clock()
        passed = now - self._last_ticks
        self._last_ticks = now
        target = self._base_ticks + self._frame_count * self._rate_ticks
        if now <= target:
            self._sleeper(target - now)
        else:
            self._frame_count = 0
            self._base_ticks = self._clock()
        return passed