"""Tracking of which keyboard keys are currently held down."""

from __future__ import annotations

from dataclasses import dataclass, field

MAX_KEYS = 323


class KeyCodeError(IndexError):
    """Raised when a key code lies outside the tracked range."""


@dataclass
class KeyState:
    """The set of held keys; ``max_keys=None`` accepts any non-negative code."""

    max_keys: int | None = MAX_KEYS
    _held: set[int] = field(default_factory=set, init=False, repr=False)

    def _check(self, keycode: int) -> None:
        if keycode < 0 or (self.max_keys is not None and keycode >= self.max_keys):
            raise KeyCodeError(f"Keycode {keycode} is out of range.")

    def press(self, keycode: int) -> None:
        """Mark ``keycode`` as held."""
        self._check(keycode)
        self._held.add(keycode)

    def release(self, keycode: int) -> None:
        """Mark ``keycode`` as released."""
        self._check(keycode)
        self._held.discard(keycode)

    def is_held(self, keycode: int) -> bool:
        """Return True if ``keycode`` is currently held."""
        self._check(keycode)
        return keycode in self._held

    def reset(self) -> None:
        """Release every key."""
        self._held.clear()