"""Decoding terminal key input and guarding against accidental quits."""

from __future__ import annotations

import threading
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

ESCAPE = "\x1b"
QUIT_PROMPT = "Press Ctrl+C again to quit."
CLEAR_MESSAGE_DELAY = 2.0


class Key(Enum):
    """Keys that are not plain characters."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    BACKSPACE = "backspace"
    RESIZE = "resize"


Input = Key | str


@dataclass(frozen=True)
class KeyEvent:
    """A key press; ``alt`` is set when it came with Alt/Meta."""

    key: Input
    alt: bool = False


_CSI_ARROWS = {"A": Key.UP, "B": Key.DOWN}
_ARROWS = frozenset({Key.LEFT, Key.RIGHT, Key.UP, Key.DOWN})


def decode_key(first: Input, read_next: Callable[[], Input | None]) -> KeyEvent:
    """Turn raw input into a key event, reading more input after an escape.

    ``read_next`` returns the next pending input, or None if there is none.
    A terminal resize is reported as ``KeyEvent(Key.RESIZE)``.
    """
    if first != ESCAPE:
        return KeyEvent(first)

    following = read_next()
    if following == "[":
        third = read_next()
        arrow = _CSI_ARROWS.get(third) if isinstance(third, str) else None
        return KeyEvent(arrow, True) if arrow else KeyEvent(ESCAPE)
    if following in _ARROWS:
        return KeyEvent(following, True)
    if following == "\x7f" or following is Key.BACKSPACE:
        return KeyEvent(Key.BACKSPACE, True)
    if isinstance(following, str):
        return KeyEvent(following, True)
    return KeyEvent(ESCAPE)


class QuitGuard:
    """Counts interrupt presses: the first asks for confirmation, the second quits."""

    def __init__(self) -> None:
        self._count = 0
        self._lock = threading.Lock()

    @property
    def count(self) -> int:
        with self._lock:
            return self._count

    def press(self) -> bool:
        """Record an interrupt; True when the editor should quit."""
        with self._lock:
            self._count += 1
            return self._count >= 2

    def reset(self) -> None:
        """Forget earlier interrupts, as after any key press."""
        with self._lock:
            self._count = 0