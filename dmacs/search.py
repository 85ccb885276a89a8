"""Incremental search over lines of text.

Matches are stored as ``(row, byte_col)``; methods that move the cursor return
the new cursor position as ``(x, y)``.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

Position = tuple[int, int]

_EXIT_KEYS = ("\x1b", "\n", "\r")
_NEXT_KEYS = ("\x13", "\x0e")
_PREV_KEY = "\x12"
_BACKSPACE_KEYS = ("\x7f", "\x08")


def _match_offsets(line: str, query: str) -> Iterator[int]:
    """Byte offsets of the non-overlapping occurrences of ``query`` in ``line``."""
    start = 0
    while (index := line.find(query, start)) != -1:
        yield len(line[:index].encode("utf-8"))
        start = index + len(query)


@dataclass
class Search:
    """State of an incremental search."""

    mode: bool = False
    query: str = ""
    results: list[tuple[int, int]] = field(default_factory=list)
    current_match_index: int | None = None

    def _reset(self) -> None:
        self.query = ""
        self.results = []
        self.current_match_index = None

    def enter(self) -> None:
        self.mode = True
        self._reset()

    def exit(self) -> None:
        self.mode = False
        self._reset()

    def find(self, lines: Sequence[str], cursor_pos: Position) -> Position | None:
        """Collect matches and select the first at or after the cursor, wrapping."""
        self.results = []
        self.current_match_index = None
        if not self.query:
            return None
        self.results = [
            (row, col)
            for row, line in enumerate(lines)
            for col in _match_offsets(line, self.query)
        ]
        if not self.results:
            return None
        x, y = cursor_pos
        self.current_match_index = next(
            (
                i
                for i, (row, col) in enumerate(self.results)
                if row > y or (row == y and col >= x)
            ),
            0,
        )
        return self.current_match()

    def current_match(self) -> Position | None:
        """Cursor position of the selected match."""
        index = self.current_match_index
        if index is None or not 0 <= index < len(self.results):
            return None
        row, col = self.results[index]
        return col, row

    def next_match(self) -> Position | None:
        if not self.results:
            return None
        index = self.current_match_index
        self.current_match_index = 0 if index is None else (index + 1) % len(self.results)
        return self.current_match()

    def prev_match(self) -> Position | None:
        if not self.results:
            return None
        index = self.current_match_index
        self.current_match_index = (
            len(self.results) - 1 if index is None or index == 0 else index - 1
        )
        return self.current_match()

    def handle_char(
        self, char: str, lines: Sequence[str], cursor_pos: Position
    ) -> Position | None:
        """Apply a typed character; return where the cursor should move, if anywhere."""
        if char in _EXIT_KEYS:
            self.exit()
            return None
        if char in _NEXT_KEYS:
            return self.next_match()
        if char == _PREV_KEY:
            return self.prev_match()
        if char in _BACKSPACE_KEYS:
            self.query = self.query[:-1]
        else:
            self.query += char
        return self.find(lines, cursor_pos)

    def status_text(self) -> str:
        """Status bar text while searching; empty outside search mode."""
        if not self.mode:
            return ""
        suffix = " (No match)" if self.query and not self.results else ""
        return f"Search: {self.query}{suffix}"