"""Cursor movement and viewport scrolling over lines of text.

Cursor columns are UTF-8 byte offsets into the line; display columns take tab
stops and wide characters into account.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from wcwidth import wcwidth

TAB_STOP = 4
STATUS_BAR_HEIGHT = 2


def _char_width(ch: str) -> int:
    return max(wcwidth(ch), 0)


def _byte_len(text: str) -> int:
    return len(text.encode("utf-8"))


def _char_offsets(line: str) -> Iterator[int]:
    """Byte offsets of every character start, then the end of the line."""
    offset = 0
    for ch in line:
        yield offset
        offset += _byte_len(ch)
    yield offset


def _advance(width: int, ch: str) -> int:
    if ch == "\t":
        return width + TAB_STOP - width % TAB_STOP
    return width + _char_width(ch)


def display_width(line: str, until_byte: int) -> int:
    """Display columns taken by the part of ``line`` before ``until_byte``."""
    width = 0
    consumed = 0
    for ch in line:
        if consumed >= until_byte:
            break
        width = _advance(width, ch)
        consumed += _byte_len(ch)
    return width


def byte_pos_from_display_width(line: str, display_x: int) -> int:
    """Byte offset of the character that starts at or before ``display_x``."""
    current = 0
    byte_pos = 0
    for ch in line:
        if current >= display_x:
            break
        current = _advance(current, ch)
        if current > display_x:
            break
        byte_pos += _byte_len(ch)
    return byte_pos


@dataclass
class Cursor:
    """Cursor location; ``desired_x`` is the display column kept across rows."""

    x: int = 0
    y: int = 0
    desired_x: int = 0
    last_action_was_kill: bool = False


@dataclass
class Scroll:
    """Viewport offsets and screen size."""

    row_offset: int = 0
    col_offset: int = 0
    screen_rows: int = 0
    screen_cols: int = 0

    def update_screen_size(self, screen_rows: int, screen_cols: int) -> None:
        self.screen_rows = screen_rows
        self.screen_cols = screen_cols

    def _page_height(self) -> int:
        return max(self.screen_rows - STATUS_BAR_HEIGHT, 1)

    def clamp_cursor_x(self, cursor: Cursor, lines: Sequence[str]) -> None:
        if cursor.y >= len(lines):
            cursor.x = 0
            return
        cursor.x = min(cursor.x, _byte_len(lines[cursor.y]))

    def scroll_page_down(self, cursor: Cursor, lines: Sequence[str]) -> None:
        cursor.last_action_was_kill = False
        self.row_offset = min(self.row_offset + self._page_height(), max(len(lines) - 1, 0))
        cursor.y = self.row_offset
        self.clamp_cursor_x(cursor, lines)

    def scroll_page_up(self, cursor: Cursor, lines: Sequence[str]) -> None:
        cursor.last_action_was_kill = False
        self.row_offset = max(self.row_offset - self._page_height(), 0)
        cursor.y = self.row_offset
        self.clamp_cursor_x(cursor, lines)

    def go_to_start_of_file(self, cursor: Cursor) -> None:
        cursor.last_action_was_kill = False
        cursor.x = cursor.y = cursor.desired_x = 0
        self.row_offset = 0
        self.col_offset = 0

    def go_to_end_of_file(self, cursor: Cursor, lines: Sequence[str]) -> None:
        cursor.last_action_was_kill = False
        cursor.y = max(len(lines) - 1, 0)
        line = lines[cursor.y]
        cursor.x = display_width(line, _byte_len(line))
        cursor.desired_x = cursor.x
        screen_height = max(self.screen_rows - 1, 0)
        if cursor.y >= self.row_offset + screen_height:
            self.row_offset = max(cursor.y - screen_height, 0) + 1
        self.clamp_cursor_x(cursor, lines)

    def move_cursor_up(self, cursor: Cursor, lines: Sequence[str]) -> None:
        cursor.last_action_was_kill = False
        if cursor.y > 0:
            cursor.y -= 1
            cursor.x = byte_pos_from_display_width(lines[cursor.y], cursor.desired_x)
        else:
            cursor.x = 0
            cursor.desired_x = 0

    def move_cursor_down(self, cursor: Cursor, lines: Sequence[str]) -> None:
        cursor.last_action_was_kill = False
        if cursor.y < max(len(lines) - 1, 0):
            cursor.y += 1
            cursor.x = byte_pos_from_display_width(lines[cursor.y], cursor.desired_x)
        else:
            line = lines[cursor.y]
            cursor.x = _byte_len(line)
            cursor.desired_x = display_width(line, cursor.x)

    def move_cursor_left(self, cursor: Cursor, lines: Sequence[str]) -> None:
        cursor.last_action_was_kill = False
        line = lines[cursor.y]
        if cursor.x > 0:
            cursor.x = max(o for o in _char_offsets(line) if o < cursor.x)
            cursor.desired_x = display_width(line, cursor.x)
        elif cursor.y > 0:
            cursor.y -= 1
            previous = lines[cursor.y]
            cursor.x = _byte_len(previous)
            cursor.desired_x = display_width(previous, cursor.x)

    def move_cursor_right(self, cursor: Cursor, lines: Sequence[str]) -> None:
        cursor.last_action_was_kill = False
        line = lines[cursor.y]
        if cursor.x < _byte_len(line):
            cursor.x = next(o for o in _char_offsets(line) if o > cursor.x)
            cursor.desired_x = display_width(line, cursor.x)
        elif cursor.y < max(len(lines) - 1, 0):
            cursor.y += 1
            cursor.x = 0
            cursor.desired_x = 0

    def follow_cursor(self, cursor: Cursor, lines: Sequence[str]) -> None:
        """Adjust the offsets so that the cursor is inside the visible area."""
        visible_height = max(self.screen_rows - STATUS_BAR_HEIGHT, 0)
        if cursor.y < self.row_offset:
            self.row_offset = cursor.y
        if cursor.y >= self.row_offset + visible_height:
            self.row_offset = cursor.y - visible_height + 1

        column = display_width(lines[cursor.y], cursor.x)
        if column < self.col_offset:
            self.col_offset = column
        if column >= self.col_offset + self.screen_cols:
            self.col_offset = max(column - self.screen_cols, 0) + 1