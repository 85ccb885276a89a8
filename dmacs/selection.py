"""Marking, copying and cutting regions of text.

Positions are ``(x, y)`` pairs where ``x`` is a UTF-8 byte offset into line ``y``.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from dmacs.errors import EditorError

Position = tuple[int, int]


@dataclass
class ActionDiff:
    """An edit between two positions, with the text it removed and inserted."""

    cursor_start_x: int
    cursor_start_y: int
    cursor_end_x: int
    cursor_end_y: int
    start_x: int
    start_y: int
    end_x: int
    end_y: int
    new: list[str] = field(default_factory=list)
    old: list[str] = field(default_factory=list)


def _byte_slice(line: str, start: int, end: int | None = None) -> str:
    data = line.encode("utf-8")
    if end is None:
        end = len(data)
    if not 0 <= start <= end <= len(data):
        raise EditorError(
            f"byte range {start}..{end} out of bounds for line of length {len(data)}"
        )
    try:
        return data[start:end].decode("utf-8")
    except UnicodeDecodeError as exc:
        raise EditorError(
            f"byte range {start}..{end} is not on character boundaries"
        ) from exc


@dataclass
class Selection:
    """The region between a marker and the cursor."""

    marker_pos: Position | None = None

    def set_marker(self, cursor_pos: Position) -> None:
        self.marker_pos = cursor_pos

    def clear_marker(self) -> None:
        self.marker_pos = None

    def is_selection_active(self) -> bool:
        return self.marker_pos is not None

    def selection_range(self, cursor_pos: Position) -> tuple[Position, Position] | None:
        """The ordered ``(start, end)`` of the selection, or None without a marker."""
        marker = self.marker_pos
        if marker is None:
            return None
        if marker[1] < cursor_pos[1] or (
            marker[1] == cursor_pos[1] and marker[0] < cursor_pos[0]
        ):
            return marker, cursor_pos
        return cursor_pos, marker

    def is_selected(self, cursor_pos: Position, row: int, byte_idx: int) -> bool:
        """Whether the character at ``byte_idx`` of line ``row`` lies in the selection."""
        selection = self.selection_range(cursor_pos)
        if selection is None:
            return False
        (start_x, start_y), (end_x, end_y) = selection
        if not start_y <= row <= end_y:
            return False
        if row == start_y and row == end_y:
            return start_x <= byte_idx < end_x
        if row == start_y:
            return byte_idx >= start_x
        if row == end_y:
            return byte_idx < end_x
        return True

    def _pieces(
        self, lines: Sequence[str], start: Position, end: Position
    ) -> list[str]:
        (start_x, start_y), (end_x, end_y) = start, end
        if start_y == end_y:
            return [_byte_slice(lines[start_y], start_x, end_x)]
        return [
            _byte_slice(lines[start_y], start_x),
            *lines[start_y + 1 : end_y],
            _byte_slice(lines[end_y], 0, end_x),
        ]

    def cut_selection(
        self, lines: Sequence[str], cursor_pos: Position
    ) -> tuple[str, ActionDiff | None]:
        """Text of the selection and the diff that removes it; clears the marker.

        The lines themselves are left unchanged; applying the diff is up to the caller.
        """
        selection = self.selection_range(cursor_pos)
        if selection is None:
            return "", None
        start, end = selection
        pieces = self._pieces(lines, start, end)
        self.clear_marker()
        diff = ActionDiff(
            cursor_start_x=end[0],
            cursor_start_y=end[1],
            cursor_end_x=start[0],
            cursor_end_y=start[1],
            start_x=start[0],
            start_y=start[1],
            end_x=end[0],
            end_y=end[1],
            new=[],
            old=pieces,
        )
        return "\n".join(pieces), diff

    def copy_selection(self, lines: Sequence[str], cursor_pos: Position) -> str:
        """Text of the selection; clears the marker."""
        selection = self.selection_range(cursor_pos)
        if selection is None:
            return ""
        text = "\n".join(self._pieces(lines, *selection))
        self.clear_marker()
        return text