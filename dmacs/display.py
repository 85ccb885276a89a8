"""How lines and the status bar are presented on screen."""

from __future__ import annotations

from enum import Enum

from wcwidth import wcwidth


class LineStyle(Enum):
    """Presentation of a line of text."""

    PLAIN = "plain"
    SEPARATOR = "separator"
    COMMENT = "comment"
    CHECKED = "checked"
    UNCHECKED = "unchecked"

    @property
    def dim(self) -> bool:
        return self in (LineStyle.COMMENT, LineStyle.CHECKED)

    @property
    def bold(self) -> bool:
        return self is LineStyle.UNCHECKED


def is_separator_line(line: str) -> bool:
    return line == "---"


def is_unchecked_checkbox(line: str) -> bool:
    return line.lstrip().startswith("- [ ]")


def is_checked_checkbox(line: str) -> bool:
    return line.lstrip().startswith("- [x]")


def line_style(line: str) -> LineStyle:
    """Classify a line for drawing."""
    if is_separator_line(line):
        return LineStyle.SEPARATOR
    if line.lstrip().startswith("#"):
        return LineStyle.COMMENT
    if is_checked_checkbox(line):
        return LineStyle.CHECKED
    if is_unchecked_checkbox(line):
        return LineStyle.UNCHECKED
    return LineStyle.PLAIN


def _width(text: str) -> int:
    return sum(max(wcwidth(ch), 0) for ch in text)


def _clip(text: str, columns: int) -> str:
    """Longest prefix of ``text`` fitting in ``columns``, padded to fill them."""
    used = 0
    kept = []
    for ch in text:
        w = max(wcwidth(ch), 0)
        if used + w > columns:
            break
        kept.append(ch)
        used += w
    return "".join(kept) + " " * (columns - used) if used < columns and kept != list(text) else "".join(kept)


def status_bar(
    filename: str | None, is_dirty: bool, line_count: int, message: str, width: int
) -> str:
    """Top status line: file name, dirty mark, line count and a right-aligned message."""
    left = f"{filename or '[No Name]'}{'*' if is_dirty else ''} - {line_count} lines"
    if not message:
        return _clip(left, width) if _width(left) > width else left
    start = max(width - _width(message), 0)
    left_width = _width(left)
    if start >= left_width:
        text = left + " " * (start - left_width) + message
    else:
        text = _clip(left, start) + message
    return _clip(text, width) if _width(text) > width else text