"""Remembering cursor and scroll positions per file between sessions."""

from __future__ import annotations

import hashlib
import json
import logging
import time
from dataclasses import dataclass
from pathlib import Path

log = logging.getLogger(__name__)

CONFIG_DIR_NAME = ".dmacs"
CURSOR_POSITIONS_SUBDIR = "cursor_positions"
CLEANUP_THRESHOLD_DAYS = 3

_NANOS_PER_SECOND = 1_000_000_000


@dataclass
class CursorPosition:
    """Saved position of the cursor in a file.

    ``last_modified`` is the file's modification time in nanoseconds since the epoch.
    """

    file_path: str
    last_modified: int
    cursor_x: int = 0
    cursor_y: int = 0
    scroll_row_offset: int = 0
    scroll_col_offset: int = 0

    def to_json(self) -> str:
        secs, nanos = divmod(self.last_modified, _NANOS_PER_SECOND)
        data = {
            "file_path": self.file_path,
            "last_modified": {"secs_since_epoch": secs, "nanos_since_epoch": nanos},
            "cursor_x": self.cursor_x,
            "cursor_y": self.cursor_y,
            "scroll_row_offset": self.scroll_row_offset,
            "scroll_col_offset": self.scroll_col_offset,
        }
        return json.dumps(data, indent=2)

    @classmethod
    def from_json(cls, text: str) -> CursorPosition:
        """Parse a record; raises ValueError if it is malformed."""
        data = json.loads(text)
        try:
            stamp = data["last_modified"]
            last_modified = (
                int(stamp["secs_since_epoch"]) * _NANOS_PER_SECOND
                + int(stamp["nanos_since_epoch"])
            )
            return cls(
                file_path=str(data["file_path"]),
                last_modified=last_modified,
                cursor_x=int(data["cursor_x"]),
                cursor_y=int(data["cursor_y"]),
                scroll_row_offset=int(data["scroll_row_offset"]),
                scroll_col_offset=int(data["scroll_col_offset"]),
            )
        except (KeyError, TypeError) as exc:
            raise ValueError(f"invalid cursor position record: {exc}") from exc


def _home_dir(home: str | Path | None) -> Path:
    if home is not None:
        return Path(home)
    try:
        return Path.home()
    except RuntimeError as exc:
        raise FileNotFoundError("Home directory not found") from exc


def _cursor_pos_dir(home: str | Path | None) -> Path:
    directory = _home_dir(home) / CONFIG_DIR_NAME / CURSOR_POSITIONS_SUBDIR
    directory.mkdir(parents=True, exist_ok=True)
    return directory


def cursor_position_file(file_path: str, home: str | Path | None = None) -> Path:
    """Path of the record kept for ``file_path``, creating its directory."""
    digest = hashlib.sha256(file_path.encode("utf-8")).hexdigest()
    return _cursor_pos_dir(home) / f"{digest}.json"


def save_cursor_position(pos: CursorPosition, home: str | Path | None = None) -> None:
    """Write the record for ``pos.file_path``; raises OSError on failure."""
    log.debug("Attempting to save cursor position for file: %s", pos.file_path)
    record = cursor_position_file(pos.file_path, home)
    record.write_text(pos.to_json(), encoding="utf-8")
    log.debug("Saved cursor position for %s to %s.", pos.file_path, record)


def load_cursor_position(
    file_path: str, home: str | Path | None = None
) -> CursorPosition | None:
    """Read the record for ``file_path``; None if missing or unreadable."""
    try:
        record = cursor_position_file(file_path, home)
    except OSError as exc:
        log.error("Failed to get cursor position file path for %s: %s", file_path, exc)
        return None

    if not record.exists():
        log.debug("Cursor position file not found at %s.", record)
        return None

    try:
        content = record.read_text(encoding="utf-8")
    except OSError as exc:
        log.error("Failed to read cursor position file %s: %s", record, exc)
        return None
    try:
        position = CursorPosition.from_json(content)
    except ValueError as exc:
        log.error("Failed to deserialize cursor position from %s: %s", record, exc)
        return None
    log.debug("Successfully loaded cursor position for %s.", file_path)
    return position


def get_cursor_position(
    file_path: str, last_modified: int, home: str | Path | None = None
) -> tuple[int, int, int, int] | None:
    """Return (cursor_x, cursor_y, scroll_row, scroll_col) if the file is unchanged."""
    pos = load_cursor_position(file_path, home)
    if pos is None:
        log.debug("No record found for %s.", file_path)
        return None
    if pos.last_modified != last_modified:
        log.debug("Last modified date for %s has changed.", file_path)
        return None
    return (pos.cursor_x, pos.cursor_y, pos.scroll_row_offset, pos.scroll_col_offset)


def cleanup_old_cursor_position_files(home: str | Path | None = None) -> None:
    """Delete records not modified within the last few days."""
    try:
        directory = _cursor_pos_dir(home)
    except OSError as exc:
        log.error("Failed to get cursor positions directory for cleanup: %s", exc)
        return

    threshold = time.time_ns() - CLEANUP_THRESHOLD_DAYS * 24 * 60 * 60 * _NANOS_PER_SECOND
    try:
        entries = list(directory.iterdir())
    except OSError as exc:
        log.error("Failed to read cursor positions directory %s: %s", directory, exc)
        return

    for path in entries:
        if not path.is_file():
            continue
        try:
            modified = path.stat().st_mtime_ns
        except OSError as exc:
            log.error("Failed to get metadata for %s: %s", path, exc)
            continue
        if modified < threshold:
            try:
                path.unlink()
                log.debug("Deleted old cursor position file: %s", path)
            except OSError as exc:
                log.error("Failed to delete old cursor position file %s: %s", path, exc)