"""Slash commands that expand into text."""

from __future__ import annotations

import datetime


def execute_command(line: str) -> str | None:
    """Return the expansion of a slash command line, or None if it is not one."""
    if not line.startswith("/"):
        return None
    command = line.strip()
    now = datetime.datetime.now()
    if command == "/today":
        return now.strftime("%Y-%m-%d")
    if command == "/now":
        return now.strftime("%Y-%m-%d %H:%M")
    return None