"""Editing logic for a small Emacs-flavoured text editor: movement, search, selection, keys and saved positions."""

__version__ = "0.1.0"

__all__ = [
    "command",
    "display",
    "errors",
    "keys",
    "persistence",
    "scroll",
    "search",
    "selection",
]