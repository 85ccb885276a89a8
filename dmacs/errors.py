"""Exception hierarchy for the editor.

Operating-system failures are reported with the built-in ``OSError`` family.
"""


class DmacsError(Exception):
    """Base class of every error the editor raises itself."""

    label = ""

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        if not self.label:
            return self.message or "Unknown error"
        return f"{self.label} error: {self.message}"


class TerminalError(DmacsError):
    """The terminal could not be set up or read."""

    label = "Terminal"


class EditorError(DmacsError):
    """An editing operation failed."""

    label = "Editor"


class DocumentError(DmacsError):
    """A document could not be loaded, changed or saved."""

    label = "Document"