"""Load error types for the style document and token palette."""

from typing import Optional


class DocumentLoadError(Exception):
    """Raised when the style document is missing, unreadable, or not a JSON object."""

    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None):
        self.line = line
        self.column = column
        super().__init__(message)


class TokenPaletteLoadError(Exception):
    """Raised when the token palette is missing, unreadable, or not a JSON object."""
    pass
