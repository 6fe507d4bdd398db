"""Exceptions raised while reading SVG path data.

Every error aborts the current parse. The classes also derive from the
matching built-in exception, so code catching `TypeError` or `ValueError`
keeps working.
"""

from __future__ import annotations


class PathDataError(Exception):
    """Base exception for all SVG path data errors."""

    def __init__(
        self, message: str, path_data: str | None = None, position: int | None = None
    ) -> None:
        """Initialize the exception.

        Args:
            message: What went wrong.
            path_data: The path data that was parsed, if known.
            position: Character offset of the offending text, if known.
        """
        self.message = message
        self.path_data = path_data
        self.position = position
        super().__init__(self._format())

    def _format(self) -> str:
        if self.position is None:
            return self.message
        return f"{self.message} (at position {self.position})"


class PathDataTypeError(PathDataError, TypeError):
    """Raised when the path data is not a string."""

    def __init__(self, value: object) -> None:
        """Initialize the exception.

        Args:
            value: The object passed instead of a string.
        """
        self.value = value
        super().__init__(
            f"path data must be a string, not {type(value).__name__}"
        )


class PathLexerError(PathDataError, ValueError):
    """Raised when the path data contains text that is not a valid token."""

    def __init__(self, text: str, path_data: str, position: int) -> None:
        """Initialize the exception.

        Args:
            text: The unrecognized text.
            path_data: The path data that was scanned.
            position: Character offset of the unrecognized text.
        """
        self.text = text
        super().__init__(f"unrecognized path data: {text!r}", path_data, position)


class PathGrammarError(PathDataError, ValueError):
    """Raised when valid tokens appear in an invalid order."""
