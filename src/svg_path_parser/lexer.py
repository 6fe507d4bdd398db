"""Split SVG path data into command and number tokens."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from .constants import COMMAND_PATTERN, NUMBER_PATTERN, SEPARATOR_PATTERN
from .errors import PathLexerError

if TYPE_CHECKING:
    from collections.abc import Iterator


class TokenKind(Enum):
    """Lexical category of a token."""

    COMMAND = "command"
    NUMBER = "number"
    EOD = "end of data"


@dataclass(frozen=True)
class Token:
    """A single token of SVG path data.

    Attributes:
        kind: The lexical category.
        text: The matched text, empty for the end of data.
        position: Character offset of the token in the path data.
    """

    kind: TokenKind
    text: str
    position: int

    def typeis(self, kind: TokenKind) -> bool:
        """Check if the token is of the given kind."""
        return self.kind is kind


class PathLexer:
    """Forward-only scanner over a single path data string.

    Examples:
        >>> [t.text for t in PathLexer("M10-5.5.5z")]
        ['M', '10', '-5.5', '.5', 'z', '']
    """

    def __init__(self, path_data: str = "") -> None:
        """Initialize the lexer.

        Args:
            path_data: The path data to scan.
        """
        self.set_path_data(path_data)

    def set_path_data(self, path_data: str) -> None:
        """Restart the lexer on new path data."""
        self.path_data = path_data
        self._position = 0

    @property
    def position(self) -> int:
        """Offset of the next character to scan."""
        return self._position

    def get_next_token(self) -> Token:
        """Scan the next token.

        Separators are skipped. Once the end of the data is reached, every
        call returns the `EOD` token again.

        Raises:
            PathLexerError: If the next character starts no valid token.
        """
        data = self.path_data

        if match := SEPARATOR_PATTERN.match(data, self._position):
            self._position = match.end()

        start = self._position
        if start >= len(data):
            return Token(TokenKind.EOD, "", len(data))

        if match := COMMAND_PATTERN.match(data, start):
            kind = TokenKind.COMMAND
        elif match := NUMBER_PATTERN.match(data, start):
            kind = TokenKind.NUMBER
        else:
            raise PathLexerError(data[start], data, start)

        self._position = match.end()
        return Token(kind, match.group(), start)

    def __iter__(self) -> Iterator[Token]:
        """Yield the remaining tokens, including the final `EOD` token."""
        while True:
            token = self.get_next_token()
            yield token
            if token.typeis(TokenKind.EOD):
                return


def tokenize(path_data: str) -> Iterator[Token]:
    """Lazily tokenize path data.

    Args:
        path_data: The path data to scan.

    Returns:
        An iterator over the tokens, ending with a single `EOD` token.
    """
    return iter(PathLexer(path_data))
