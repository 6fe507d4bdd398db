"""Parse SVG path data and dispatch each command to a visitor."""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING, cast

from .commands import (
    BEGINNING_OF_PATH,
    ActiveCommand,
    Command,
    after_parameters,
    continue_command,
    enter_command,
)
from .constants import (
    DEFAULT_NUMERIC_MODE,
    NUMERIC_MODE_ENV,
    NUMERIC_MODES,
    NumericMode,
)
from .errors import PathDataTypeError, PathGrammarError
from .lexer import PathLexer, Token, TokenKind

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from .commands import ParseMode
    from .visitor import PathVisitor

logger = logging.getLogger(__name__)


def resolve_numeric_mode(numeric_mode: str | None = None) -> NumericMode:
    """Pick the numeric mode from the argument, the environment or the default.

    Raises:
        ValueError: If the mode is not one of `float` or `int`.
    """
    if numeric_mode is None:
        numeric_mode = os.environ.get(NUMERIC_MODE_ENV) or DEFAULT_NUMERIC_MODE

    if numeric_mode not in NUMERIC_MODES:
        raise ValueError(
            f"Invalid numeric mode {numeric_mode!r}, "
            f"expected one of {sorted(NUMERIC_MODES)}"
        )

    return cast("NumericMode", numeric_mode)


def _truncate(text: str) -> float:
    """Decode a number and drop its fractional part."""
    return int(float(text))


class PathParser:
    """Parser for the `d` attribute of SVG path elements.

    A parser owns one lexer and one handler. Use separate instances to parse
    from several threads.
    """

    def __init__(
        self,
        handler: PathVisitor | None = None,
        *,
        numeric_mode: NumericMode | None = None,
    ) -> None:
        """Initialize the parser.

        Args:
            handler: The visitor receiving the parsed commands.
            numeric_mode: `float` decodes numbers as floats. `int` truncates
                them toward zero for compatibility with integer-only
                consumers. Defaults to `$SVG_PATH_PARSER_NUMERIC_MODE` or
                `float`.
        """
        self._lexer = PathLexer()
        self._handler = handler
        self.numeric_mode = resolve_numeric_mode(numeric_mode)
        self._decode: Callable[[str], float] = (
            float if self.numeric_mode == "float" else _truncate
        )

    @property
    def handler(self) -> PathVisitor | None:
        """The attached visitor or None."""
        return self._handler

    def set_handler(self, handler: PathVisitor | None) -> None:
        """Attach a visitor, or detach it with None."""
        self._handler = handler

    def parse_data(self, path_data: str) -> None:
        """Parse path data and call the handler for every command.

        Each command is dispatched as soon as its parameters are read.
        Without a handler the path data is only validated.

        Raises:
            PathDataTypeError: If the path data is not a string.
            PathLexerError: If the path data contains an invalid token.
            PathGrammarError: If the tokens are in an invalid order.
        """
        if not isinstance(path_data, str):
            raise PathDataTypeError(path_data)

        handler = self._handler
        if handler is not None:
            handler.begin_parse()

        logger.debug("Parsing path data of length %d", len(path_data))

        count = 0
        for command in self.iter_commands(path_data):
            if handler is not None:
                command.accept(handler)
            count += 1

        logger.debug("Parsed %d commands", count)

    def iter_commands(self, path_data: str) -> Iterator[Command]:
        """Lazily parse path data into commands.

        Implicit repetitions are yielded as separate commands, and the
        coordinate pairs after a moveto as linetos.

        Examples:
            >>> [c.letter for c in PathParser().iter_commands("m1 2 3 4 z")]
            ['m', 'l', 'z']
        """
        if not isinstance(path_data, str):
            raise PathDataTypeError(path_data)

        lexer = self._lexer
        lexer.set_path_data(path_data)

        mode: ParseMode = BEGINNING_OF_PATH
        token = lexer.get_next_token()

        while not token.typeis(TokenKind.EOD):
            if token.typeis(TokenKind.COMMAND):
                mode = enter_command(mode, token, path_data)
                token = lexer.get_next_token()
            elif token.typeis(TokenKind.NUMBER):
                # repeat the active command without a new command letter
                mode = continue_command(mode, token, path_data)
            else:
                raise self._unexpected(token, path_data)

            params, token = self._read_parameters(mode, token, path_data)
            yield Command(mode.letter, params)

            mode = after_parameters(mode)

    def _read_parameters(
        self, mode: ActiveCommand, token: Token, path_data: str
    ) -> tuple[tuple[float, ...], Token]:
        """Read the parameters of one command starting at `token`.

        Returns:
            The decoded parameters and the first token after them.
        """
        params: list[float] = []

        for _ in range(mode.parameter_count):
            if token.typeis(TokenKind.COMMAND):
                raise PathGrammarError(
                    f"parameter must be a number: {token.text}",
                    path_data,
                    token.position,
                )

            if token.typeis(TokenKind.EOD):
                raise PathGrammarError(
                    f"unexpected end of path data: {mode.letter!r} requires "
                    f"{mode.parameter_count} parameters, got {len(params)}",
                    path_data,
                    token.position,
                )

            if not token.typeis(TokenKind.NUMBER):
                raise self._unexpected(token, path_data)

            try:
                params.append(self._decode(token.text))
            except OverflowError as error:
                # only the `int` mode overflows, on literals such as 1e400
                raise PathGrammarError(
                    f"number out of range: {token.text}", path_data, token.position
                ) from error

            token = self._lexer.get_next_token()

        return tuple(params), token

    @staticmethod
    def _unexpected(token: Token, path_data: str) -> PathGrammarError:
        return PathGrammarError(
            f"unrecognized token type: {token.kind.value}", path_data, token.position
        )


def parse_path_data(
    path_data: str,
    visitor: PathVisitor | None = None,
    *,
    numeric_mode: NumericMode | None = None,
) -> None:
    """Parse path data with a new parser and dispatch to the visitor.

    Args:
        path_data: The path string, e.g. `"M 10 10 L 20 20 Z"`.
        visitor: The visitor receiving the commands.
        numeric_mode: See :class:`PathParser`.
    """
    PathParser(visitor, numeric_mode=numeric_mode).parse_data(path_data)


def iter_path_commands(
    path_data: str, *, numeric_mode: NumericMode | None = None
) -> Iterator[Command]:
    """Lazily parse path data into commands with a new parser.

    Example:
        >>> list(iter_path_commands("M 10 10 L 20 20 Z"))
        [Command(letter='M', params=(10.0, 10.0)), Command(letter='L', params=(20.0, 20.0)), Command(letter='Z', params=())]
    """  # noqa: E501
    return PathParser(numeric_mode=numeric_mode).iter_commands(path_data)
