"""Parsed SVG path commands and the parse modes between them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias, cast

from .constants import METHOD_NAMES, MOVETO_DOWNGRADE, PARAMETER_COUNTS
from .errors import PathGrammarError
from .lexer import Token, TokenKind

if TYPE_CHECKING:
    from .constants import CommandLetter, ValidCommand
    from .visitor import PathVisitor


@dataclass(frozen=True)
class Command:
    """One drawing command with its decoded parameters.

    Attributes:
        letter: The command letter as written, e.g. `M` or `m`.
        params: Exactly as many numbers as the command requires.
    """

    letter: CommandLetter
    params: tuple[float, ...] = ()

    def __post_init__(self) -> None:
        if self.letter not in METHOD_NAMES:
            raise ValueError(f"Invalid command: {self.letter!r}")

        expected = PARAMETER_COUNTS[self.command]
        if len(self.params) != expected:
            raise ValueError(
                f"Command {self.letter!r} takes {expected} parameters, "
                f"got {len(self.params)}"
            )

    @property
    def command(self) -> ValidCommand:
        """The upper case command letter."""
        return cast("ValidCommand", self.letter.upper())

    @property
    def relative(self) -> bool:
        """If the coordinates are relative to the current point."""
        return self.letter.islower()

    @property
    def method_name(self) -> str:
        """Name of the visitor method receiving this command."""
        return METHOD_NAMES[self.letter]

    def accept(self, visitor: PathVisitor) -> None:  # noqa: C901, PLR0912
        """Call the visitor method matching this command."""
        command, rel, params = self.command, self.relative, self.params

        if command == "M":
            (visitor.moveto_rel if rel else visitor.moveto_abs)(*params)
        elif command == "L":
            (visitor.lineto_rel if rel else visitor.lineto_abs)(*params)
        elif command == "H":
            if rel:
                visitor.lineto_horizontal_rel(*params)
            else:
                visitor.lineto_horizontal_abs(*params)
        elif command == "V":
            if rel:
                visitor.lineto_vertical_rel(*params)
            else:
                visitor.lineto_vertical_abs(*params)
        elif command == "C":
            (visitor.curveto_cubic_rel if rel else visitor.curveto_cubic_abs)(*params)
        elif command == "S":
            if rel:
                visitor.curveto_cubic_smooth_rel(*params)
            else:
                visitor.curveto_cubic_smooth_abs(*params)
        elif command == "Q":
            if rel:
                visitor.curveto_quadratic_rel(*params)
            else:
                visitor.curveto_quadratic_abs(*params)
        elif command == "T":
            if rel:
                visitor.curveto_quadratic_smooth_rel(*params)
            else:
                visitor.curveto_quadratic_smooth_abs(*params)
        elif command == "A":
            (visitor.arc_rel if rel else visitor.arc_abs)(*params)
        else:
            visitor.close_path()


@dataclass(frozen=True)
class AwaitingFirstCommand:
    """Parse mode at the beginning of a path, before any command."""


@dataclass(frozen=True)
class ActiveCommand:
    """Parse mode while a command is active.

    Attributes:
        letter: The command applied to the following parameter groups.
    """

    letter: CommandLetter

    @property
    def parameter_count(self) -> int:
        """Numbers consumed by one repetition of the command."""
        return PARAMETER_COUNTS[self.letter.upper()]


ParseMode: TypeAlias = AwaitingFirstCommand | ActiveCommand

BEGINNING_OF_PATH = AwaitingFirstCommand()
"""The parse mode every path starts in."""


def _must_begin_with_moveto(token: Token, path_data: str | None) -> PathGrammarError:
    return PathGrammarError(
        "a path must begin with a moveto command", path_data, token.position
    )


def enter_command(
    mode: ParseMode, token: Token, path_data: str | None = None
) -> ActiveCommand:
    """Switch to the command of a command token.

    Raises:
        PathGrammarError: If the path does not begin with a moveto command.
    """
    if not token.typeis(TokenKind.COMMAND):
        raise PathGrammarError(
            f"expected a command, got {token.kind.value}", path_data, token.position
        )

    if isinstance(mode, AwaitingFirstCommand) and token.text not in MOVETO_DOWNGRADE:
        raise _must_begin_with_moveto(token, path_data)

    return ActiveCommand(cast("CommandLetter", token.text))


def continue_command(
    mode: ParseMode, token: Token, path_data: str | None = None
) -> ActiveCommand:
    """Repeat the active command for a number without a command letter.

    Raises:
        PathGrammarError: If no command is active yet or the active command
            takes no parameters.
    """
    if isinstance(mode, AwaitingFirstCommand):
        raise _must_begin_with_moveto(token, path_data)

    if mode.parameter_count == 0:
        # a number can never follow a closepath
        raise PathGrammarError(
            f"{mode.letter!r} takes no parameters, got number: {token.text}",
            path_data,
            token.position,
        )

    return mode


def after_parameters(mode: ActiveCommand) -> ActiveCommand:
    """Turn a moveto into a lineto once its parameters are consumed.

    Examples:
        >>> after_parameters(ActiveCommand("m"))
        ActiveCommand(letter='l')
        >>> after_parameters(ActiveCommand("C"))
        ActiveCommand(letter='C')
    """
    if lineto := MOVETO_DOWNGRADE.get(mode.letter):
        return ActiveCommand(cast("CommandLetter", lineto))

    return mode
