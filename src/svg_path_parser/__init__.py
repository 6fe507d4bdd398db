"""Parse SVG path data into commands dispatched to a visitor."""

from __future__ import annotations

from .commands import Command
from .errors import PathDataError, PathDataTypeError, PathGrammarError, PathLexerError
from .lexer import PathLexer, Token, TokenKind, tokenize
from .parser import PathParser, iter_path_commands, parse_path_data
from .utils import parse_svg_paths
from .visitor import PathVisitor, RecordingVisitor

__all__ = [
    "Command",
    "PathDataError",
    "PathDataTypeError",
    "PathGrammarError",
    "PathLexer",
    "PathLexerError",
    "PathParser",
    "PathVisitor",
    "RecordingVisitor",
    "Token",
    "TokenKind",
    "iter_path_commands",
    "parse_path_data",
    "parse_svg_paths",
    "tokenize",
]
