"""Constants for the SVG path data parser."""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Literal, TypeAlias

COMMANDS = r"MmLlHhVvCcSsQqTtAaZz"
"""A string containing all the valid SVG path commands."""

ValidCommand: TypeAlias = Literal["M", "L", "H", "V", "C", "S", "Q", "T", "A", "Z"]
"""A type alias for the valid upper case SVG path commands."""

CommandLetter: TypeAlias = Literal[
    "M", "m", "L", "l", "H", "h", "V", "v", "C", "c",
    "S", "s", "Q", "q", "T", "t", "A", "a", "Z", "z",
]  # fmt: skip
"""A type alias for both the absolute and the relative SVG path commands."""

PARAMETER_COUNTS: MappingProxyType[str, int] = MappingProxyType(
    {
        "A": 7,
        "C": 6,
        "H": 1,
        "L": 2,
        "M": 2,
        "Q": 4,
        "S": 4,
        "T": 2,
        "V": 1,
        "Z": 0,
    }
)
"""The number of values consumed by each repetition of a SVG path command."""

METHOD_NAMES: MappingProxyType[str, str] = MappingProxyType(
    {
        "A": "arc_abs",
        "a": "arc_rel",
        "C": "curveto_cubic_abs",
        "c": "curveto_cubic_rel",
        "H": "lineto_horizontal_abs",
        "h": "lineto_horizontal_rel",
        "L": "lineto_abs",
        "l": "lineto_rel",
        "M": "moveto_abs",
        "m": "moveto_rel",
        "Q": "curveto_quadratic_abs",
        "q": "curveto_quadratic_rel",
        "S": "curveto_cubic_smooth_abs",
        "s": "curveto_cubic_smooth_rel",
        "T": "curveto_quadratic_smooth_abs",
        "t": "curveto_quadratic_smooth_rel",
        "V": "lineto_vertical_abs",
        "v": "lineto_vertical_rel",
        "Z": "close_path",
        "z": "close_path",
    }
)
"""The visitor method called for each SVG path command."""

MOVETO_DOWNGRADE: MappingProxyType[str, str] = MappingProxyType({"M": "L", "m": "l"})
"""Coordinate pairs following a moveto are treated as implicit linetos."""

SEPARATOR_PATTERN = re.compile(r"[ \t\r\n\f,]+")
"""A regex pattern to match whitespace and commas between tokens."""

COMMAND_PATTERN = re.compile(r"[" + COMMANDS + r"]")
"""A regex pattern to match a single SVG path command."""

NUMBER_PATTERN = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
"""A regex pattern to match a number, e.g. `10`, `-.5`, `1.`, `2.5e-3`."""

NumericMode: TypeAlias = Literal["float", "int"]
"""How number tokens are decoded. `int` truncates toward zero."""

NUMERIC_MODES: frozenset[str] = frozenset(("float", "int"))
"""All supported numeric modes."""

DEFAULT_NUMERIC_MODE: NumericMode = "float"
"""The numeric mode used if neither an argument nor the environment sets one."""

NUMERIC_MODE_ENV = "SVG_PATH_PARSER_NUMERIC_MODE"
"""Environment variable overriding the default numeric mode."""
