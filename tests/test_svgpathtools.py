"""Compares the parsed commands with svgpathtools."""

from __future__ import annotations

import numpy as np
import pytest
import svgpathtools
from typing_extensions import override

from svg_path_parser import PathVisitor, iter_path_commands, parse_path_data


class EndPoints(PathVisitor):
    """Collect the absolute end point of every drawing command."""

    def __init__(self) -> None:
        self.current = complex(0, 0)
        self.ends: list[complex] = []

    def _draw(self, end: complex) -> None:
        self.current = end
        self.ends.append(end)

    def _rel(self, dx: float, dy: float) -> complex:
        return self.current + complex(dx, dy)

    @override
    def moveto_abs(self, x: float, y: float) -> None:
        self.current = complex(x, y)

    @override
    def moveto_rel(self, dx: float, dy: float) -> None:
        self.current = self._rel(dx, dy)

    @override
    def lineto_abs(self, x: float, y: float) -> None:
        self._draw(complex(x, y))

    @override
    def lineto_rel(self, dx: float, dy: float) -> None:
        self._draw(self._rel(dx, dy))

    @override
    def lineto_horizontal_abs(self, x: float) -> None:
        self._draw(complex(x, self.current.imag))

    @override
    def lineto_horizontal_rel(self, dx: float) -> None:
        self._draw(self._rel(dx, 0))

    @override
    def lineto_vertical_abs(self, y: float) -> None:
        self._draw(complex(self.current.real, y))

    @override
    def lineto_vertical_rel(self, dy: float) -> None:
        self._draw(self._rel(0, dy))

    @override
    def curveto_cubic_abs(  # noqa: PLR0913
        self, x1: float, y1: float, x2: float, y2: float, x: float, y: float
    ) -> None:
        self._draw(complex(x, y))

    @override
    def curveto_cubic_rel(  # noqa: PLR0913
        self, x1: float, y1: float, x2: float, y2: float, x: float, y: float
    ) -> None:
        self._draw(self._rel(x, y))

    @override
    def curveto_cubic_smooth_abs(self, x2: float, y2: float, x: float, y: float) -> None:
        self._draw(complex(x, y))

    @override
    def curveto_cubic_smooth_rel(self, x2: float, y2: float, x: float, y: float) -> None:
        self._draw(self._rel(x, y))

    @override
    def curveto_quadratic_abs(self, x1: float, y1: float, x: float, y: float) -> None:
        self._draw(complex(x, y))

    @override
    def curveto_quadratic_rel(self, x1: float, y1: float, x: float, y: float) -> None:
        self._draw(self._rel(x, y))

    @override
    def curveto_quadratic_smooth_abs(self, x: float, y: float) -> None:
        self._draw(complex(x, y))

    @override
    def curveto_quadratic_smooth_rel(self, x: float, y: float) -> None:
        self._draw(self._rel(x, y))

    @override
    def arc_abs(  # noqa: PLR0913
        self,
        rx: float,
        ry: float,
        x_axis_rotation: float,
        large_arc_flag: float,
        sweep_flag: float,
        x: float,
        y: float,
    ) -> None:
        self._draw(complex(x, y))

    @override
    def arc_rel(  # noqa: PLR0913
        self,
        rx: float,
        ry: float,
        x_axis_rotation: float,
        large_arc_flag: float,
        sweep_flag: float,
        x: float,
        y: float,
    ) -> None:
        self._draw(self._rel(x, y))


def _compare(test_input: str) -> None:
    """Compare the end points with the segments of svgpathtools."""
    visitor = EndPoints()
    parse_path_data(test_input, visitor)

    expected = [seg.end for seg in svgpathtools.parse_path(test_input)]

    np.testing.assert_allclose(np.array(visitor.ends), np.array(expected))


cubics = [
    "M 10 10 C 20 20, 40 20, 50 10",
    "M 70 10 C 70 20, 110 20, 110 10",
    "M 130 10 C 120 20, 180 20, 170 10",
    "M 10 110 C 20 140, 40 140, 50 110 70 110, 110 140, 110 110",
]

quads = ["M 10 80 Q 95 10 180 80", "M 10 80 Q 52.5 10, 95 80 T 180 80"]

relative = [
    "m 10 350 l 40 0 l 20 50",
    "m 10 450 q 30 -40, 60 0 t 120 0",
    "m 10 500 l 50 0 l 20 -50 l 20 50 l 50 0",
    "m 10 600 q 50 -50, 100 0 q 50 50, 100 0",
    "m 10 700 20 0 0 20",
    "m 10 800 c 10 -20, 30 -20, 40 0 s 30 20, 40 0",
]

vertical_horizontal = [
    "M 10 10 H 50",
    "M 10 10 h 40",
    "M 10 10 V 50",
    "M 10 10 v 40",
    "M 10 10 H 50 V 50 H 10 V 10",
    "M 10 10 h 40 v 40 h -40 v -40",
]

arcs = [
    "M 10 315 A 15 15 0 0 1 40 315",
    "M 70 315 A 15 15 0 1 1 100 315",
    "M 130 315 A 15 15 0 0 0 160 315",
    "M 70 365 a 15 15 0 0 1 30 0",
    "M 130 365 a 15 15 0 1 1 30 0",
]

smooth_curves = [
    "M 10 180 C 40 100, 65 100, 95 180 S 150 260, 180 180",
    "M 10 280 Q 52.5 210 95 280 T 180 280 T 265 280",
    "M 10 380 C 40 300, 65 300, 95 380 S 150 460 180 380 S 265 300 295 380",
]

compact = [
    "M40,70 Q50,150 90,90 T135,130 L160,70 C180,180 280,55 280,140 S400,110 290,100",
    "M10-5L20-10 30.5.5",
    "M 10 10 20 20 30 30",
]

all_inputs = (
    cubics + quads + relative + vertical_horizontal + arcs + smooth_curves + compact
)


@pytest.mark.parametrize("test_input", all_inputs)
def test_end_points(test_input: str) -> None:
    _compare(test_input)


@pytest.mark.parametrize("test_input", cubics + smooth_curves)
def test_cubic_control_points(test_input: str) -> None:
    drawn = [c for c in iter_path_commands(test_input) if c.command != "M"]
    segments = list(svgpathtools.parse_path(test_input))
    assert len(drawn) == len(segments)

    controls: list[complex] = []
    expected: list[complex] = []
    for command, segment in zip(drawn, segments, strict=True):
        if command.command != "C":
            continue
        controls.extend((complex(*command.params[:2]), complex(*command.params[2:4])))
        expected.extend((segment.control1, segment.control2))

    np.testing.assert_allclose(np.array(controls), np.array(expected))


@pytest.mark.parametrize("test_input", arcs)
def test_arc_flags(test_input: str) -> None:
    arc = next(c for c in iter_path_commands(test_input) if c.command == "A")
    (segment,) = svgpathtools.parse_path(test_input)

    assert bool(arc.params[3]) == segment.large_arc
    assert bool(arc.params[4]) == segment.sweep
    assert arc.params[2] == segment.rotation
