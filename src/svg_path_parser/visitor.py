"""Receivers for parsed SVG path commands."""

from __future__ import annotations

from typing_extensions import override


class PathVisitor:
    """Base class for objects receiving SVG path commands.

    Every method is a no-op, so a subclass only overrides the commands it is
    interested in. Arc flags are passed as numbers, exactly as written.
    """

    def begin_parse(self) -> None:
        """Called once before a path is parsed."""

    def moveto_abs(self, x: float, y: float) -> None:
        """Start a new subpath at `(x, y)`."""

    def moveto_rel(self, dx: float, dy: float) -> None:
        """Start a new subpath relative to the current point."""

    def lineto_abs(self, x: float, y: float) -> None:
        """Draw a line to `(x, y)`."""

    def lineto_rel(self, dx: float, dy: float) -> None:
        """Draw a line relative to the current point."""

    def lineto_horizontal_abs(self, x: float) -> None:
        """Draw a horizontal line."""

    def lineto_horizontal_rel(self, dx: float) -> None:
        """Draw a horizontal line."""

    def lineto_vertical_abs(self, y: float) -> None:
        """Draw a vertical line."""

    def lineto_vertical_rel(self, dy: float) -> None:
        """Draw a vertical line."""

    def curveto_cubic_abs(  # noqa: PLR0913
        self, x1: float, y1: float, x2: float, y2: float, x: float, y: float
    ) -> None:
        """Draw a cubic Bezier curve."""

    def curveto_cubic_rel(  # noqa: PLR0913
        self, x1: float, y1: float, x2: float, y2: float, x: float, y: float
    ) -> None:
        """Draw a cubic Bezier curve."""

    def curveto_cubic_smooth_abs(self, x2: float, y2: float, x: float, y: float) -> None:
        """Draw a cubic Bezier curve with a reflected first control point."""

    def curveto_cubic_smooth_rel(self, x2: float, y2: float, x: float, y: float) -> None:
        """Draw a cubic Bezier curve with a reflected first control point."""

    def curveto_quadratic_abs(self, x1: float, y1: float, x: float, y: float) -> None:
        """Draw a quadratic Bezier curve."""

    def curveto_quadratic_rel(self, x1: float, y1: float, x: float, y: float) -> None:
        """Draw a quadratic Bezier curve."""

    def curveto_quadratic_smooth_abs(self, x: float, y: float) -> None:
        """Draw a quadratic Bezier curve with a reflected control point."""

    def curveto_quadratic_smooth_rel(self, x: float, y: float) -> None:
        """Draw a quadratic Bezier curve with a reflected control point."""

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
        """Draw an elliptical arc."""

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
        """Draw an elliptical arc."""

    def close_path(self) -> None:
        """Close the current subpath."""


Call = tuple[str, tuple[float, ...]]


class RecordingVisitor(PathVisitor):
    """Visitor that records every call in order.

    Examples:
        >>> from svg_path_parser import parse_path_data
        >>> visitor = RecordingVisitor()
        >>> parse_path_data("M1 2 3 4z", visitor)
        >>> visitor.calls
        [('moveto_abs', (1.0, 2.0)), ('lineto_abs', (3.0, 4.0)), ('close_path', ())]
    """

    def __init__(self) -> None:
        """Initialize an empty recording."""
        self.calls: list[Call] = []
        self.began = 0

    def clear(self) -> None:
        """Forget all recorded calls."""
        self.calls.clear()
        self.began = 0

    @property
    def method_names(self) -> list[str]:
        """The names of the recorded calls."""
        return [name for name, _ in self.calls]

    def _record(self, name: str, *params: float) -> None:
        self.calls.append((name, params))

    @override
    def begin_parse(self) -> None:
        self.began += 1

    @override
    def moveto_abs(self, x: float, y: float) -> None:
        self._record("moveto_abs", x, y)

    @override
    def moveto_rel(self, dx: float, dy: float) -> None:
        self._record("moveto_rel", dx, dy)

    @override
    def lineto_abs(self, x: float, y: float) -> None:
        self._record("lineto_abs", x, y)

    @override
    def lineto_rel(self, dx: float, dy: float) -> None:
        self._record("lineto_rel", dx, dy)

    @override
    def lineto_horizontal_abs(self, x: float) -> None:
        self._record("lineto_horizontal_abs", x)

    @override
    def lineto_horizontal_rel(self, dx: float) -> None:
        self._record("lineto_horizontal_rel", dx)

    @override
    def lineto_vertical_abs(self, y: float) -> None:
        self._record("lineto_vertical_abs", y)

    @override
    def lineto_vertical_rel(self, dy: float) -> None:
        self._record("lineto_vertical_rel", dy)

    @override
    def curveto_cubic_abs(  # noqa: PLR0913
        self, x1: float, y1: float, x2: float, y2: float, x: float, y: float
    ) -> None:
        self._record("curveto_cubic_abs", x1, y1, x2, y2, x, y)

    @override
    def curveto_cubic_rel(  # noqa: PLR0913
        self, x1: float, y1: float, x2: float, y2: float, x: float, y: float
    ) -> None:
        self._record("curveto_cubic_rel", x1, y1, x2, y2, x, y)

    @override
    def curveto_cubic_smooth_abs(self, x2: float, y2: float, x: float, y: float) -> None:
        self._record("curveto_cubic_smooth_abs", x2, y2, x, y)

    @override
    def curveto_cubic_smooth_rel(self, x2: float, y2: float, x: float, y: float) -> None:
        self._record("curveto_cubic_smooth_rel", x2, y2, x, y)

    @override
    def curveto_quadratic_abs(self, x1: float, y1: float, x: float, y: float) -> None:
        self._record("curveto_quadratic_abs", x1, y1, x, y)

    @override
    def curveto_quadratic_rel(self, x1: float, y1: float, x: float, y: float) -> None:
        self._record("curveto_quadratic_rel", x1, y1, x, y)

    @override
    def curveto_quadratic_smooth_abs(self, x: float, y: float) -> None:
        self._record("curveto_quadratic_smooth_abs", x, y)

    @override
    def curveto_quadratic_smooth_rel(self, x: float, y: float) -> None:
        self._record("curveto_quadratic_smooth_rel", x, y)

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
        self._record(
            "arc_abs", rx, ry, x_axis_rotation, large_arc_flag, sweep_flag, x, y
        )

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
        self._record(
            "arc_rel", rx, ry, x_axis_rotation, large_arc_flag, sweep_flag, x, y
        )

    @override
    def close_path(self) -> None:
        self._record("close_path")
