"""Path representation produced by shapes.

A Path is an ordered sequence of drawing commands:
- MoveTo: Start a new subpath at a point
- LineTo: Straight segment to a point
- QuadraticBezierTo: Quadratic Bezier segment (one control point)
- CubicTo: Cubic Bezier segment (two control points)
- ArcTo: Elliptical arc inscribed in an oval, given by start and sweep angles
- Close: Straight segment back to the subpath start, terminating it

Angles follow canvas convention: 0 points along +x and positive sweeps turn
towards +y, which is clockwise on screen.
"""

import math
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Union

from shapeofview.domain.geometry import Point, Rect


@dataclass(frozen=True, slots=True)
class MoveTo:
    point: Point

    @property
    def end_point(self) -> Point:
        return self.point


@dataclass(frozen=True, slots=True)
class LineTo:
    point: Point

    @property
    def end_point(self) -> Point:
        return self.point


@dataclass(frozen=True, slots=True)
class QuadraticBezierTo:
    control: Point
    end: Point

    @property
    def end_point(self) -> Point:
        return self.end


@dataclass(frozen=True, slots=True)
class CubicTo:
    control1: Point
    control2: Point
    end: Point

    @property
    def end_point(self) -> Point:
        return self.end


@dataclass(frozen=True, slots=True)
class ArcTo:
    """Arc along the ellipse inscribed in ``oval``.

    Attributes:
        oval: Bounding rectangle of the ellipse
        start_angle: Angle of the arc start, in radians
        sweep_angle: Signed sweep, in radians
        force_move_to: Start a new subpath at the arc start instead of
            drawing a line to it from the current point
    """

    oval: Rect
    start_angle: float
    sweep_angle: float
    force_move_to: bool = False

    def point_at(self, angle: float) -> Point:
        """Point on the ellipse at the given angle."""
        center = self.oval.center
        return Point(
            center.x + self.oval.width / 2.0 * math.cos(angle),
            center.y + self.oval.height / 2.0 * math.sin(angle),
        )

    @property
    def start_point(self) -> Point:
        return self.point_at(self.start_angle)

    @property
    def end_point(self) -> Point:
        return self.point_at(self.start_angle + self.sweep_angle)


@dataclass(frozen=True, slots=True)
class Close:
    pass


PathCommand = Union[MoveTo, LineTo, QuadraticBezierTo, CubicTo, ArcTo, Close]


class Path:
    """A mutable sequence of drawing commands describing an outline.

    Builder methods return the path itself so calls can be chained:

        >>> path = Path().move_to(0, 0).line_to(10, 0).line_to(10, 10).close()
        >>> path.is_closed
        True
    """

    __slots__ = ("_commands", "_current", "_subpath_start")

    def __init__(self, commands: list[PathCommand] | None = None) -> None:
        self._commands: list[PathCommand] = []
        self._current: Point | None = None
        self._subpath_start: Point | None = None
        for command in commands or []:
            self.add(command)

    def add(self, command: PathCommand) -> "Path":
        """Append a command, tracking the current point."""
        if isinstance(command, MoveTo):
            self._subpath_start = command.point
            self._current = command.point
        elif isinstance(command, Close):
            self._current = self._subpath_start
        elif isinstance(command, ArcTo):
            if command.force_move_to or self._subpath_start is None:
                self._subpath_start = command.start_point
            self._current = command.end_point
        else:
            if self._subpath_start is None:
                self._subpath_start = Point(0.0, 0.0)
            self._current = command.end_point
        self._commands.append(command)
        return self

    def move_to(self, x: float, y: float) -> "Path":
        return self.add(MoveTo(Point(x, y)))

    def line_to(self, x: float, y: float) -> "Path":
        return self.add(LineTo(Point(x, y)))

    def quadratic_bezier_to(self, x1: float, y1: float, x2: float, y2: float) -> "Path":
        return self.add(QuadraticBezierTo(Point(x1, y1), Point(x2, y2)))

    def cubic_to(
        self, x1: float, y1: float, x2: float, y2: float, x3: float, y3: float
    ) -> "Path":
        return self.add(CubicTo(Point(x1, y1), Point(x2, y2), Point(x3, y3)))

    def arc_to(
        self,
        oval: Rect,
        start_angle: float,
        sweep_angle: float,
        force_move_to: bool = False,
    ) -> "Path":
        return self.add(ArcTo(oval, start_angle, sweep_angle, force_move_to))

    def add_oval(self, oval: Rect) -> "Path":
        """Add a closed ellipse inscribed in ``oval`` as a new subpath.

        The ellipse starts at its rightmost point and runs clockwise.
        """
        start = Point(oval.right, oval.center.y)
        self.move_to(start.x, start.y)
        self.arc_to(oval, 0.0, 2.0 * math.pi)
        return self.close()

    def close(self) -> "Path":
        return self.add(Close())

    @property
    def commands(self) -> tuple[PathCommand, ...]:
        return tuple(self._commands)

    @property
    def current_point(self) -> Point | None:
        return self._current

    @property
    def is_empty(self) -> bool:
        return not self._commands

    @property
    def is_closed(self) -> bool:
        """True when the last command terminates the path with Close."""
        return bool(self._commands) and isinstance(self._commands[-1], Close)

    @property
    def subpath_count(self) -> int:
        count = sum(
            1
            for c in self._commands
            if isinstance(c, MoveTo) or (isinstance(c, ArcTo) and c.force_move_to)
        )
        # Drawing before any move starts an implicit subpath at the origin
        if self._commands and not isinstance(self._commands[0], (MoveTo, Close)):
            if not (isinstance(self._commands[0], ArcTo) and self._commands[0].force_move_to):
                count += 1
        return count

    def vertices(self) -> list[Point]:
        """End points of every drawing command, in order.

        Close commands contribute nothing, so a closed polygon yields each of
        its corners once.
        """
        return [c.end_point for c in self._commands if not isinstance(c, Close)]

    def copy(self) -> "Path":
        return Path(list(self._commands))

    def __len__(self) -> int:
        return len(self._commands)

    def __iter__(self) -> Iterator[PathCommand]:
        return iter(self._commands)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self._commands == other._commands

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Path({len(self._commands)} commands, closed={self.is_closed})"
