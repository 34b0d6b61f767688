"""Converters between shapeofview paths and the fontTools pen protocol.

Any fontTools pen can consume a Path, which gives access to the pens that
measure and serialize outlines:
- BoundsPen: Tight bounding box
- AreaPen: Signed enclosed area
- SVGPathPen: SVG path data
- TransformPen: Affine transforms
"""

from collections.abc import Sequence
from typing import Any

from fontTools.misc.transform import Transform
from fontTools.pens.areaPen import AreaPen
from fontTools.pens.basePen import decomposeQuadraticSegment, decomposeSuperBezierSegment
from fontTools.pens.boundsPen import BoundsPen
from fontTools.pens.recordingPen import RecordingPen
from fontTools.pens.svgPathPen import SVGPathPen
from fontTools.pens.transformPen import TransformPen

from shapeofview.core.geometry import arc_to_cubics
from shapeofview.domain import (
    ArcTo,
    Close,
    CubicTo,
    LineTo,
    MoveTo,
    Path,
    Point,
    QuadraticBezierTo,
    Rect,
)
from shapeofview.exceptions import InvalidArgumentError

# Points closer than this are treated as coincident when joining arcs
_JOIN_TOLERANCE = 1e-9


def draw_path(path: Path, pen: Any) -> None:
    """Replay a Path onto a fontTools pen.

    Mapping:
    - MoveTo -> moveTo (ending any open contour with endPath first)
    - LineTo -> lineTo
    - QuadraticBezierTo -> qCurveTo
    - CubicTo -> curveTo
    - ArcTo -> lineTo to the arc start when needed, then one curveTo per
      cubic segment of at most 90 degrees
    - Close -> closePath

    A trailing open contour is finished with endPath.

    Args:
        path: Path to replay
        pen: Any object implementing the fontTools pen protocol
    """
    in_contour = False
    current: Point | None = None
    contour_start: Point | None = None

    def begin(point: Point) -> None:
        nonlocal in_contour, current, contour_start
        if in_contour:
            pen.endPath()
        pen.moveTo(point.to_tuple())
        in_contour = True
        current = point
        contour_start = point

    def ensure_contour() -> None:
        # Drawing without a move starts at the last close point or the origin
        if not in_contour:
            begin(contour_start or Point(0.0, 0.0))

    for command in path:
        if isinstance(command, MoveTo):
            begin(command.point)

        elif isinstance(command, LineTo):
            ensure_contour()
            pen.lineTo(command.point.to_tuple())
            current = command.point

        elif isinstance(command, QuadraticBezierTo):
            ensure_contour()
            pen.qCurveTo(command.control.to_tuple(), command.end.to_tuple())
            current = command.end

        elif isinstance(command, CubicTo):
            ensure_contour()
            pen.curveTo(
                command.control1.to_tuple(),
                command.control2.to_tuple(),
                command.end.to_tuple(),
            )
            current = command.end

        elif isinstance(command, ArcTo):
            start = command.start_point
            if command.force_move_to or not in_contour:
                begin(start)
            elif current is None or current.distance_to(start) > _JOIN_TOLERANCE:
                pen.lineTo(start.to_tuple())
            for control1, control2, end in arc_to_cubics(command):
                pen.curveTo(control1.to_tuple(), control2.to_tuple(), end.to_tuple())
            current = command.end_point

        elif isinstance(command, Close):
            if in_contour:
                pen.closePath()
                in_contour = False
                current = contour_start

    if in_contour:
        pen.endPath()


def record_path(path: Path) -> list[tuple[str, tuple[Any, ...]]]:
    """Record a Path as RecordingPen operations."""
    pen = RecordingPen()
    draw_path(path, pen)
    return list(pen.value)


def path_from_recording(recording: Sequence[tuple[str, Sequence[Any]]]) -> Path:
    """Convert RecordingPen operations into a Path.

    The recording holds operations like:
    - ('moveTo', ((x, y),))
    - ('lineTo', ((x, y),))
    - ('qCurveTo', ((x1, y1), (x2, y2), ...))  # TrueType implied points allowed
    - ('curveTo', ((x1, y1), (x2, y2), (x3, y3)))  # longer runs are super-Beziers
    - ('closePath', ())
    - ('endPath', ())

    Args:
        recording: Operations, e.g. ``RecordingPen().value``

    Returns:
        Equivalent Path

    Raises:
        InvalidArgumentError: For unsupported operations or an all-off-curve
            quadratic contour
    """
    path = Path()

    for operator, operands in recording:
        if operator == "moveTo":
            x, y = operands[0]
            path.move_to(x, y)

        elif operator == "lineTo":
            x, y = operands[0]
            path.line_to(x, y)

        elif operator == "qCurveTo":
            if operands[-1] is None:
                raise InvalidArgumentError(
                    "Quadratic contours without on-curve points are not supported"
                )
            for (cx, cy), (ex, ey) in decomposeQuadraticSegment(list(operands)):
                path.quadratic_bezier_to(cx, cy, ex, ey)

        elif operator == "curveTo":
            segments = (
                [tuple(operands)]
                if len(operands) == 3
                else decomposeSuperBezierSegment(list(operands))
            )
            for (x1, y1), (x2, y2), (x3, y3) in segments:
                path.cubic_to(x1, y1, x2, y2, x3, y3)

        elif operator == "closePath":
            path.close()

        elif operator == "endPath":
            continue

        else:
            raise InvalidArgumentError(f"Unsupported pen operation: {operator}")

    return path


def transform_path(path: Path, transform: Transform) -> Path:
    """Apply an affine transform to a Path.

    Arcs become cubic segments, since a transformed arc is generally not an
    axis-aligned elliptical arc any more.
    """
    recorder = RecordingPen()
    draw_path(path, TransformPen(recorder, transform))
    return path_from_recording(recorder.value)


def path_bounds(path: Path) -> Rect | None:
    """Tight bounding box of a Path, or None if it draws nothing."""
    pen = BoundsPen(None)
    draw_path(path, pen)
    if pen.bounds is None:
        return None
    x_min, y_min, x_max, y_max = pen.bounds
    return Rect(x_min, y_min, x_max, y_max)


def path_area(path: Path) -> float:
    """Signed area enclosed by a closed Path.

    Uses the shoelace orientation: in canvas coordinates a
    positive value means the outline runs clockwise on screen.
    """
    pen = AreaPen(None)
    draw_path(path, pen)
    return pen.value


def format_number(value: float) -> str:
    text = f"{value:.3f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


def path_to_svg(path: Path) -> str:
    """Serialize a Path to SVG path data (the ``d`` attribute)."""
    pen = SVGPathPen(None, ntos=format_number)
    draw_path(path, pen)
    return pen.getCommands()
