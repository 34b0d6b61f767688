"""Geometric operations on shapes and paths.

This module provides mathematical utilities for:
- Polar placement of vertices around a center
- Corner radius clamping
- Arc conversion to cubic Beziers

All functions are pure and stateless.
"""

import math

from shapeofview.domain import ArcTo, Point, Rect

# Largest sweep approximated by a single cubic
_MAX_SEGMENT_SWEEP = math.pi / 2.0


def polar_point(center: Point, radius: float, angle: float) -> Point:
    """Point at ``angle`` radians on a circle around ``center``.

    Uses canvas convention: angle 0 points along +x and angles grow
    towards +y.
    """
    return Point(center.x + radius * math.cos(angle), center.y + radius * math.sin(angle))


def clamp_corner_radius(radius: float, rect: Rect) -> float:
    """Clamp a corner radius so opposite corners cannot overlap.

    Args:
        radius: Requested radius; the magnitude is used
        rect: Rectangle the corner belongs to

    Returns:
        ``abs(radius)`` limited to half the shorter side of ``rect``
    """
    return min(abs(radius), rect.shortest_side / 2.0)


def arc_to_cubics(arc: ArcTo) -> list[tuple[Point, Point, Point]]:
    """Approximate an elliptical arc with cubic Bezier segments.

    The sweep is split into equal parts of at most 90 degrees, each
    approximated with the standard ``4/3 * tan(theta/4)`` handle length.

    Args:
        arc: The arc command to convert

    Returns:
        List of (control1, control2, end) tuples; the first segment starts
        at ``arc.start_point``. Empty for a zero sweep.
    """
    sweep = arc.sweep_angle
    if sweep == 0:
        return []

    segment_count = max(1, math.ceil(abs(sweep) / _MAX_SEGMENT_SWEEP - 1e-9))
    step = sweep / segment_count
    handle = 4.0 / 3.0 * math.tan(step / 4.0)

    center = arc.oval.center
    rx = arc.oval.width / 2.0
    ry = arc.oval.height / 2.0

    segments: list[tuple[Point, Point, Point]] = []
    angle = arc.start_angle
    for _ in range(segment_count):
        next_angle = angle + step
        cos_a, sin_a = math.cos(angle), math.sin(angle)
        cos_b, sin_b = math.cos(next_angle), math.sin(next_angle)

        control1 = Point(
            center.x + rx * (cos_a - handle * sin_a),
            center.y + ry * (sin_a + handle * cos_a),
        )
        control2 = Point(
            center.x + rx * (cos_b + handle * sin_b),
            center.y + ry * (sin_b - handle * cos_b),
        )
        end = Point(center.x + rx * cos_b, center.y + ry * sin_b)
        segments.append((control1, control2, end))
        angle = next_angle

    return segments

