"""Domain models for shapeofview.

This module contains the value types shapes consume and produce. All models
are designed to be:

- Immutable where possible (frozen dataclasses), Path being the exception
- Free of any rendering backend details

Key classes:
- Point, Rect: Canvas coordinates and bounding rectangles
- Angle: Radian-valued angle with a degree constructor
- Radius, BorderRadius: Per-corner radii
- EdgeInsets: Side insets reported by the border adapter
- Path: Ordered drawing commands forming an outline
- Color, StrokeStyle, FillStyle: Presentation values
"""

from shapeofview.domain.geometry import (
    Angle,
    BorderRadius,
    EdgeInsets,
    Point,
    Radius,
    Rect,
)
from shapeofview.domain.path import (
    ArcTo,
    Close,
    CubicTo,
    LineTo,
    MoveTo,
    Path,
    PathCommand,
    QuadraticBezierTo,
)
from shapeofview.domain.style import BLACK, TRANSPARENT, WHITE, Color, FillStyle, StrokeStyle

__all__: list[str] = [
    # Geometry
    "Point",
    "Rect",
    "Angle",
    "Radius",
    "BorderRadius",
    "EdgeInsets",
    # Path
    "Path",
    "PathCommand",
    "MoveTo",
    "LineTo",
    "QuadraticBezierTo",
    "CubicTo",
    "ArcTo",
    "Close",
    # Style
    "Color",
    "StrokeStyle",
    "FillStyle",
    "WHITE",
    "BLACK",
    "TRANSPARENT",
]
