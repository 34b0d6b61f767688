"""ShapeOfView - Shaped clip outlines and borders for rectangular containers.

ShapeOfView turns a bounding rectangle and a shape descriptor into a closed
outline that a rendering layer uses to clip content and draw elevation. Circle
and rounded-rectangle shapes can also paint a decorative border stroke.

Example:
    >>> from shapeofview import Rect, StarShape
    >>> path = StarShape(no_of_points=5).build(Rect(0, 0, 100, 100))
    >>> path.is_closed
    True

Shapes can be rendered to SVG from the command line:

    $ shapeofview render star -s points=5 -o star.svg
"""

from shapeofview.core import (
    ArcDirection,
    ArcPosition,
    ArcShape,
    BorderShape,
    BubblePosition,
    BubbleShape,
    Canvas,
    CircleShape,
    Clip,
    CustomShape,
    CutCornerShape,
    DiagonalDirection,
    DiagonalPosition,
    DiagonalShape,
    PolygonShape,
    RoundRectShape,
    Shape,
    ShapeOfView,
    ShapeOfViewBorder,
    StarShape,
    TriangleShape,
)
from shapeofview.domain import (
    Angle,
    BorderRadius,
    Color,
    EdgeInsets,
    Path,
    Point,
    Radius,
    Rect,
    StrokeStyle,
)
from shapeofview.exceptions import (
    InvalidArgumentError,
    InvalidStateError,
    ShapeOfViewError,
)

__version__ = "0.1.0"

__all__ = [
    "Angle",
    "ArcDirection",
    "ArcPosition",
    "ArcShape",
    "BorderRadius",
    "BorderShape",
    "BubblePosition",
    "BubbleShape",
    "Canvas",
    "CircleShape",
    "Clip",
    "Color",
    "CustomShape",
    "CutCornerShape",
    "DiagonalDirection",
    "DiagonalPosition",
    "DiagonalShape",
    "EdgeInsets",
    "InvalidArgumentError",
    "InvalidStateError",
    "Path",
    "Point",
    "PolygonShape",
    "Radius",
    "Rect",
    "RoundRectShape",
    "Shape",
    "ShapeOfView",
    "ShapeOfViewBorder",
    "ShapeOfViewError",
    "StarShape",
    "StrokeStyle",
    "TriangleShape",
    "__version__",
]
