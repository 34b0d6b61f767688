"""Shape geometry engine for shapeofview.

This module contains:

- The Shape / BorderShape contracts and the Canvas protocol
- Shape variants (circle, rounded and cut rectangles, arc, diagonal,
  triangle, bubble, star, polygon, custom)
- The border adapter that exposes a shape to a host renderer
- The ShapeOfView container
- Geometry helpers (polar placement, corner clamping, arc conversion)

All shapes are:
- Immutable values holding only configuration
- Pure: every build returns a fresh closed Path

Key classes:
- ShapeOfViewBorder: Clip/border adapter around any shape
- ShapeOfView: Container adding elevation and clip behavior
"""

from shapeofview.config import Clip
from shapeofview.core.arc import ArcDirection, ArcPosition, ArcShape
from shapeofview.core.base import BorderShape, Canvas, Shape
from shapeofview.core.border import ShapeOfViewBorder
from shapeofview.core.bubble import BubblePosition, BubbleShape
from shapeofview.core.circle import CircleShape
from shapeofview.core.custom import CustomShape, ShapeBuilder
from shapeofview.core.cutcorner import CutCornerShape
from shapeofview.core.diagonal import DiagonalDirection, DiagonalPosition, DiagonalShape
from shapeofview.core.geometry import (
    arc_to_cubics,
    clamp_corner_radius,
    polar_point,
)
from shapeofview.core.polygon import PolygonShape
from shapeofview.core.registry import create_shape, gallery_shapes, list_shapes
from shapeofview.core.roundrect import RoundRectShape
from shapeofview.core.star import StarShape
from shapeofview.core.triangle import TriangleShape
from shapeofview.core.view import ShapeOfView

__all__ = [
    # Contracts
    "BorderShape",
    "Canvas",
    "Shape",
    "ShapeBuilder",
    # Shapes
    "ArcDirection",
    "ArcPosition",
    "ArcShape",
    "BubblePosition",
    "BubbleShape",
    "CircleShape",
    "CustomShape",
    "CutCornerShape",
    "DiagonalDirection",
    "DiagonalPosition",
    "DiagonalShape",
    "PolygonShape",
    "RoundRectShape",
    "StarShape",
    "TriangleShape",
    # Adapter and container
    "Clip",
    "ShapeOfView",
    "ShapeOfViewBorder",
    # Registry
    "create_shape",
    "gallery_shapes",
    "list_shapes",
    # Geometry functions
    "arc_to_cubics",
    "clamp_corner_radius",
    "polar_point",
]
