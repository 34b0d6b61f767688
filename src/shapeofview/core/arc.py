"""Rectangle with one edge replaced by a curved bulge."""

from dataclasses import dataclass
from enum import Enum

from shapeofview.core.base import Shape
from shapeofview.domain import Path, Rect


class ArcPosition(str, Enum):
    """Edge of the rectangle that carries the arc."""

    BOTTOM = "bottom"
    TOP = "top"
    LEFT = "left"
    RIGHT = "right"


class ArcDirection(str, Enum):
    """Whether the arc bulges beyond the rectangle or into it."""

    OUTSIDE = "outside"
    INSIDE = "inside"


@dataclass(frozen=True, slots=True)
class ArcShape(Shape):
    """A rectangle with one edge drawn as two chained quadratic Beziers.

    Control points sit on the quarter points of the edge, so the curve is
    symmetric about the edge midpoint. With ``OUTSIDE`` the two straight
    sides stop ``height`` short of the edge and the curve swells out to it;
    with ``INSIDE`` the sides reach the edge and the curve dips ``height``
    into the rectangle.

    Coordinates are local to the rectangle: (0, 0) to (width, height).

    Attributes:
        position: Edge that carries the arc
        direction: Bulge direction
        height: Depth of the bulge
    """

    position: ArcPosition = ArcPosition.BOTTOM
    direction: ArcDirection = ArcDirection.OUTSIDE
    height: float = 10.0

    def generate_path(self, rect: Rect) -> Path:
        w, h = rect.size
        d = self.height
        outside = self.direction == ArcDirection.OUTSIDE

        if self.position == ArcPosition.TOP:
            if outside:
                return (
                    Path()
                    .move_to(0.0, d)
                    .quadratic_bezier_to(w / 4, 0.0, w / 2, 0.0)
                    .quadratic_bezier_to(w * 3 / 4, 0.0, w, d)
                    .line_to(w, h)
                    .line_to(0.0, h)
                    .close()
                )
            return (
                Path()
                .move_to(0.0, 0.0)
                .quadratic_bezier_to(w / 4, d, w / 2, d)
                .quadratic_bezier_to(w * 3 / 4, d, w, 0.0)
                .line_to(w, h)
                .line_to(0.0, h)
                .close()
            )

        if self.position == ArcPosition.BOTTOM:
            if outside:
                return (
                    Path()
                    .move_to(0.0, 0.0)
                    .line_to(0.0, h - d)
                    .quadratic_bezier_to(w / 4, h, w / 2, h)
                    .quadratic_bezier_to(w * 3 / 4, h, w, h - d)
                    .line_to(w, 0.0)
                    .close()
                )
            return (
                Path()
                .move_to(0.0, h)
                .quadratic_bezier_to(w / 4, h - d, w / 2, h - d)
                .quadratic_bezier_to(w * 3 / 4, h - d, w, h)
                .line_to(w, 0.0)
                .line_to(0.0, 0.0)
                .close()
            )

        if self.position == ArcPosition.LEFT:
            if outside:
                return (
                    Path()
                    .move_to(d, 0.0)
                    .quadratic_bezier_to(0.0, h / 4, 0.0, h / 2)
                    .quadratic_bezier_to(0.0, h * 3 / 4, d, h)
                    .line_to(w, h)
                    .line_to(w, 0.0)
                    .close()
                )
            return (
                Path()
                .move_to(0.0, 0.0)
                .quadratic_bezier_to(d, h / 4, d, h / 2)
                .quadratic_bezier_to(d, h * 3 / 4, 0.0, h)
                .line_to(w, h)
                .line_to(w, 0.0)
                .close()
            )

        # Right
        if outside:
            return (
                Path()
                .move_to(w - d, 0.0)
                .quadratic_bezier_to(w, h / 4, w, h / 2)
                .quadratic_bezier_to(w, h * 3 / 4, w - d, h)
                .line_to(0.0, h)
                .line_to(0.0, 0.0)
                .close()
            )
        return (
            Path()
            .move_to(w, 0.0)
            .quadratic_bezier_to(w - d, h / 4, w - d, h / 2)
            .quadratic_bezier_to(w - d, h * 3 / 4, w, h)
            .line_to(0.0, h)
            .line_to(0.0, 0.0)
            .close()
        )
