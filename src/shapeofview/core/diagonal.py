"""Rectangle with one edge replaced by a straight diagonal."""

import math
from dataclasses import dataclass
from enum import Enum

from shapeofview.core.base import Shape
from shapeofview.domain import Angle, Path, Rect


class DiagonalPosition(str, Enum):
    """Edge of the rectangle that is cut."""

    BOTTOM = "bottom"
    TOP = "top"
    LEFT = "left"
    RIGHT = "right"


class DiagonalDirection(str, Enum):
    """Side on which the cut edge keeps its full extent."""

    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True, slots=True)
class DiagonalShape(Shape):
    """A rectangle with one edge slanted by ``angle``.

    The slant displaces one end of the edge by ``width * tan(|angle|)``.
    The rectangle width is used for every position, including LEFT and
    RIGHT where the cut runs along the height.

    Coordinates are local to the rectangle: (0, 0) to (width, height).

    Attributes:
        position: Edge that is cut
        direction: Which end of the edge stays in place
        angle: Slant angle; only its magnitude matters
    """

    position: DiagonalPosition = DiagonalPosition.BOTTOM
    direction: DiagonalDirection = DiagonalDirection.LEFT
    angle: Angle = Angle(math.pi / -20)

    def perpendicular_height(self, rect: Rect) -> float:
        """Displacement of the slanted edge's moving end."""
        return rect.width * math.tan(abs(self.angle.radians))

    def generate_path(self, rect: Rect) -> Path:
        w, h = rect.size
        d = self.perpendicular_height(rect)
        left = self.direction == DiagonalDirection.LEFT
        path = Path()

        if self.position == DiagonalPosition.BOTTOM:
            if left:
                path.move_to(0, 0).line_to(w, 0).line_to(w, h - d).line_to(0, h)
            else:
                path.move_to(w, h).line_to(0, h - d).line_to(0, 0).line_to(w, 0)
        elif self.position == DiagonalPosition.TOP:
            if left:
                path.move_to(w, h).line_to(w, d).line_to(0, 0).line_to(0, h)
            else:
                path.move_to(w, h).line_to(w, 0).line_to(0, d).line_to(0, h)
        elif self.position == DiagonalPosition.RIGHT:
            if left:
                path.move_to(0, 0).line_to(w, 0).line_to(w - d, h).line_to(0, h)
            else:
                path.move_to(0, 0).line_to(w - d, 0).line_to(w, h).line_to(0, h)
        else:
            if left:
                path.move_to(d, 0).line_to(w, 0).line_to(w, h).line_to(0, h)
            else:
                path.move_to(0, 0).line_to(w, 0).line_to(w, h).line_to(d, h)

        return path.close()
