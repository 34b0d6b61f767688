"""Star with alternating outer and inner vertices."""

import math
from dataclasses import dataclass

from shapeofview.core.base import Shape
from shapeofview.domain import Path, Rect
from shapeofview.exceptions import ShapeParameterError


@dataclass(frozen=True, slots=True)
class StarShape(Shape):
    """A star with ``no_of_points`` tips.

    Vertex ``i`` lies at angle ``i * alpha`` with ``alpha = 2*pi / (2n)``,
    measured with sine on x and cosine on y, at the outer radius
    ``min(w, h) / 2`` for odd ``i`` and half of it for even ``i``. Vertices
    are enumerated from ``2n + 1`` down to 1; vertex 1 coincides with
    vertex ``2n + 1``, so the close command lands on it.

    Raises:
        ShapeParameterError: If ``no_of_points`` is 3 or less
    """

    no_of_points: int = 5

    def __post_init__(self) -> None:
        if self.no_of_points <= 3:
            raise ShapeParameterError(
                "StarShape", "no_of_points", f"must be greater than 3, got {self.no_of_points}"
            )

    def generate_path(self, rect: Rect) -> Path:
        w, h = rect.size
        vertices = self.no_of_points * 2
        alpha = (2 * math.pi) / vertices
        radius = min(w, h) / 2.0
        center_x = w / 2
        center_y = h / 2

        path = Path()
        for i in range(vertices + 1, 1, -1):
            r = radius * (i % 2 + 1) / 2
            omega = alpha * i
            x = r * math.sin(omega) + center_x
            y = r * math.cos(omega) + center_y
            if i == vertices + 1:
                path.move_to(x, y)
            else:
                path.line_to(x, y)
        return path.close()
