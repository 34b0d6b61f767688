"""Regular polygon inscribed in the rectangle."""

import math
from dataclasses import dataclass

from shapeofview.core.base import Shape
from shapeofview.core.geometry import polar_point
from shapeofview.domain import Path, Point, Rect
from shapeofview.exceptions import ShapeParameterError


@dataclass(frozen=True, slots=True)
class PolygonShape(Shape):
    """A regular polygon on the circle of radius ``min(w, h) / 2``.

    The first vertex sits at angle 0 (rightmost point) and the rest follow
    at steps of ``2*pi / number_of_sides``.

    Raises:
        ShapeParameterError: If ``number_of_sides`` is below 3
    """

    number_of_sides: int = 5

    def __post_init__(self) -> None:
        if self.number_of_sides < 3:
            raise ShapeParameterError(
                "PolygonShape",
                "number_of_sides",
                f"must be at least 3, got {self.number_of_sides}",
            )

    def generate_path(self, rect: Rect) -> Path:
        w, h = rect.size
        section = 2.0 * math.pi / self.number_of_sides
        radius = min(w, h) / 2
        center = Point(w / 2, h / 2)

        first = polar_point(center, radius, 0.0)
        path = Path().move_to(first.x, first.y)
        for i in range(1, self.number_of_sides):
            vertex = polar_point(center, radius, section * i)
            path.line_to(vertex.x, vertex.y)
        return path.close()
