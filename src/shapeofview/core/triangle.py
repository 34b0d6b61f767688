"""Triangle with vertices on the left, bottom and right edges."""

from dataclasses import dataclass

from shapeofview.core.base import Shape
from shapeofview.domain import Path, Rect


@dataclass(frozen=True, slots=True)
class TriangleShape(Shape):
    """A triangle spanning the rectangle.

    Vertices are ``(0, percent_left * h)``, ``(percent_bottom * w, h)`` and
    ``(w, percent_right * h)``. Percentages outside [0, 1] are accepted and
    place vertices outside the rectangle.
    """

    percent_bottom: float = 0.5
    percent_left: float = 0.0
    percent_right: float = 0.0

    def generate_path(self, rect: Rect) -> Path:
        w, h = rect.size
        return (
            Path()
            .move_to(0.0, self.percent_left * h)
            .line_to(self.percent_bottom * w, h)
            .line_to(w, self.percent_right * h)
            .close()
        )
