"""Rectangle with beveled corners."""

from dataclasses import dataclass

from shapeofview.core.base import Shape
from shapeofview.domain import BorderRadius, Path, Rect


@dataclass(frozen=True, slots=True)
class CutCornerShape(Shape):
    """A rectangle whose corners are cut off by straight diagonals.

    Each cut runs ``max(radius.x, 0)`` along both edges meeting at the
    corner. Cuts are not clamped against each other, so very large values
    produce a self-intersecting outline.

    Attributes:
        border_radius: Cut size per corner; None keeps all corners sharp
    """

    border_radius: BorderRadius | None = None

    def generate_path(self, rect: Rect) -> Path:
        radius = self.border_radius or BorderRadius.zero()
        top_left = max(radius.top_left.x, 0.0)
        top_right = max(radius.top_right.x, 0.0)
        bottom_left = max(radius.bottom_left.x, 0.0)
        bottom_right = max(radius.bottom_right.x, 0.0)

        return (
            Path()
            .move_to(rect.left + top_left, rect.top)
            .line_to(rect.right - top_right, rect.top)
            .line_to(rect.right, rect.top + top_right)
            .line_to(rect.right, rect.bottom - bottom_right)
            .line_to(rect.right - bottom_right, rect.bottom)
            .line_to(rect.left + bottom_left, rect.bottom)
            .line_to(rect.left, rect.bottom - bottom_left)
            .line_to(rect.left, rect.top + top_left)
            .line_to(rect.left + top_left, rect.top)
            .close()
        )
