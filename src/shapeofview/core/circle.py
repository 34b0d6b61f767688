"""Circle inscribed in the bounding rectangle, with an optional border."""

import logging
from dataclasses import dataclass, field

from shapeofview.config import BorderStyle
from shapeofview.core.base import BorderShape, Canvas, Shape
from shapeofview.domain import Path, Point, Rect

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CircleShape(Shape, BorderShape):
    """A circle centered in the rectangle with radius ``min(w, h) / 2``.

    Attributes:
        border: Border stroke; the default width of 0 draws nothing
    """

    border: BorderStyle = field(default_factory=BorderStyle)

    def generate_path(self, rect: Rect) -> Path:
        radius = min(rect.width / 2.0, rect.height / 2.0)
        center = Point(rect.width / 2.0, rect.height / 2.0)
        return Path().add_oval(Rect.from_circle(center, radius))

    def draw_border(self, canvas: Canvas, rect: Rect) -> None:
        """Stroke a circle that stays inside the clip outline.

        The radius is reduced by half the stroke width so the whole stroke
        falls within the clipped area.
        """
        if not self.border.enabled:
            return

        width = self.border.width
        radius = min((rect.width - width) / 2.0, (rect.height - width) / 2.0)
        logger.debug("Drawing circle border: radius=%.2f width=%.2f", radius, width)
        canvas.draw_circle(rect.center, radius, self.border.stroke())
