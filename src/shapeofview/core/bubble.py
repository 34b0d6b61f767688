"""Speech bubble: rounded body with a triangular arrow on one edge."""

import logging
from dataclasses import dataclass
from enum import Enum

from shapeofview.core.base import Shape
from shapeofview.domain import Path, Rect

logger = logging.getLogger(__name__)


class BubblePosition(str, Enum):
    """Edge the arrow protrudes from."""

    BOTTOM = "bottom"
    TOP = "top"
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True, slots=True)
class BubbleShape(Shape):
    """A rounded rectangle with an arrow, drawn as one continuous outline.

    The body is inset by ``arrow_height`` on the arrow's edge and the arrow
    apex touches the outer rectangle there. Corners are quadratic Beziers
    reaching ``border_radius / 2`` along each edge.

    Attributes:
        position: Edge carrying the arrow
        border_radius: Corner rounding of the body
        arrow_height: How far the arrow protrudes from the body
        arrow_width: Half the width of the arrow base
        arrow_position_percent: Arrow placement along its edge
    """

    position: BubblePosition = BubblePosition.BOTTOM
    border_radius: float = 12.0
    arrow_height: float = 10.0
    arrow_width: float = 10.0
    arrow_position_percent: float = 0.5

    def body_edges(self, rect: Rect) -> tuple[float, float, float, float]:
        """Left, top, right and bottom of the body once the arrow's space is removed.

        A rectangle thinner than the arrow gives inverted edges.
        """
        spacing = self.arrow_height
        return (
            rect.left + (spacing if self.position == BubblePosition.LEFT else 0.0),
            rect.top + (spacing if self.position == BubblePosition.TOP else 0.0),
            rect.right - (spacing if self.position == BubblePosition.RIGHT else 0.0),
            rect.bottom - (spacing if self.position == BubblePosition.BOTTOM else 0.0),
        )

    def generate_path(self, rect: Rect) -> Path:
        corner = max(self.border_radius, 0.0) / 2.0
        left, top, right, bottom = self.body_edges(rect)
        percent = self.arrow_position_percent
        arrow = self.arrow_width

        center_x = (rect.left + rect.right) * percent
        center_y = bottom - bottom * (1 - percent)

        logger.debug(
            "Bubble arrow on %s at (%.2f, %.2f)", self.position.value, center_x, center_y
        )

        path = Path().move_to(left + corner, top)

        if self.position == BubblePosition.TOP:
            path.line_to(center_x - arrow, top)
            path.line_to(center_x, rect.top)
            path.line_to(center_x + arrow, top)
        path.line_to(right - corner, top)
        path.quadratic_bezier_to(right, top, right, top + corner)

        if self.position == BubblePosition.RIGHT:
            path.line_to(right, center_y - arrow)
            path.line_to(rect.right, center_y)
            path.line_to(right, center_y + arrow)
        path.line_to(right, bottom - corner)
        path.quadratic_bezier_to(right, bottom, right - corner, bottom)

        if self.position == BubblePosition.BOTTOM:
            path.line_to(center_x + arrow, bottom)
            path.line_to(center_x, rect.bottom)
            path.line_to(center_x - arrow, bottom)
        path.line_to(left + corner, bottom)
        path.quadratic_bezier_to(left, bottom, left, bottom - corner)

        if self.position == BubblePosition.LEFT:
            path.line_to(left, center_y + arrow)
            path.line_to(rect.left, center_y)
            path.line_to(left, center_y - arrow)
        path.line_to(left, top + corner)
        path.quadratic_bezier_to(left, top, left + corner, top)

        return path.close()
