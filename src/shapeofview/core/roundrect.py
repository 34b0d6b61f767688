"""Rectangle with independently rounded corners."""

import logging
import math
from dataclasses import dataclass, field

from shapeofview.config import BorderStyle
from shapeofview.core.base import BorderShape, Canvas, Shape
from shapeofview.core.geometry import clamp_corner_radius
from shapeofview.domain import BorderRadius, Path, Rect

logger = logging.getLogger(__name__)

_QUARTER_TURN = math.pi / 2.0


@dataclass(frozen=True, slots=True)
class RoundRectShape(Shape, BorderShape):
    """A rectangle whose corners are quarter-circle arcs.

    Each corner radius is the magnitude of its horizontal component, clamped
    to half the shorter side so adjacent corners never overlap.

    Attributes:
        border_radius: Per-corner radii (12 on every corner by default)
        border: Border stroke; the default width of 0 draws nothing
        use_bezier: Round corners with quadratic Beziers instead of true arcs
    """

    border_radius: BorderRadius = field(default_factory=lambda: BorderRadius.circular(12))
    border: BorderStyle = field(default_factory=BorderStyle)
    use_bezier: bool = False

    def generate_path(self, rect: Rect) -> Path:
        return self.corner_path(rect, use_bezier=self.use_bezier)

    def corner_path(self, rect: Rect, use_bezier: bool) -> Path:
        """Trace the outline clockwise from just right of the top-left corner.

        Args:
            rect: Rectangle to round
            use_bezier: Quadratic corners anchored at the tangent points
                instead of arcs

        Returns:
            Closed outline
        """
        left, top, right, bottom = rect.to_tuple()

        top_left = clamp_corner_radius(self.border_radius.top_left.x, rect)
        top_right = clamp_corner_radius(self.border_radius.top_right.x, rect)
        bottom_left = clamp_corner_radius(self.border_radius.bottom_left.x, rect)
        bottom_right = clamp_corner_radius(self.border_radius.bottom_right.x, rect)

        if logger.isEnabledFor(logging.DEBUG):
            requested = [abs(r.x) for r in self.border_radius.corners()]
            clamped = [top_left, top_right, bottom_left, bottom_right]
            if requested != clamped:
                logger.debug("Clamped corner radii %s to %s", requested, clamped)

        path = Path().move_to(left + top_left, top)

        path.line_to(right - top_right, top)
        if use_bezier:
            path.quadratic_bezier_to(right, top, right, top + top_right)
        elif top_right > 0:
            path.arc_to(
                Rect(right - top_right * 2.0, top, right, top + top_right * 2.0),
                -_QUARTER_TURN,
                _QUARTER_TURN,
            )

        path.line_to(right, bottom - bottom_right)
        if use_bezier:
            path.quadratic_bezier_to(right, bottom, right - bottom_right, bottom)
        elif bottom_right > 0:
            path.arc_to(
                Rect(right - bottom_right * 2.0, bottom - bottom_right * 2.0, right, bottom),
                0.0,
                _QUARTER_TURN,
            )

        path.line_to(left + bottom_left, bottom)
        if use_bezier:
            path.quadratic_bezier_to(left, bottom, left, bottom - bottom_left)
        elif bottom_left > 0:
            path.arc_to(
                Rect(left, bottom - bottom_left * 2.0, left + bottom_left * 2.0, bottom),
                _QUARTER_TURN,
                _QUARTER_TURN,
            )

        path.line_to(left, top + top_left)
        if use_bezier:
            path.quadratic_bezier_to(left, top, left + top_left, top)
        elif top_left > 0:
            path.arc_to(
                Rect(left, top, left + top_left * 2.0, top + top_left * 2.0),
                math.pi,
                _QUARTER_TURN,
            )

        return path.close()

    def draw_border(self, canvas: Canvas, rect: Rect) -> None:
        """Stroke the outline with true arc corners, even in Bezier mode."""
        if not self.border.enabled:
            return
        canvas.draw_path(self.corner_path(rect, use_bezier=False), stroke=self.border.stroke())
