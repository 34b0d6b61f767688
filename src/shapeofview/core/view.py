"""Container that clips content to a shape and draws its elevation."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from shapeofview.config import Clip, ViewConfig
from shapeofview.core.base import Canvas, Shape
from shapeofview.core.border import ShapeOfViewBorder
from shapeofview.domain import Rect
from shapeofview.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)

ContentPainter = Callable[[Canvas, Rect], None]


@dataclass(frozen=True)
class ShapeOfView:
    """A shaped container: shadow, clipped content, then border.

    Attributes:
        shape: Outline of the container
        elevation: Shadow elevation; 0 draws no shadow
        clip_behavior: How content is clipped to the outline
        width: Fixed width, or None to fill the available width
        height: Fixed height, or None to fill the available height
    """

    shape: Shape
    elevation: float = 4.0
    clip_behavior: Clip = Clip.ANTI_ALIAS
    width: float | None = None
    height: float | None = None
    border: ShapeOfViewBorder = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.shape is None:
            raise InvalidArgumentError("ShapeOfView requires a shape")
        if self.elevation < 0:
            raise InvalidArgumentError(f"Elevation must be non-negative, got {self.elevation}")
        for name in ("width", "height"):
            value = getattr(self, name)
            if value is not None and value < 0:
                raise InvalidArgumentError(f"{name.capitalize()} must be non-negative, got {value}")
        object.__setattr__(self, "border", ShapeOfViewBorder(self.shape))

    @classmethod
    def from_config(
        cls,
        shape: Shape,
        config: ViewConfig,
        width: float | None = None,
        height: float | None = None,
    ) -> "ShapeOfView":
        """Create a view using elevation and clip behavior from ``config``."""
        return cls(
            shape=shape,
            elevation=config.elevation,
            clip_behavior=config.clip_behavior,
            width=width,
            height=height,
        )

    def resolve_rect(self, available: Rect) -> Rect:
        """Place the view at the top-left of ``available``.

        Fixed dimensions are honored but never exceed the available space.
        """
        width = available.width if self.width is None else min(self.width, available.width)
        height = available.height if self.height is None else min(self.height, available.height)
        return Rect.from_ltwh(available.left, available.top, width, height)

    def paint(
        self,
        canvas: Canvas,
        available: Rect,
        content: ContentPainter | None = None,
    ) -> Rect:
        """Paint the view onto ``canvas``.

        Shapes work in local coordinates, so the canvas is translated to the
        view's top-left corner first.

        Args:
            canvas: Surface to draw on
            available: Space offered by the parent
            content: Called with the canvas and the local rectangle while
                the clip is active

        Returns:
            The rectangle the view occupies
        """
        rect = self.resolve_rect(available)
        local = Rect(0.0, 0.0, rect.width, rect.height)
        outline = self.border.outer_path(local)

        logger.debug(
            "Painting %s at %s (elevation=%s, clip=%s)",
            type(self.shape).__name__,
            rect.to_tuple(),
            self.elevation,
            self.clip_behavior.value,
        )

        canvas.save()
        canvas.translate(rect.left, rect.top)

        if self.elevation > 0:
            canvas.draw_shadow(outline, self.elevation)

        clipped = self.clip_behavior != Clip.NONE
        if clipped:
            canvas.save()
            canvas.clip_path(outline, anti_alias=self.clip_behavior != Clip.HARD_EDGE)

        if content is not None:
            content(canvas, local)

        if clipped:
            canvas.restore()

        self.border.paint(canvas, local)
        canvas.restore()
        return rect
