"""Adapter exposing any Shape through the clip/border contract hosts expect."""

import logging

from shapeofview.core.base import BorderShape, Canvas, Shape
from shapeofview.domain import EdgeInsets, Path, Rect
from shapeofview.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)


class ShapeOfViewBorder:
    """Wraps a shape as a clip outline provider with an optional border.

    Whether the shape can draw a border is decided once, here, rather than
    on every paint.

    Args:
        shape: The shape defining the outline

    Raises:
        InvalidArgumentError: If ``shape`` is None
    """

    __slots__ = ("_shape", "_border_shape")

    def __init__(self, shape: Shape) -> None:
        if shape is None:
            raise InvalidArgumentError("ShapeOfViewBorder requires a shape")
        self._shape = shape
        self._border_shape: BorderShape | None = (
            shape if isinstance(shape, BorderShape) else None
        )
        logger.debug(
            "Wrapped %s (border capable: %s)",
            type(shape).__name__,
            self._border_shape is not None,
        )

    @property
    def shape(self) -> Shape:
        return self._shape

    @property
    def draws_border(self) -> bool:
        return self._border_shape is not None

    @property
    def dimensions(self) -> EdgeInsets:
        """The shape defines the whole boundary, so there is no inset."""
        return EdgeInsets.zero()

    def inner_path(self, rect: Rect) -> Path:
        return Path()

    def outer_path(self, rect: Rect) -> Path:
        return self._shape.build(rect, scale=1)

    def paint(self, canvas: Canvas, rect: Rect) -> None:
        """Draw the shape's border, if it has one."""
        if self._border_shape is not None:
            self._border_shape.draw_border(canvas, rect)

    def scale(self, t: float) -> "ShapeOfViewBorder":
        """Shapes size themselves from the rectangle, so scaling is a no-op."""
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ShapeOfViewBorder):
            return False
        return self._shape == other._shape

    def __hash__(self) -> int:
        return hash(self._shape)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._shape!r})"
