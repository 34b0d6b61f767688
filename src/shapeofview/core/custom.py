"""Shape backed by a caller-supplied path builder."""

from collections.abc import Callable
from dataclasses import dataclass

from shapeofview.core.base import Shape
from shapeofview.domain import Path, Rect
from shapeofview.exceptions import InvalidStateError

ShapeBuilder = Callable[[Rect], Path]


@dataclass(frozen=True, slots=True)
class CustomShape(Shape):
    """Delegates outline generation to ``builder(rect)``.

    Attributes:
        builder: Function returning the outline for a rectangle
    """

    builder: ShapeBuilder | None = None

    def generate_path(self, rect: Rect) -> Path:
        """Call the builder.

        Raises:
            InvalidStateError: If no builder is set or it returns something
                other than a Path
        """
        if self.builder is None:
            raise InvalidStateError("CustomShape has no builder function")

        path = self.builder(rect)
        if not isinstance(path, Path):
            raise InvalidStateError(
                f"CustomShape builder returned {type(path).__name__}, expected Path"
            )
        return path
