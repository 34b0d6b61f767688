"""Shape contracts and the canvas protocol borders paint onto.

- Shape: Anything that turns a rectangle into a closed Path
- BorderShape: Optional capability to stroke a decorative border
- Canvas: The drawing surface a host rendering layer provides
"""

from abc import ABC, abstractmethod
from typing import Protocol, runtime_checkable

from shapeofview.domain import FillStyle, Path, Point, Rect, StrokeStyle
from shapeofview.exceptions import InvalidArgumentError


class Shape(ABC):
    """A pure function from a rectangle to a closed outline.

    Concrete shapes are immutable values holding only their configuration.
    They implement ``generate_path``; ``build`` checks the per-call
    preconditions shared by every shape.
    """

    __slots__ = ()

    def build(self, rect: Rect | None = None, scale: float | None = None) -> Path:
        """Build the outline for ``rect``.

        Args:
            rect: Rectangle to shape, in the caller's coordinates
            scale: Accepted for interface compatibility; no shape uses it

        Returns:
            A fresh, closed Path

        Raises:
            InvalidArgumentError: If no rectangle is given
        """
        if rect is None:
            raise InvalidArgumentError(f"{type(self).__name__}.build() requires a rectangle")
        return self.generate_path(rect)

    @abstractmethod
    def generate_path(self, rect: Rect) -> Path:
        """Compute the outline for a rectangle."""


class BorderShape(ABC):
    """Capability of shapes that stroke a border independent of their clip."""

    __slots__ = ()

    @abstractmethod
    def draw_border(self, canvas: "Canvas", rect: Rect) -> None:
        """Stroke the border for ``rect`` onto ``canvas``."""


@runtime_checkable
class Canvas(Protocol):
    """Drawing surface supplied by the host rendering layer."""

    def save(self) -> None: ...

    def restore(self) -> None: ...

    def translate(self, dx: float, dy: float) -> None: ...

    def clip_path(self, path: Path, anti_alias: bool = True) -> None: ...

    def draw_shadow(self, path: Path, elevation: float) -> None: ...

    def draw_path(
        self,
        path: Path,
        fill: FillStyle | None = None,
        stroke: StrokeStyle | None = None,
    ) -> None: ...

    def draw_circle(self, center: Point, radius: float, stroke: StrokeStyle) -> None: ...
