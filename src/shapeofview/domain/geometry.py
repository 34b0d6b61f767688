"""Geometry value types shared by every shape.

This module defines the primitives shapes are built from:
- Point: A 2D point in canvas coordinates (y grows downwards)
- Rect: An axis-aligned rectangle given by its four edges
- Angle: An angle stored canonically in radians
- Radius / BorderRadius: Per-corner radii for rounded and cut corners
- EdgeInsets: Insets on the four sides of a rectangle
"""

import math
from dataclasses import dataclass

from shapeofview.exceptions import InvalidArgumentError


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D canvas space.

    Attributes:
        x: Horizontal coordinate
        y: Vertical coordinate, growing downwards
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)

    def distance_to(self, other: "Point") -> float:
        """Euclidean distance to another point."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def translate(self, dx: float, dy: float) -> "Point":
        """Return a copy moved by (dx, dy)."""
        return Point(self.x + dx, self.y + dy)


@dataclass(frozen=True, slots=True)
class Rect:
    """An axis-aligned rectangle.

    Width and height are never negative; a rectangle whose right edge lies
    left of its left edge (or bottom above top) is rejected.

    Attributes:
        left: X coordinate of the left edge
        top: Y coordinate of the top edge
        right: X coordinate of the right edge
        bottom: Y coordinate of the bottom edge
    """

    left: float
    top: float
    right: float
    bottom: float

    def __post_init__(self) -> None:
        if self.right < self.left or self.bottom < self.top:
            raise InvalidArgumentError(
                f"Rectangle has negative size: left={self.left}, top={self.top}, "
                f"right={self.right}, bottom={self.bottom}"
            )

    @classmethod
    def from_ltwh(cls, left: float, top: float, width: float, height: float) -> "Rect":
        """Create a rectangle from its top-left corner and size."""
        return cls(left, top, left + width, top + height)

    @classmethod
    def from_circle(cls, center: Point, radius: float) -> "Rect":
        """Create the square bounding a circle."""
        return cls(
            center.x - radius,
            center.y - radius,
            center.x + radius,
            center.y + radius,
        )

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    @property
    def size(self) -> tuple[float, float]:
        """(width, height) of the rectangle."""
        return (self.width, self.height)

    @property
    def center(self) -> Point:
        return Point((self.left + self.right) / 2.0, (self.top + self.bottom) / 2.0)

    @property
    def shortest_side(self) -> float:
        return min(self.width, self.height)

    @property
    def is_empty(self) -> bool:
        """True when the rectangle has no area."""
        return self.width <= 0 or self.height <= 0

    def shift(self, dx: float, dy: float) -> "Rect":
        """Return a copy translated by (dx, dy)."""
        return Rect(self.left + dx, self.top + dy, self.right + dx, self.bottom + dy)

    def deflate(self, insets: "EdgeInsets") -> "Rect":
        """Return the rectangle shrunk by the given insets."""
        return Rect(
            self.left + insets.left,
            self.top + insets.top,
            max(self.right - insets.right, self.left + insets.left),
            max(self.bottom - insets.bottom, self.top + insets.top),
        )

    def contains(self, point: Point, tolerance: float = 0.0) -> bool:
        """Check whether a point lies inside or on the rectangle."""
        return (
            self.left - tolerance <= point.x <= self.right + tolerance
            and self.top - tolerance <= point.y <= self.bottom + tolerance
        )

    def to_tuple(self) -> tuple[float, float, float, float]:
        """Convert to (left, top, right, bottom)."""
        return (self.left, self.top, self.right, self.bottom)


@dataclass(frozen=True, slots=True)
class Angle:
    """An angle value stored in radians.

    Two angles are equal when their radian values are identical, so
    ``Angle.from_degrees(180) == Angle.from_radians(math.pi)`` holds while
    angles converted from slightly different degree values do not compare
    equal.

    Attributes:
        radians: The angle in radians
    """

    radians: float = 0.0

    @classmethod
    def from_radians(cls, value: float) -> "Angle":
        return cls(float(value))

    @classmethod
    def from_degrees(cls, value: float) -> "Angle":
        return cls(math.radians(value))

    @property
    def degrees(self) -> float:
        return math.degrees(self.radians)

    def __abs__(self) -> "Angle":
        return Angle(abs(self.radians))


@dataclass(frozen=True, slots=True)
class Radius:
    """An elliptical corner radius.

    Shapes in this package only consume the horizontal component.
    """

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def circular(cls, radius: float) -> "Radius":
        return cls(radius, radius)

    @classmethod
    def elliptical(cls, x: float, y: float) -> "Radius":
        return cls(x, y)


_ZERO_RADIUS = Radius()


@dataclass(frozen=True, slots=True)
class BorderRadius:
    """Independent radii for the four corners of a rectangle."""

    top_left: Radius = _ZERO_RADIUS
    top_right: Radius = _ZERO_RADIUS
    bottom_left: Radius = _ZERO_RADIUS
    bottom_right: Radius = _ZERO_RADIUS

    @classmethod
    def all(cls, radius: Radius) -> "BorderRadius":
        """Use the same radius on every corner."""
        return cls(radius, radius, radius, radius)

    @classmethod
    def circular(cls, radius: float) -> "BorderRadius":
        """Use the same circular radius on every corner."""
        return cls.all(Radius.circular(radius))

    @classmethod
    def only(
        cls,
        top_left: Radius = _ZERO_RADIUS,
        top_right: Radius = _ZERO_RADIUS,
        bottom_left: Radius = _ZERO_RADIUS,
        bottom_right: Radius = _ZERO_RADIUS,
    ) -> "BorderRadius":
        return cls(top_left, top_right, bottom_left, bottom_right)

    @classmethod
    def zero(cls) -> "BorderRadius":
        return cls()

    def corners(self) -> tuple[Radius, Radius, Radius, Radius]:
        """Corners in (top_left, top_right, bottom_left, bottom_right) order."""
        return (self.top_left, self.top_right, self.bottom_left, self.bottom_right)


@dataclass(frozen=True, slots=True)
class EdgeInsets:
    """Offsets from each side of a rectangle."""

    left: float = 0.0
    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0

    @classmethod
    def all(cls, value: float) -> "EdgeInsets":
        return cls(value, value, value, value)

    @classmethod
    def zero(cls) -> "EdgeInsets":
        return cls()

    @property
    def is_zero(self) -> bool:
        return self.left == 0 and self.top == 0 and self.right == 0 and self.bottom == 0
