"""Named shape factories and the demo gallery.

Shapes can be created by name from ``key=value`` text options, which is how
the CLI builds them:

    >>> shape = create_shape("star", {"points": "6"})
    >>> shape.no_of_points
    6
"""

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import TypeVar

from pydantic import ValidationError

from shapeofview.config import BorderStyle
from shapeofview.core.arc import ArcDirection, ArcPosition, ArcShape
from shapeofview.core.base import Shape
from shapeofview.core.bubble import BubblePosition, BubbleShape
from shapeofview.core.circle import CircleShape
from shapeofview.core.cutcorner import CutCornerShape
from shapeofview.core.diagonal import DiagonalDirection, DiagonalPosition, DiagonalShape
from shapeofview.core.polygon import PolygonShape
from shapeofview.core.roundrect import RoundRectShape
from shapeofview.core.star import StarShape
from shapeofview.core.triangle import TriangleShape
from shapeofview.domain import Angle, BorderRadius, Radius
from shapeofview.exceptions import ShapeOptionError, UnknownShapeError

E = TypeVar("E", bound=Enum)

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


class _Options:
    """Typed access to text options; unread options are reported as errors."""

    def __init__(self, shape_name: str, options: Mapping[str, str]) -> None:
        self._shape_name = shape_name
        self._values = {
            key.strip().lower().replace("-", "_"): value for key, value in options.items()
        }
        self._read: set[str] = set()

    def raw(self, key: str) -> str | None:
        self._read.add(key)
        return self._values.get(key)

    def get_float(self, key: str, default: float) -> float:
        value = self.raw(key)
        if value is None:
            return default
        try:
            return float(value)
        except ValueError:
            raise ShapeOptionError(self._shape_name, key, f"expected a number, got {value!r}") from None

    def get_int(self, key: str, default: int) -> int:
        value = self.raw(key)
        if value is None:
            return default
        try:
            return int(value)
        except ValueError:
            raise ShapeOptionError(self._shape_name, key, f"expected an integer, got {value!r}") from None

    def get_bool(self, key: str, default: bool) -> bool:
        value = self.raw(key)
        if value is None:
            return default
        lowered = value.strip().lower()
        if lowered in _TRUE:
            return True
        if lowered in _FALSE:
            return False
        raise ShapeOptionError(self._shape_name, key, f"expected true/false, got {value!r}")

    def get_enum(self, key: str, enum_type: type[E], default: E) -> E:
        value = self.raw(key)
        if value is None:
            return default
        try:
            return enum_type(value.strip().lower())
        except ValueError:
            choices = ", ".join(member.value for member in enum_type)
            raise ShapeOptionError(
                self._shape_name, key, f"expected one of {choices}, got {value!r}"
            ) from None

    def border(self) -> BorderStyle:
        width = self.get_float("border_width", 0.0)
        color = self.raw("border_color") or "#ffffffff"
        try:
            return BorderStyle(width=width, color=color)
        except ValidationError as e:
            raise ShapeOptionError(self._shape_name, "border", str(e)) from e

    def border_radius(self, default: float) -> BorderRadius:
        radius = self.get_float("radius", default)
        return BorderRadius(
            top_left=Radius.circular(self.get_float("top_left", radius)),
            top_right=Radius.circular(self.get_float("top_right", radius)),
            bottom_left=Radius.circular(self.get_float("bottom_left", radius)),
            bottom_right=Radius.circular(self.get_float("bottom_right", radius)),
        )

    def check_consumed(self) -> None:
        unknown = sorted(set(self._values) - self._read)
        if unknown:
            raise ShapeOptionError(self._shape_name, unknown[0], "unknown option")


@dataclass(frozen=True)
class ShapeEntry:
    """A registered shape.

    Attributes:
        name: Lookup name
        description: One-line summary
        options: Option names mapped to help text
        factory: Builds the shape from parsed options
    """

    name: str
    description: str
    options: dict[str, str]
    factory: Callable[[_Options], Shape]


_BORDER_OPTIONS = {
    "border_width": "border stroke width (0 = none)",
    "border_color": "border color, #rrggbb or #aarrggbb",
}
_CORNER_OPTIONS = {
    "radius": "radius for every corner",
    "top_left": "top-left radius",
    "top_right": "top-right radius",
    "bottom_left": "bottom-left radius",
    "bottom_right": "bottom-right radius",
}

_REGISTRY: dict[str, ShapeEntry] = {}


def _register(entry: ShapeEntry) -> None:
    _REGISTRY[entry.name] = entry


_register(
    ShapeEntry(
        name="circle",
        description="circle inscribed in the rectangle",
        options=dict(_BORDER_OPTIONS),
        factory=lambda o: CircleShape(border=o.border()),
    )
)
_register(
    ShapeEntry(
        name="roundrect",
        description="rectangle with rounded corners",
        options={**_CORNER_OPTIONS, **_BORDER_OPTIONS, "bezier": "quadratic corners"},
        factory=lambda o: RoundRectShape(
            border_radius=o.border_radius(12.0),
            border=o.border(),
            use_bezier=o.get_bool("bezier", False),
        ),
    )
)
_register(
    ShapeEntry(
        name="cutcorner",
        description="rectangle with beveled corners",
        options=dict(_CORNER_OPTIONS),
        factory=lambda o: CutCornerShape(border_radius=o.border_radius(12.0)),
    )
)
_register(
    ShapeEntry(
        name="arc",
        description="rectangle with one curved edge",
        options={
            "position": "bottom | top | left | right",
            "direction": "outside | inside",
            "height": "bulge depth",
        },
        factory=lambda o: ArcShape(
            position=o.get_enum("position", ArcPosition, ArcPosition.BOTTOM),
            direction=o.get_enum("direction", ArcDirection, ArcDirection.OUTSIDE),
            height=o.get_float("height", 10.0),
        ),
    )
)
_register(
    ShapeEntry(
        name="diagonal",
        description="rectangle with one slanted edge",
        options={
            "position": "bottom | top | left | right",
            "direction": "left | right",
            "angle": "slant angle in degrees",
        },
        factory=lambda o: DiagonalShape(
            position=o.get_enum("position", DiagonalPosition, DiagonalPosition.BOTTOM),
            direction=o.get_enum("direction", DiagonalDirection, DiagonalDirection.LEFT),
            angle=Angle.from_degrees(o.get_float("angle", -9.0)),
        ),
    )
)
_register(
    ShapeEntry(
        name="triangle",
        description="triangle touching the left, bottom and right edges",
        options={
            "bottom": "bottom vertex position (fraction of width)",
            "left": "left vertex position (fraction of height)",
            "right": "right vertex position (fraction of height)",
        },
        factory=lambda o: TriangleShape(
            percent_bottom=o.get_float("bottom", 0.5),
            percent_left=o.get_float("left", 0.0),
            percent_right=o.get_float("right", 0.0),
        ),
    )
)
_register(
    ShapeEntry(
        name="bubble",
        description="speech bubble with an arrow",
        options={
            "position": "bottom | top | left | right",
            "radius": "corner rounding",
            "arrow_height": "arrow length",
            "arrow_width": "half the arrow base",
            "arrow_position": "arrow placement (fraction of the edge)",
        },
        factory=lambda o: BubbleShape(
            position=o.get_enum("position", BubblePosition, BubblePosition.BOTTOM),
            border_radius=o.get_float("radius", 12.0),
            arrow_height=o.get_float("arrow_height", 10.0),
            arrow_width=o.get_float("arrow_width", 10.0),
            arrow_position_percent=o.get_float("arrow_position", 0.5),
        ),
    )
)
_register(
    ShapeEntry(
        name="star",
        description="star with alternating tips",
        options={"points": "number of tips (> 3)"},
        factory=lambda o: StarShape(no_of_points=o.get_int("points", 5)),
    )
)
_register(
    ShapeEntry(
        name="polygon",
        description="regular polygon",
        options={"sides": "number of sides (>= 3)"},
        factory=lambda o: PolygonShape(number_of_sides=o.get_int("sides", 5)),
    )
)


def list_shapes() -> list[ShapeEntry]:
    """All registered shapes, in registration order."""
    return list(_REGISTRY.values())


def create_shape(name: str, options: Mapping[str, str] | None = None) -> Shape:
    """Create a registered shape from text options.

    Args:
        name: Registered shape name (case-insensitive)
        options: Option values keyed by option name

    Returns:
        The configured shape

    Raises:
        UnknownShapeError: If no shape is registered under ``name``
        ShapeOptionError: If an option is unknown or malformed
        ShapeParameterError: If the shape rejects a parameter
    """
    key = name.strip().lower()
    entry = _REGISTRY.get(key)
    if entry is None:
        raise UnknownShapeError(name)

    parsed = _Options(key, options or {})
    shape = entry.factory(parsed)
    parsed.check_consumed()
    return shape


def parse_options(pairs: Iterable[str], shape_name: str = "shape") -> dict[str, str]:
    """Parse ``key=value`` strings into a dict.

    Raises:
        ShapeOptionError: If an item has no ``=`` or an empty key
    """
    options: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key.strip():
            raise ShapeOptionError(shape_name, pair, "expected key=value")
        options[key.strip()] = value.strip()
    return options


def gallery_shapes() -> list[tuple[str, Shape]]:
    """The demo page grid: one configured example of each shape."""
    return [
        ("circle", CircleShape(border=BorderStyle(width=3, color="#ffffffff"))),
        (
            "roundrect",
            RoundRectShape(
                border_radius=BorderRadius.circular(12),
                border=BorderStyle(width=2, color="#ffffffff"),
            ),
        ),
        ("cutcorner", CutCornerShape(border_radius=BorderRadius.circular(12))),
        (
            "arc",
            ArcShape(direction=ArcDirection.OUTSIDE, height=20, position=ArcPosition.BOTTOM),
        ),
        (
            "diagonal",
            DiagonalShape(
                position=DiagonalPosition.BOTTOM,
                direction=DiagonalDirection.RIGHT,
                angle=Angle.from_degrees(10),
            ),
        ),
        ("triangle", TriangleShape(percent_bottom=0.5, percent_left=0, percent_right=0)),
        (
            "bubble",
            BubbleShape(
                position=BubblePosition.BOTTOM,
                arrow_position_percent=0.5,
                border_radius=20,
                arrow_height=10,
                arrow_width=10,
            ),
        ),
        ("star", StarShape(no_of_points=5)),
        ("polygon", PolygonShape(number_of_sides=9)),
    ]


def gallery_header() -> Shape:
    """The slanted banner across the top of the demo page."""
    return DiagonalShape(angle=Angle.from_degrees(15))
