"""Presentation values used when painting borders and fills."""

import re
from dataclasses import dataclass

from shapeofview.exceptions import InvalidArgumentError

_HEX_COLOR = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")


@dataclass(frozen=True, slots=True)
class Color:
    """A 32-bit ARGB color, e.g. ``Color(0xFFFFFFFF)`` for opaque white."""

    value: int

    def __post_init__(self) -> None:
        if not 0 <= self.value <= 0xFFFFFFFF:
            raise InvalidArgumentError(f"Color value out of range: {self.value:#x}")

    @classmethod
    def from_argb(cls, a: int, r: int, g: int, b: int) -> "Color":
        return cls(((a & 0xFF) << 24) | ((r & 0xFF) << 16) | ((g & 0xFF) << 8) | (b & 0xFF))

    @classmethod
    def from_hex(cls, text: str) -> "Color":
        """Parse ``#rgb``, ``#rrggbb`` or ``#aarrggbb``.

        Raises:
            InvalidArgumentError: If the text is not a hex color
        """
        match = _HEX_COLOR.match(text.strip())
        if match is None:
            raise InvalidArgumentError(f"Not a hex color: {text!r}")
        digits = match.group(1)
        if len(digits) == 3:
            digits = "".join(ch * 2 for ch in digits)
        if len(digits) == 6:
            digits = "ff" + digits
        return cls(int(digits, 16))

    @property
    def alpha(self) -> int:
        return (self.value >> 24) & 0xFF

    @property
    def red(self) -> int:
        return (self.value >> 16) & 0xFF

    @property
    def green(self) -> int:
        return (self.value >> 8) & 0xFF

    @property
    def blue(self) -> int:
        return self.value & 0xFF

    @property
    def opacity(self) -> float:
        return self.alpha / 255.0

    def to_css(self) -> str:
        """Render as ``#rrggbb`` (opacity is carried separately)."""
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"

    def to_hex(self) -> str:
        return f"#{self.value:08x}"


WHITE = Color(0xFFFFFFFF)
BLACK = Color(0xFF000000)
TRANSPARENT = Color(0x00000000)


@dataclass(frozen=True, slots=True)
class StrokeStyle:
    """How an outline is stroked.

    Built fresh for each border draw; shapes never hold one.
    """

    color: Color = WHITE
    width: float = 1.0
    anti_alias: bool = True


@dataclass(frozen=True, slots=True)
class FillStyle:
    """How an area is filled."""

    color: Color = BLACK
    anti_alias: bool = True
