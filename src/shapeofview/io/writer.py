"""SVG rendering for shaped views.

SvgCanvas implements the Canvas protocol by emitting SVG elements, so a
ShapeOfView paints into it exactly as it would into a host renderer:
- save/restore become nested groups
- clip_path becomes a <clipPath> referenced by a group
- draw_shadow becomes a blurred, offset copy of the outline
"""

import itertools
import logging
from pathlib import Path as FilePath
from xml.sax.saxutils import escape

from shapeofview.config import RenderConfig, ShapeOfViewSettings
from shapeofview.core import ShapeOfView
from shapeofview.core.registry import gallery_header, gallery_shapes
from shapeofview.domain import Color, FillStyle, Path, Point, Rect, StrokeStyle
from shapeofview.exceptions import InvalidStateError, RenderError
from shapeofview.io.converter import format_number, path_to_svg

logger = logging.getLogger(__name__)

_HEADER_FILL = "#ff263238"
_LABEL_COLOR = "#ff616161"
_LABEL_SIZE = 12.0


def _paint_attrs(prefix: str, color: Color) -> str:
    attrs = f'{prefix}="{color.to_css()}"'
    if color.alpha != 0xFF:
        attrs += f' {prefix}-opacity="{format_number(color.opacity)}"'
    return attrs


class SvgCanvas:
    """Canvas that records drawing operations as an SVG document.

    Example:
        canvas = SvgCanvas(200, 200)
        view.paint(canvas, Rect(10, 10, 190, 190), content)
        svg = canvas.to_svg()
    """

    def __init__(
        self,
        width: float,
        height: float,
        background: Color | None = None,
        shadow_color: Color = Color(0x66000000),
    ) -> None:
        """Initialize an empty canvas.

        Args:
            width: Document width
            height: Document height
            background: Optional color filling the whole canvas
            shadow_color: Color used by draw_shadow
        """
        self._width = width
        self._height = height
        self._background = background
        self._shadow_color = shadow_color
        self._defs: list[str] = []
        self._body: list[str] = []
        # Number of groups opened since each save()
        self._saves: list[int] = []
        self._root_groups = 0
        self._ids = itertools.count(1)

    @property
    def save_count(self) -> int:
        return len(self._saves)

    def _emit(self, element: str) -> None:
        self._body.append("  " * (self._depth() + 1) + element)

    def _depth(self) -> int:
        return self._root_groups + sum(self._saves)

    def _open_group(self, attrs: str) -> None:
        self._emit(f"<g {attrs}>")
        if self._saves:
            self._saves[-1] += 1
        else:
            self._root_groups += 1

    def _close_groups(self, count: int) -> None:
        for _ in range(count):
            if self._saves:
                self._saves[-1] -= 1
            else:
                self._root_groups -= 1
            self._emit("</g>")

    def save(self) -> None:
        self._saves.append(0)

    def restore(self) -> None:
        if not self._saves:
            raise InvalidStateError("restore() called without a matching save()")
        self._close_groups(self._saves[-1])
        self._saves.pop()

    def translate(self, dx: float, dy: float) -> None:
        if dx == 0 and dy == 0:
            return
        self._open_group(
            f'transform="translate({format_number(dx)} {format_number(dy)})"'
        )

    def clip_path(self, path: Path, anti_alias: bool = True) -> None:
        clip_id = f"clip{next(self._ids)}"
        self._defs.append(
            f'<clipPath id="{clip_id}"><path d="{path_to_svg(path)}"/></clipPath>'
        )
        attrs = f'clip-path="url(#{clip_id})"'
        if not anti_alias:
            attrs += ' shape-rendering="crispEdges"'
        self._open_group(attrs)

    def draw_shadow(self, path: Path, elevation: float) -> None:
        if elevation <= 0:
            return
        filter_id = f"shadow{next(self._ids)}"
        blur = format_number(elevation / 2)
        self._defs.append(
            f'<filter id="{filter_id}" x="-50%" y="-50%" width="200%" height="200%">'
            f'<feGaussianBlur stdDeviation="{blur}"/></filter>'
        )
        self._emit(
            f'<path d="{path_to_svg(path)}" {_paint_attrs("fill", self._shadow_color)} '
            f'transform="translate(0 {blur})" filter="url(#{filter_id})"/>'
        )

    def draw_path(
        self,
        path: Path,
        fill: FillStyle | None = None,
        stroke: StrokeStyle | None = None,
    ) -> None:
        attrs = [f'd="{path_to_svg(path)}"']
        attrs.append(_paint_attrs("fill", fill.color) if fill is not None else 'fill="none"')
        if stroke is not None:
            attrs.append(_paint_attrs("stroke", stroke.color))
            attrs.append(f'stroke-width="{format_number(stroke.width)}"')
        self._emit(f"<path {' '.join(attrs)}/>")

    def draw_circle(self, center: Point, radius: float, stroke: StrokeStyle) -> None:
        self._emit(
            f'<circle cx="{format_number(center.x)}" cy="{format_number(center.y)}" '
            f'r="{format_number(max(radius, 0.0))}" fill="none" '
            f'{_paint_attrs("stroke", stroke.color)} '
            f'stroke-width="{format_number(stroke.width)}"/>'
        )

    def draw_rect(self, rect: Rect, fill: FillStyle) -> None:
        self._emit(
            f'<rect x="{format_number(rect.left)}" y="{format_number(rect.top)}" '
            f'width="{format_number(rect.width)}" height="{format_number(rect.height)}" '
            f'{_paint_attrs("fill", fill.color)}/>'
        )

    def draw_text(self, position: Point, text: str, color: Color, size: float) -> None:
        self._emit(
            f'<text x="{format_number(position.x)}" y="{format_number(position.y)}" '
            f'text-anchor="middle" font-family="sans-serif" '
            f'font-size="{format_number(size)}" {_paint_attrs("fill", color)}>'
            f"{escape(text)}</text>"
        )

    def to_svg(self, title: str | None = None) -> str:
        """Serialize the canvas to an SVG document.

        Raises:
            InvalidStateError: If a save() was never restored
        """
        if self._saves:
            raise InvalidStateError(f"{len(self._saves)} save() call(s) were never restored")

        width = format_number(self._width)
        height = format_number(self._height)
        lines = [
            '<svg xmlns="http://www.w3.org/2000/svg" '
            f'width="{width}" height="{height}" viewBox="0 0 {width} {height}">'
        ]
        if title:
            lines.append(f"  <title>{escape(title)}</title>")
        if self._defs:
            lines.append("  <defs>")
            lines.extend(f"    {definition}" for definition in self._defs)
            lines.append("  </defs>")
        if self._background is not None:
            lines.append(
                f'  <rect width="{width}" height="{height}" '
                f"{_paint_attrs('fill', self._background)}/>"
            )
        lines.extend(self._body)
        lines.extend("  </g>" for _ in range(self._root_groups))
        lines.append("</svg>")
        return "\n".join(lines) + "\n"


def _fill_content(color: Color):
    def paint(canvas: SvgCanvas, rect: Rect) -> None:
        canvas.draw_rect(rect, FillStyle(color=color))

    return paint


def render_view(view: ShapeOfView, config: RenderConfig | None = None) -> str:
    """Render one view, filled with the configured color, to SVG.

    Args:
        view: Container to paint
        config: Canvas size, padding and colors

    Returns:
        SVG document text
    """
    config = config or RenderConfig()
    canvas = SvgCanvas(
        config.width,
        config.height,
        background=Color.from_hex(config.background),
        shadow_color=Color.from_hex(config.shadow_color),
    )
    available = Rect(
        config.padding,
        config.padding,
        max(config.width - config.padding, config.padding),
        max(config.height - config.padding, config.padding),
    )
    rect = view.paint(canvas, available, _fill_content(Color.from_hex(config.fill)))
    logger.debug("Rendered %s into %s", type(view.shape).__name__, rect.to_tuple())
    return canvas.to_svg(title=type(view.shape).__name__)


def render_gallery(settings: ShapeOfViewSettings | None = None) -> str:
    """Render the demo page: a slanted header above a grid of every shape.

    Returns:
        SVG document text
    """
    settings = settings or ShapeOfViewSettings()
    config = settings.render
    cell = config.gallery_cell_size
    gap = config.gallery_spacing
    columns = config.gallery_columns
    entries = gallery_shapes()
    rows = -(-len(entries) // columns)

    header_height = 300.0
    grid_top = header_height - cell * 0.7
    page_width = columns * cell + (columns - 1) * gap + 2 * gap
    page_height = grid_top + rows * (cell + gap + _LABEL_SIZE * 2) + gap

    canvas = SvgCanvas(
        page_width,
        page_height,
        background=Color.from_hex(config.background),
        shadow_color=Color.from_hex(config.shadow_color),
    )

    header = ShapeOfView(
        shape=gallery_header(),
        elevation=settings.view.elevation,
        clip_behavior=settings.view.clip_behavior,
        height=header_height,
    )
    header.paint(
        canvas,
        Rect(0.0, 0.0, page_width, page_height),
        _fill_content(Color.from_hex(_HEADER_FILL)),
    )

    fill = _fill_content(Color.from_hex(config.fill))
    label_color = Color.from_hex(_LABEL_COLOR)
    for index, (label, shape) in enumerate(entries):
        row, column = divmod(index, columns)
        left = gap + column * (cell + gap)
        top = grid_top + row * (cell + gap + _LABEL_SIZE * 2)
        view = ShapeOfView(
            shape=shape,
            elevation=2.0,
            clip_behavior=settings.view.clip_behavior,
            width=cell,
            height=cell,
        )
        view.paint(canvas, Rect.from_ltwh(left, top, cell, cell), fill)
        canvas.draw_text(
            Point(left + cell / 2, top + cell + _LABEL_SIZE * 1.5),
            label,
            label_color,
            _LABEL_SIZE,
        )

    logger.debug("Rendered gallery with %d shapes", len(entries))
    return canvas.to_svg(title="ShapeOfView gallery")


class SvgWriter:
    """Writes SVG documents to disk.

    Example:
        writer = SvgWriter(Path("star.svg"))
        writer.write(render_view(view))
    """

    def __init__(self, output_path: FilePath) -> None:
        """Initialize the writer.

        Args:
            output_path: Path where the document will be saved
        """
        self._output_path = output_path

    @property
    def output_path(self) -> FilePath:
        return self._output_path

    def write(self, svg: str) -> FilePath:
        """Write the document, creating parent directories as needed.

        Returns:
            The path written

        Raises:
            RenderError: If the file cannot be written
        """
        try:
            self._output_path.parent.mkdir(parents=True, exist_ok=True)
            self._output_path.write_text(svg, encoding="utf-8")
        except OSError as e:
            raise RenderError(str(self._output_path), str(e)) from e
        logger.debug("Wrote %d bytes to %s", len(svg), self._output_path)
        return self._output_path

    @staticmethod
    def get_output_path(shape_name: str, directory: FilePath | None = None) -> FilePath:
        """Default output path for a shape: ``<directory>/<shape_name>.svg``."""
        return (directory or FilePath(".")) / f"{shape_name}.svg"
