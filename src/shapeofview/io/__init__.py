"""Output layer for shapeofview.

This module connects paths to the outside world:

- Replay paths onto any fontTools pen (bounds, area, transforms, recording)
- Build paths back from recorded pen operations
- Render shaped views to SVG documents and write them to disk

Key classes:
- SvgCanvas: Canvas implementation producing SVG
- SvgWriter: Save rendered documents
"""

from shapeofview.io.converter import (
    draw_path,
    path_area,
    path_bounds,
    path_from_recording,
    path_to_svg,
    record_path,
    transform_path,
)
from shapeofview.io.writer import SvgCanvas, SvgWriter, render_gallery, render_view

__all__ = [
    "SvgCanvas",
    "SvgWriter",
    "draw_path",
    "path_area",
    "path_bounds",
    "path_from_recording",
    "path_to_svg",
    "record_path",
    "render_gallery",
    "render_view",
    "transform_path",
]
