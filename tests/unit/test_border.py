"""Unit tests for the border adapter and the ShapeOfView container."""

import pytest

from shapeofview.config import BorderStyle, Clip, ViewConfig
from shapeofview.core import (
    Canvas,
    CircleShape,
    PolygonShape,
    RoundRectShape,
    ShapeOfView,
    ShapeOfViewBorder,
    StarShape,
    TriangleShape,
)
from shapeofview.domain import EdgeInsets, FillStyle, Path, Rect
from shapeofview.exceptions import InvalidArgumentError


class TestShapeOfViewBorder:
    """Tests for ShapeOfViewBorder."""

    def test_requires_shape(self) -> None:
        """Test a missing shape is rejected."""
        with pytest.raises(InvalidArgumentError, match="requires a shape"):
            ShapeOfViewBorder(None)  # type: ignore[arg-type]

    @pytest.mark.parametrize(
        "shape", [CircleShape(), RoundRectShape(), StarShape(), TriangleShape()]
    )
    def test_inner_path_always_empty(self, shape) -> None:
        """Test the inner path is empty whatever the shape."""
        border = ShapeOfViewBorder(shape)
        assert border.inner_path(Rect(0, 0, 100, 100)).is_empty

    def test_outer_path_is_shape_outline(self) -> None:
        """Test the outer path is the shape's outline."""
        shape = PolygonShape(number_of_sides=6)
        rect = Rect(0, 0, 80, 60)
        assert ShapeOfViewBorder(shape).outer_path(rect) == shape.build(rect)

    def test_outer_path_without_rect(self) -> None:
        """Test the outer path needs a rectangle."""
        with pytest.raises(InvalidArgumentError):
            ShapeOfViewBorder(StarShape()).outer_path(None)  # type: ignore[arg-type]

    def test_dimensions_are_zero(self) -> None:
        """Test the adapter reports no insets."""
        assert ShapeOfViewBorder(CircleShape()).dimensions == EdgeInsets.zero()

    @pytest.mark.parametrize("t", [0.0, 0.5, 2.0])
    def test_scale_is_identity(self, t: float) -> None:
        """Test scaling returns a border with identical behavior."""
        border = ShapeOfViewBorder(StarShape())
        scaled = border.scale(t)
        rect = Rect(0, 0, 100, 100)
        assert scaled == border
        assert scaled.outer_path(rect) == border.outer_path(rect)

    def test_border_capability(self) -> None:
        """Test border capability is detected from the shape type."""
        assert ShapeOfViewBorder(CircleShape()).draws_border
        assert ShapeOfViewBorder(RoundRectShape()).draws_border
        assert not ShapeOfViewBorder(StarShape()).draws_border

    def test_paint_delegates_to_border_shape(self, canvas) -> None:
        """Test painting draws the shape's border."""
        border = ShapeOfViewBorder(CircleShape(border=BorderStyle(width=2)))
        border.paint(canvas, Rect(0, 0, 50, 50))
        assert canvas.names() == ["draw_circle"]

    def test_paint_without_border_capability(self, canvas) -> None:
        """Test shapes without a border paint nothing."""
        ShapeOfViewBorder(StarShape()).paint(canvas, Rect(0, 0, 50, 50))
        assert canvas.calls == []

    def test_equality_follows_shape(self) -> None:
        """Test borders compare and hash by their shape."""
        assert ShapeOfViewBorder(StarShape()) == ShapeOfViewBorder(StarShape())
        assert hash(ShapeOfViewBorder(StarShape())) == hash(ShapeOfViewBorder(StarShape()))
        assert ShapeOfViewBorder(StarShape()) != ShapeOfViewBorder(StarShape(no_of_points=6))
        assert ShapeOfViewBorder(StarShape()) != StarShape()

    def test_recording_canvas_is_a_canvas(self, canvas) -> None:
        """Test the protocol is structural."""
        assert isinstance(canvas, Canvas)


def _fill_content(canvas, rect: Rect) -> None:
    canvas.draw_path(Path().move_to(0, 0).close(), fill=FillStyle())


class TestShapeOfView:
    """Tests for the ShapeOfView container."""

    def test_defaults(self) -> None:
        """Test default elevation and clip behavior."""
        view = ShapeOfView(shape=StarShape())
        assert view.elevation == 4.0
        assert view.clip_behavior == Clip.ANTI_ALIAS
        assert view.border == ShapeOfViewBorder(StarShape())

    def test_paint_order(self, canvas) -> None:
        """Test shadow, clipped content, then border, inside a saved layer."""
        view = ShapeOfView(shape=CircleShape(border=BorderStyle(width=3)))
        view.paint(canvas, Rect(0, 0, 100, 100), _fill_content)
        assert canvas.names() == [
            "save",
            "translate",
            "draw_shadow",
            "save",
            "clip_path",
            "draw_path",
            "restore",
            "draw_circle",
            "restore",
        ]

    def test_clip_and_shadow_use_outline(self, canvas) -> None:
        """Test the clip and the shadow follow the local shape outline."""
        shape = StarShape()
        view = ShapeOfView(shape=shape, elevation=6)
        view.paint(canvas, Rect(20, 30, 120, 90))

        outline = shape.build(Rect(0, 0, 100, 60))
        assert canvas.calls_named("translate") == [(20, 30)]
        assert canvas.calls_named("draw_shadow") == [(outline, 6)]
        assert canvas.calls_named("clip_path") == [(outline, True)]

    def test_no_shadow_without_elevation(self, canvas) -> None:
        """Test elevation 0 draws no shadow."""
        ShapeOfView(shape=StarShape(), elevation=0).paint(canvas, Rect(0, 0, 10, 10))
        assert "draw_shadow" not in canvas.names()

    def test_clip_none(self, canvas) -> None:
        """Test content is not clipped with Clip.NONE."""
        view = ShapeOfView(shape=StarShape(), clip_behavior=Clip.NONE)
        view.paint(canvas, Rect(0, 0, 10, 10), _fill_content)
        assert "clip_path" not in canvas.names()
        assert canvas.names().count("save") == canvas.names().count("restore") == 1

    def test_hard_edge_clip(self, canvas) -> None:
        """Test hard-edge clipping disables anti-aliasing."""
        view = ShapeOfView(shape=StarShape(), clip_behavior=Clip.HARD_EDGE)
        view.paint(canvas, Rect(0, 0, 10, 10))
        [(_, anti_alias)] = canvas.calls_named("clip_path")
        assert anti_alias is False

    def test_content_receives_local_rect(self, canvas) -> None:
        """Test content paints in the view's own coordinates."""
        seen: list[Rect] = []
        view = ShapeOfView(shape=StarShape(), width=40, height=30)
        view.paint(canvas, Rect(100, 100, 300, 300), lambda c, rect: seen.append(rect))
        assert seen == [Rect(0, 0, 40, 30)]

    def test_resolve_rect(self) -> None:
        """Test fixed sizes are honored but clamped to the available space."""
        available = Rect(10, 10, 210, 110)
        assert ShapeOfView(shape=StarShape()).resolve_rect(available) == available
        assert ShapeOfView(shape=StarShape(), width=50).resolve_rect(available) == Rect(
            10, 10, 60, 110
        )
        assert ShapeOfView(shape=StarShape(), width=500, height=20).resolve_rect(
            available
        ) == Rect(10, 10, 210, 30)

    def test_paint_returns_occupied_rect(self, canvas) -> None:
        """Test paint reports where the view was placed."""
        view = ShapeOfView(shape=StarShape(), width=50, height=50)
        assert view.paint(canvas, Rect(5, 5, 200, 200)) == Rect(5, 5, 55, 55)

    def test_from_config(self) -> None:
        """Test construction from view configuration."""
        config = ViewConfig(elevation=8, clip_behavior=Clip.HARD_EDGE)
        view = ShapeOfView.from_config(StarShape(), config, width=10)
        assert view.elevation == 8
        assert view.clip_behavior == Clip.HARD_EDGE
        assert view.width == 10

    def test_invalid_arguments(self) -> None:
        """Test construction preconditions."""
        with pytest.raises(InvalidArgumentError, match="requires a shape"):
            ShapeOfView(shape=None)  # type: ignore[arg-type]
        with pytest.raises(InvalidArgumentError, match="Elevation"):
            ShapeOfView(shape=StarShape(), elevation=-1)
        with pytest.raises(InvalidArgumentError, match="Width"):
            ShapeOfView(shape=StarShape(), width=-5)
