"""Tests for domain models to verify they work correctly."""

import math

import pytest

from shapeofview.domain import (
    BLACK,
    WHITE,
    Angle,
    ArcTo,
    BorderRadius,
    Close,
    Color,
    EdgeInsets,
    LineTo,
    MoveTo,
    Path,
    Point,
    Radius,
    Rect,
    StrokeStyle,
)
from shapeofview.exceptions import InvalidArgumentError


class TestPoint:
    """Tests for Point class."""

    def test_point_creation(self) -> None:
        """Test basic point creation."""
        p = Point(100.0, 200.0)
        assert p.x == 100.0
        assert p.y == 200.0

    def test_point_to_tuple(self) -> None:
        """Test point to tuple conversion."""
        assert Point(100.0, 200.0).to_tuple() == (100.0, 200.0)

    def test_distance_and_translate(self) -> None:
        """Test distance and translation helpers."""
        assert Point(0, 0).distance_to(Point(3, 4)) == 5.0
        assert Point(1, 2).translate(10, 20) == Point(11, 22)

    def test_point_immutable(self) -> None:
        """Test that point is immutable."""
        p = Point(100.0, 200.0)
        with pytest.raises(AttributeError):
            p.x = 300.0  # type: ignore


class TestRect:
    """Tests for Rect class."""

    def test_dimensions(self) -> None:
        """Test width, height, center and shortest side."""
        rect = Rect(10, 20, 110, 80)
        assert rect.width == 100
        assert rect.height == 60
        assert rect.size == (100, 60)
        assert rect.center == Point(60, 50)
        assert rect.shortest_side == 60

    def test_from_ltwh(self) -> None:
        """Test construction from origin and size."""
        assert Rect.from_ltwh(5, 5, 10, 20) == Rect(5, 5, 15, 25)

    def test_from_circle(self) -> None:
        """Test the square bounding a circle."""
        assert Rect.from_circle(Point(50, 50), 10) == Rect(40, 40, 60, 60)

    def test_negative_size_rejected(self) -> None:
        """Test that inverted edges are rejected."""
        with pytest.raises(InvalidArgumentError, match="negative size"):
            Rect(10, 0, 0, 10)

    def test_rejection_is_value_error(self) -> None:
        """Test that argument errors can be caught as ValueError."""
        with pytest.raises(ValueError):
            Rect(0, 10, 10, 0)

    def test_empty_rect(self) -> None:
        """Test zero-area rectangles are allowed but empty."""
        assert Rect(0, 0, 0, 10).is_empty
        assert not Rect(0, 0, 1, 1).is_empty

    def test_shift_and_contains(self) -> None:
        """Test translation and containment."""
        rect = Rect(0, 0, 10, 10).shift(5, 5)
        assert rect == Rect(5, 5, 15, 15)
        assert rect.contains(Point(15, 15))
        assert not rect.contains(Point(15.1, 15))
        assert rect.contains(Point(15.1, 15), tolerance=0.2)

    def test_deflate(self) -> None:
        """Test insetting a rectangle."""
        assert Rect(0, 0, 100, 50).deflate(EdgeInsets.all(10)) == Rect(10, 10, 90, 40)


class TestAngle:
    """Tests for Angle class."""

    def test_degree_radian_conversion(self) -> None:
        """Test degrees and radians describe the same angle."""
        assert Angle.from_degrees(180).radians == pytest.approx(math.pi)
        assert Angle.from_radians(math.pi / 2).degrees == pytest.approx(90)

    def test_equality_is_on_radians(self) -> None:
        """Test angles compare by their radian value."""
        assert Angle.from_degrees(180) == Angle.from_radians(math.pi)
        assert Angle.from_degrees(10) != Angle.from_degrees(10.0001)

    def test_abs(self) -> None:
        """Test magnitude of a negative angle."""
        assert abs(Angle(-0.5)) == Angle(0.5)

    def test_default_is_zero(self) -> None:
        """Test the default angle."""
        assert Angle().radians == 0.0


class TestBorderRadius:
    """Tests for Radius and BorderRadius."""

    def test_circular(self) -> None:
        """Test every corner receives the same radius."""
        radius = BorderRadius.circular(12)
        assert radius.corners() == (Radius(12, 12),) * 4

    def test_only(self) -> None:
        """Test unspecified corners default to zero."""
        radius = BorderRadius.only(top_left=Radius.circular(8))
        assert radius.top_left.x == 8
        assert radius.top_right == Radius()
        assert radius.bottom_left == Radius()
        assert radius.bottom_right == Radius()

    def test_zero(self) -> None:
        """Test the all-zero radius."""
        assert all(corner.x == 0 for corner in BorderRadius.zero().corners())

    def test_elliptical(self) -> None:
        """Test elliptical radius keeps both components."""
        assert Radius.elliptical(4, 8) == Radius(4, 8)


class TestPath:
    """Tests for Path class."""

    def test_builder_chains(self) -> None:
        """Test builder methods return the same path."""
        path = Path()
        assert path.move_to(0, 0) is path
        assert path.line_to(1, 1) is path

    def test_close_marks_closed(self) -> None:
        """Test a closed polygon."""
        path = Path().move_to(0, 0).line_to(10, 0).line_to(10, 10).close()
        assert path.is_closed
        assert len(path) == 4
        assert isinstance(path.commands[-1], Close)

    def test_current_point_returns_to_start_on_close(self) -> None:
        """Test closing resets the current point to the subpath start."""
        path = Path().move_to(1, 2).line_to(5, 5)
        assert path.current_point == Point(5, 5)
        path.close()
        assert path.current_point == Point(1, 2)

    def test_vertices_skip_close(self) -> None:
        """Test vertices lists end points only."""
        path = Path().move_to(0, 0).line_to(10, 0).line_to(10, 10).close()
        assert path.vertices() == [Point(0, 0), Point(10, 0), Point(10, 10)]

    def test_empty_path(self) -> None:
        """Test a new path is empty and open."""
        path = Path()
        assert path.is_empty
        assert not path.is_closed
        assert path.current_point is None
        assert path.subpath_count == 0

    def test_subpath_count(self) -> None:
        """Test subpaths counted by moves."""
        path = Path().move_to(0, 0).line_to(1, 0).close().move_to(5, 5).line_to(6, 5).close()
        assert path.subpath_count == 2

    def test_implicit_subpath(self) -> None:
        """Test drawing without a move still forms a subpath."""
        assert Path().line_to(5, 5).subpath_count == 1

    def test_add_oval(self) -> None:
        """Test an oval is a move, a full arc and a close."""
        path = Path().add_oval(Rect(0, 0, 20, 10))
        move, arc, close = path.commands
        assert move == MoveTo(Point(20, 5))
        assert isinstance(arc, ArcTo)
        assert arc.sweep_angle == pytest.approx(2 * math.pi)
        assert close == Close()

    def test_arc_end_points(self) -> None:
        """Test arc start and end points on the ellipse."""
        arc = ArcTo(Rect(0, 0, 20, 20), 0.0, math.pi / 2)
        assert arc.start_point == Point(20, 10)
        assert arc.end_point.x == pytest.approx(10)
        assert arc.end_point.y == pytest.approx(20)

    def test_equality_and_copy(self) -> None:
        """Test structural equality and independent copies."""
        path = Path().move_to(0, 0).line_to(1, 1).close()
        copy = path.copy()
        assert copy == path
        copy.line_to(2, 2)
        assert copy != path

    def test_iteration(self) -> None:
        """Test iterating yields the commands in order."""
        path = Path().move_to(0, 0).line_to(3, 4)
        assert list(path) == [MoveTo(Point(0, 0)), LineTo(Point(3, 4))]

    def test_unhashable(self) -> None:
        """Test paths are mutable and therefore unhashable."""
        with pytest.raises(TypeError):
            hash(Path())


class TestColor:
    """Tests for Color and stroke styles."""

    def test_from_hex_forms(self) -> None:
        """Test all accepted hex notations."""
        assert Color.from_hex("#fff") == WHITE
        assert Color.from_hex("#000000") == BLACK
        assert Color.from_hex("#80ff0000").alpha == 0x80
        assert Color.from_hex("3f51b5").blue == 0xB5

    def test_invalid_hex(self) -> None:
        """Test malformed colors are rejected."""
        with pytest.raises(InvalidArgumentError, match="Not a hex color"):
            Color.from_hex("#12345")

    def test_out_of_range(self) -> None:
        """Test the value must fit 32 bits."""
        with pytest.raises(InvalidArgumentError):
            Color(0x1FFFFFFFF)

    def test_css_and_opacity(self) -> None:
        """Test CSS rendering drops alpha and opacity exposes it."""
        color = Color.from_argb(0x66, 0x12, 0x34, 0x56)
        assert color.to_css() == "#123456"
        assert color.to_hex() == "#66123456"
        assert color.opacity == pytest.approx(0x66 / 255)

    def test_stroke_defaults(self) -> None:
        """Test the default stroke is a 1px anti-aliased white line."""
        stroke = StrokeStyle()
        assert stroke.color == WHITE
        assert stroke.width == 1.0
        assert stroke.anti_alias
