"""Unit tests for configuration models."""

import pytest
from pydantic import ValidationError

from shapeofview.config import (
    BorderStyle,
    Clip,
    LoggingConfig,
    RenderConfig,
    ShapeOfViewSettings,
    ViewConfig,
    get_default_settings,
)
from shapeofview.domain import Color


class TestBorderStyle:
    """Tests for BorderStyle."""

    def test_defaults(self) -> None:
        """Test the default border is disabled and white."""
        border = BorderStyle()
        assert border.width == 0
        assert border.color == "#ffffffff"
        assert not border.enabled

    def test_stroke(self) -> None:
        """Test the stroke style built from the border."""
        stroke = BorderStyle(width=2.5, color="#80102030").stroke()
        assert stroke.width == 2.5
        assert stroke.color == Color(0x80102030)

    def test_negative_width_disables_border(self) -> None:
        """Test a negative width is accepted and draws no border."""
        border = BorderStyle(width=-1)
        assert border.width == -1
        assert not border.enabled

    def test_bad_color_rejected(self) -> None:
        """Test colors must be hex strings."""
        with pytest.raises(ValidationError, match="Not a hex color"):
            BorderStyle(color="white")

    def test_frozen(self) -> None:
        """Test borders are immutable and hashable."""
        border = BorderStyle(width=1)
        with pytest.raises(ValidationError):
            border.width = 2  # type: ignore[misc]
        assert hash(border) == hash(BorderStyle(width=1))


class TestViewConfig:
    """Tests for ViewConfig."""

    def test_defaults(self) -> None:
        """Test default elevation and clip behavior."""
        config = ViewConfig()
        assert config.elevation == 4.0
        assert config.clip_behavior == Clip.ANTI_ALIAS

    def test_clip_from_string(self) -> None:
        """Test clip behavior parsed from its value."""
        assert ViewConfig(clip_behavior="hard_edge").clip_behavior == Clip.HARD_EDGE

    @pytest.mark.parametrize("elevation", [-1, 25])
    def test_elevation_range(self, elevation: float) -> None:
        """Test elevation is limited to 0-24."""
        with pytest.raises(ValidationError):
            ViewConfig(elevation=elevation)


class TestRenderConfig:
    """Tests for RenderConfig."""

    def test_defaults(self) -> None:
        """Test default canvas and gallery layout."""
        config = RenderConfig()
        assert (config.width, config.height) == (200, 200)
        assert config.gallery_columns == 3

    def test_size_must_be_positive(self) -> None:
        """Test zero-sized canvases are rejected."""
        with pytest.raises(ValidationError):
            RenderConfig(width=0)

    def test_colors_validated(self) -> None:
        """Test every color field is checked."""
        with pytest.raises(ValidationError):
            RenderConfig(shadow_color="#zzz")


class TestSettings:
    """Tests for the aggregate settings."""

    def test_default_settings(self) -> None:
        """Test the defaults compose every section."""
        settings = get_default_settings()
        assert isinstance(settings, ShapeOfViewSettings)
        assert settings.view == ViewConfig()
        assert settings.render == RenderConfig()
        assert settings.logging == LoggingConfig()
        assert settings.logging.log_file is None


class TestLoggingConfig:
    """Tests for LoggingConfig."""

    def test_levels_normalized(self) -> None:
        """Test level names are accepted in any case."""
        config = LoggingConfig(log_level=" info ", file_log_level="debug")
        assert config.log_level == "INFO"
        assert config.file_log_level == "DEBUG"

    @pytest.mark.parametrize("field", ["log_level", "file_log_level"])
    def test_unknown_level_rejected(self, field: str) -> None:
        """Test level names outside the standard set are rejected."""
        with pytest.raises(ValidationError, match="Unknown log level"):
            LoggingConfig(**{field: "verbose"})
