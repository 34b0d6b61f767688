"""Configuration settings for ShapeOfView."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from shapeofview.domain.style import Color, StrokeStyle


class Clip(str, Enum):
    """How a container clips its content to the shape outline."""

    NONE = "none"
    HARD_EDGE = "hard_edge"
    ANTI_ALIAS = "anti_alias"
    ANTI_ALIAS_WITH_SAVE_LAYER = "anti_alias_with_save_layer"


def _check_hex(value: str) -> str:
    # Raises InvalidArgumentError (a ValueError) which pydantic reports
    Color.from_hex(value)
    return value


_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class BorderStyle(BaseModel):
    """Decorative border drawn by border-capable shapes.

    A width of 0 or less disables the border.
    """

    model_config = ConfigDict(frozen=True)

    width: float = Field(
        default=0.0,
        description="Stroke width; 0 or less draws no border",
    )
    color: str = Field(
        default="#ffffffff",
        description="Stroke color as #rgb, #rrggbb or #aarrggbb",
    )

    @field_validator("color")
    @classmethod
    def _validate_color(cls, value: str) -> str:
        return _check_hex(value)

    @property
    def enabled(self) -> bool:
        return self.width > 0

    def stroke(self) -> StrokeStyle:
        """Build the stroke style for one border draw."""
        return StrokeStyle(color=Color.from_hex(self.color), width=self.width)


class ViewConfig(BaseModel):
    """Defaults for the ShapeOfView container."""

    elevation: float = Field(
        default=4.0,
        ge=0.0,
        le=24.0,
        description="Shadow elevation",
    )
    clip_behavior: Clip = Field(
        default=Clip.ANTI_ALIAS,
        description="How content is clipped to the outline",
    )


class RenderConfig(BaseModel):
    """Configuration for SVG rendering."""

    width: float = Field(
        default=200.0,
        gt=0.0,
        le=10000.0,
        description="Canvas width",
    )
    height: float = Field(
        default=200.0,
        gt=0.0,
        le=10000.0,
        description="Canvas height",
    )
    padding: float = Field(
        default=10.0,
        ge=0.0,
        description="Space between canvas edge and the shape",
    )
    background: str = Field(
        default="#fff5f5f5",
        description="Canvas background color",
    )
    fill: str = Field(
        default="#ff3f51b5",
        description="Color used for the clipped content",
    )
    shadow_color: str = Field(
        default="#66000000",
        description="Color of the elevation shadow",
    )
    gallery_cell_size: float = Field(
        default=100.0,
        gt=0.0,
        description="Size of each shape in the gallery grid",
    )
    gallery_spacing: float = Field(
        default=20.0,
        ge=0.0,
        description="Gap between gallery cells",
    )
    gallery_columns: int = Field(
        default=3,
        ge=1,
        le=12,
        description="Gallery grid columns",
    )

    @field_validator("background", "fill", "shadow_color")
    @classmethod
    def _validate_colors(cls, value: str) -> str:
        return _check_hex(value)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )

    @field_validator("log_level", "file_log_level")
    @classmethod
    def _validate_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            expected = ", ".join(_LOG_LEVELS)
            raise ValueError(f"Unknown log level '{value}', expected one of {expected}")
        return level


class ShapeOfViewSettings(BaseModel):
    """Main application settings."""

    view: ViewConfig = Field(default_factory=ViewConfig)
    render: RenderConfig = Field(default_factory=RenderConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> ShapeOfViewSettings:
    """Get default application settings."""
    return ShapeOfViewSettings()
