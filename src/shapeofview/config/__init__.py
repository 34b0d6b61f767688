"""Configuration management for shapeofview.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments, shape constructors or defaults.

Key classes:
- BorderStyle: Decorative border width and color for border-capable shapes
- ViewConfig: Container elevation and clip behavior
- RenderConfig: SVG canvas and gallery settings
- LoggingConfig: Logging settings
- ShapeOfViewSettings: Main application settings
"""

from shapeofview.config.settings import (
    BorderStyle,
    Clip,
    LoggingConfig,
    RenderConfig,
    ShapeOfViewSettings,
    ViewConfig,
    get_default_settings,
)

__all__ = [
    "BorderStyle",
    "Clip",
    "LoggingConfig",
    "RenderConfig",
    "ShapeOfViewSettings",
    "ViewConfig",
    "get_default_settings",
]
