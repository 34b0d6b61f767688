"""Utility functions for shapeofview.

This module provides logging setup and render statistics.
"""

from shapeofview.utils.logging import (
    RenderLogger,
    RenderStats,
    configure_logging,
)

__all__ = [
    "RenderLogger",
    "RenderStats",
    "configure_logging",
]
