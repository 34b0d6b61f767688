"""Command-line interface for shapeofview.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Render any registered shape to SVG
- Render the full demo gallery
- List shapes and their options
"""

from shapeofview.cli.app import cli, main

__all__ = ["cli", "main"]
