"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from shapeofview.core.registry import ShapeEntry

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]ShapeOfView[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_shape_info(shape_name: str, width: float, height: float, elevation: float) -> None:
    """Print what is about to be rendered."""
    console.print(
        f"  {shape_name} {SYM_DOT} {width:g}×{height:g} {SYM_DOT} elevation {elevation:g}"
    )


def print_shape_table(entries: list[ShapeEntry]) -> None:
    """Print registered shapes and their options.

    Args:
        entries: Registered shapes, in display order
    """
    table = Table(title="Shapes", show_lines=False)
    table.add_column("Name", style="bold")
    table.add_column("Description")
    table.add_column("Options")

    for entry in entries:
        options = "\n".join(f"{name}: {help_text}" for name, help_text in entry.options.items())
        table.add_row(entry.name, entry.description, options or SYM_DOT)

    console.print(table)


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    return f"{seconds:.1f}s"


def format_file_size(size_bytes: int) -> str:
    """Format a byte count, e.g. ``"3.2 KB"``."""
    if size_bytes < 1024:
        return f"{size_bytes} B"
    if size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.1f} KB"
    return f"{size_bytes / (1024 * 1024):.1f} MB"


def print_success(output_path: str, file_size: str, total_time_s: float, shapes: int) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to output file
        file_size: Human-readable file size string
        total_time_s: Total render time in seconds
        shapes: Number of shapes rendered
    """
    console.print(
        f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_time(total_time_s)}"
    )

    line = Text("  ")
    line.append(output_path, style="bold")
    line.append(f" ({file_size})")
    console.print(line)

    plural = "shape" if shapes == 1 else "shapes"
    console.print(f"  {shapes} {plural} rendered")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {escape(message)}")
    if details:
        console.print(f"  {escape(details)}")
