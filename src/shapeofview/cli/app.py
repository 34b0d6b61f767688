"""CLI application entry point for shapeofview.

This module provides the main CLI interface using Typer.
"""

import time
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from shapeofview import __version__
from shapeofview.cli.output import (
    console,
    format_file_size,
    print_error,
    print_header,
    print_shape_info,
    print_shape_table,
    print_step,
    print_success,
)
from shapeofview.config import LoggingConfig, RenderConfig, ShapeOfViewSettings, ViewConfig
from shapeofview.core import ShapeOfView, list_shapes
from shapeofview.core.registry import create_shape, gallery_shapes, parse_options
from shapeofview.exceptions import ShapeOfViewError, UnknownShapeError
from shapeofview.io import SvgWriter, render_gallery, render_view
from shapeofview.utils import RenderLogger, configure_logging

# Create the Typer app
app = typer.Typer(
    name="shapeofview",
    help="Render shaped, elevated containers (circle, star, bubble, ...) to SVG.",
    add_completion=False,
    no_args_is_help=True,
)

LogFileOption = Annotated[
    Path | None,
    typer.Option(
        "--log-file",
        help="Write detailed logs to file",
    ),
]
LogLevelOption = Annotated[
    str,
    typer.Option(
        "--log-level",
        help="Logging level (DEBUG|INFO|WARNING|ERROR)",
    ),
]
QuietOption = Annotated[
    bool,
    typer.Option(
        "--quiet",
        "-q",
        help="Minimal console output",
    ),
]
ClipOption = Annotated[
    str,
    typer.Option(
        "--clip",
        help="Clip behavior (none|hard_edge|anti_alias|anti_alias_with_save_layer)",
    ),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]ShapeOfView[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Render shaped, elevated containers to SVG."""


def _build_settings(
    view: dict[str, object],
    render: dict[str, object],
    log_file: Path | None,
    log_level: str,
) -> ShapeOfViewSettings:
    """Validate CLI values into settings, exiting with code 1 on bad input."""
    try:
        return ShapeOfViewSettings(
            view=ViewConfig(**view),
            render=RenderConfig(**render),
            logging=LoggingConfig(log_file=log_file, log_level=log_level),
        )
    except ValidationError as e:
        first = e.errors()[0]
        field_name = ".".join(str(part) for part in first["loc"])
        print_error(f"Invalid value for {field_name}", details=first["msg"])
        raise typer.Exit(code=1) from None


def _start_logging(settings: ShapeOfViewSettings, quiet: bool) -> RenderLogger:
    """Configure logging from settings, exiting with code 1 if the log file fails."""
    try:
        logger = configure_logging(
            log_file=settings.logging.log_file,
            console_level=settings.logging.log_level,
            file_level=settings.logging.file_log_level,
            quiet=quiet,
        )
    except ShapeOfViewError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None
    return RenderLogger(logger)


@app.command("list")
def list_command() -> None:
    """List the available shapes and their options."""
    print_shape_table(list_shapes())


@app.command()
def render(
    shape_name: Annotated[
        str,
        typer.Argument(
            help="Shape to render (see 'shapeofview list')",
            show_default=False,
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path (default: {shape}.svg)",
        ),
    ] = None,
    width: Annotated[
        float,
        typer.Option(
            "--width",
            "-W",
            help="Canvas width",
        ),
    ] = 200.0,
    height: Annotated[
        float,
        typer.Option(
            "--height",
            "-H",
            help="Canvas height",
        ),
    ] = 200.0,
    options: Annotated[
        list[str] | None,
        typer.Option(
            "--set",
            "-s",
            help="Shape option as key=value (repeatable)",
        ),
    ] = None,
    elevation: Annotated[
        float,
        typer.Option(
            "--elevation",
            "-e",
            help="Shadow elevation (0-24)",
        ),
    ] = 4.0,
    clip: ClipOption = "anti_alias",
    fill: Annotated[
        str,
        typer.Option(
            "--fill",
            help="Content color (#rrggbb or #aarrggbb)",
        ),
    ] = "#ff3f51b5",
    log_file: LogFileOption = None,
    log_level: LogLevelOption = "WARNING",
    quiet: QuietOption = False,
) -> None:
    """Render one shape inside an elevated container to SVG.

    Example:
        shapeofview render star -s points=6 -o star.svg
    """
    settings = _build_settings(
        view={"elevation": elevation, "clip_behavior": clip},
        render={"width": width, "height": height, "fill": fill},
        log_file=log_file,
        log_level=log_level,
    )
    render_logger = _start_logging(settings, quiet)

    if not quiet:
        print_header(__version__)
        print_step("Rendering")
        print_shape_info(shape_name, width, height, elevation)

    try:
        shape = create_shape(shape_name, parse_options(options or [], shape_name))
        view = ShapeOfView.from_config(shape, settings.view)

        render_logger.log_render_start(shape_name, width, height)
        start = time.perf_counter()
        svg = render_view(view, settings.render)
        render_logger.log_render_complete(shape_name, (time.perf_counter() - start) * 1000)

        output_path = output or SvgWriter.get_output_path(shape_name.lower())
        SvgWriter(output_path).write(svg)
        size = len(svg.encode("utf-8"))
        render_logger.log_output_written(output_path, size)

    except UnknownShapeError as e:
        render_logger.log_render_error(shape_name, e)
        names = ", ".join(entry.name for entry in list_shapes())
        print_error(str(e), details=f"Available shapes: {names}")
        raise typer.Exit(code=1) from None
    except ShapeOfViewError as e:
        render_logger.log_render_error(shape_name, e)
        print_error(str(e))
        raise typer.Exit(code=1) from None

    if not quiet:
        stats = render_logger.stats
        print_success(
            output_path=str(output_path),
            file_size=format_file_size(stats.bytes_written),
            total_time_s=stats.total_time_ms / 1000,
            shapes=stats.rendered_count,
        )


@app.command()
def gallery(
    output: Annotated[
        Path,
        typer.Option(
            "--output",
            "-o",
            help="Output path",
        ),
    ] = Path("gallery.svg"),
    clip: ClipOption = "anti_alias",
    log_file: LogFileOption = None,
    log_level: LogLevelOption = "WARNING",
    quiet: QuietOption = False,
) -> None:
    """Render the demo page: a slanted header above one of every shape."""
    settings = _build_settings(
        view={"clip_behavior": clip},
        render={},
        log_file=log_file,
        log_level=log_level,
    )
    render_logger = _start_logging(settings, quiet)

    if not quiet:
        print_header(__version__)
        print_step("Rendering gallery")

    try:
        start = time.perf_counter()
        svg = render_gallery(settings)
        render_logger.log_render_complete("gallery", (time.perf_counter() - start) * 1000)
        SvgWriter(output).write(svg)
        render_logger.log_output_written(output, len(svg.encode("utf-8")))
    except ShapeOfViewError as e:
        render_logger.log_render_error("gallery", e)
        print_error(str(e))
        raise typer.Exit(code=1) from None

    if not quiet:
        stats = render_logger.stats
        print_success(
            output_path=str(output),
            file_size=format_file_size(stats.bytes_written),
            total_time_s=stats.total_time_ms / 1000,
            shapes=len(gallery_shapes()) + 1,
        )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
