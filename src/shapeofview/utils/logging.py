"""Logging utilities for ShapeOfView."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog

from shapeofview.exceptions import RenderError

# Marks handlers installed here so repeated configuration replaces them
_HANDLER_TAG = "_shapeofview_handler"


@dataclass
class RenderStats:
    """Statistics from a render run."""

    rendered_count: int = 0
    error_count: int = 0
    bytes_written: int = 0
    render_times_ms: list[float] = field(default_factory=list)
    errors: list[tuple[str, str]] = field(default_factory=list)

    @property
    def total_time_ms(self) -> float:
        return sum(self.render_times_ms)

    @property
    def avg_render_time_ms(self) -> float | None:
        """Average render time, or None before anything was rendered."""
        if not self.render_times_ms:
            return None
        return self.total_time_ms / len(self.render_times_ms)


def _tagged(handler: logging.Handler) -> logging.Handler:
    setattr(handler, _HANDLER_TAG, True)
    return handler


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file logging if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger

    Raises:
        RenderError: If the log file cannot be opened
    """
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if getattr(handler, _HANDLER_TAG, False):
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        try:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
        except OSError as e:
            raise RenderError(str(log_file), str(e)) from e
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(_tagged(file_handler))

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(_tagged(console_handler))

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("shapeofview")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class RenderLogger:
    """Logger for tracking render progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = RenderStats()

    def log_render_start(self, shape_name: str, width: float, height: float) -> None:
        """Log start of a shape render."""
        self._logger.debug("Rendering shape", shape=shape_name, width=width, height=height)

    def log_render_complete(self, shape_name: str, duration_ms: float) -> None:
        """Log successful render."""
        self._logger.info(
            "Shape rendered",
            shape=shape_name,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.rendered_count += 1
        self._stats.render_times_ms.append(duration_ms)

    def log_render_error(self, shape_name: str, error: Exception) -> None:
        """Log a failed render."""
        self._logger.error(
            "Shape render failed",
            shape=shape_name,
            error=str(error),
            error_type=type(error).__name__,
        )
        self._stats.error_count += 1
        self._stats.errors.append((shape_name, str(error)))

    def log_output_written(self, path: Path, size: int) -> None:
        """Log a written output file."""
        self._logger.info("Output written", path=str(path), bytes=size)
        self._stats.bytes_written += size

    @property
    def stats(self) -> RenderStats:
        """Get current render statistics."""
        return self._stats
