"""Unit tests for logging utilities."""

import logging
from pathlib import Path

import pytest
import structlog

from shapeofview.exceptions import RenderError
from shapeofview.utils import RenderLogger, RenderStats, configure_logging
from shapeofview.utils.logging import _HANDLER_TAG


def _own_handlers() -> list[logging.Handler]:
    return [h for h in logging.getLogger().handlers if getattr(h, _HANDLER_TAG, False)]


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_writes_to_log_file(self, tmp_path: Path, restore_root_logger) -> None:
        """Test the file log receives structured records."""
        log_file = tmp_path / "render.log"
        logger = configure_logging(log_file=log_file, quiet=True)
        logger.info("Shape rendered", shape="star")

        content = log_file.read_text(encoding="utf-8")
        assert "Logging initialized" in content
        assert '"shape": "star"' in content

    def test_reconfigure_replaces_handlers(self, tmp_path: Path, restore_root_logger) -> None:
        """Test configuring twice does not duplicate handlers."""
        configure_logging(log_file=tmp_path / "a.log")
        count = len(logging.getLogger().handlers)
        configure_logging(log_file=tmp_path / "b.log")
        assert len(logging.getLogger().handlers) == count

    def test_without_log_file(self, restore_root_logger) -> None:
        """Test logging works with console output only."""
        configure_logging(console_level="ERROR")
        handlers = _own_handlers()
        assert len(handlers) == 1
        assert not isinstance(handlers[0], logging.FileHandler)

    def test_creates_log_directory(self, tmp_path: Path, restore_root_logger) -> None:
        """Test missing parent directories of the log file are created."""
        log_file = tmp_path / "logs" / "nested" / "render.log"
        configure_logging(log_file=log_file, quiet=True)
        assert log_file.exists()

    def test_unopenable_log_file(self, tmp_path: Path, restore_root_logger) -> None:
        """Test a log file that cannot be opened raises RenderError."""
        blocker = tmp_path / "file.txt"
        blocker.write_text("x")
        with pytest.raises(RenderError, match="Failed to write"):
            configure_logging(log_file=blocker / "render.log")


class TestRenderStats:
    """Tests for RenderStats."""

    def test_empty(self) -> None:
        """Test fresh statistics."""
        stats = RenderStats()
        assert stats.total_time_ms == 0
        assert stats.avg_render_time_ms is None

    def test_average(self) -> None:
        """Test the average render time."""
        stats = RenderStats(render_times_ms=[2.0, 4.0])
        assert stats.total_time_ms == 6.0
        assert stats.avg_render_time_ms == 3.0


class TestRenderLogger:
    """Tests for RenderLogger."""

    def test_tracks_statistics(self) -> None:
        """Test successes, errors and output size are counted."""
        render_logger = RenderLogger(structlog.get_logger("test"))
        render_logger.log_render_start("star", 100, 100)
        render_logger.log_render_complete("star", 1.5)
        render_logger.log_render_error("polygon", ValueError("bad sides"))
        render_logger.log_output_written(Path("star.svg"), 512)

        stats = render_logger.stats
        assert stats.rendered_count == 1
        assert stats.error_count == 1
        assert stats.errors == [("polygon", "bad sides")]
        assert stats.bytes_written == 512
        assert stats.render_times_ms == [1.5]
