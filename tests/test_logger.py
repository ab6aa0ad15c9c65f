"""
Tests for the structured category logger.
"""

import io
import sys

import pytest

from utils.logger import Logger, BoundLogger, get_logger, configure_logger
from models.enums import LogLevel, LogCategory


@pytest.fixture
def restore_logger():
    logger = get_logger()
    saved = (logger.min_level, logger.use_colors, logger.stream)
    yield logger
    configure_logger(*saved)


class TestFormatting:
    """Line layout without colors."""

    def test_main_line(self):
        """Timestamp, padded category, level symbol, message."""
        lines = Logger(use_colors=False).format(LogCategory.CONFIG, "Props validated")
        assert len(lines) == 1
        assert lines[0].endswith("CONFIG    ✓ Props validated")
        assert lines[0].startswith("[")

    def test_details_tree(self):
        """Explicit details first, then kwargs; the last one closes the tree."""
        lines = Logger(use_colors=False).format(
            LogCategory.TIMELINE, "Built timeline", details=["entries: 22"], first_start=-30
        )
        assert lines[1].strip() == "├─ entries: 22"
        assert lines[2].strip() == "└─ first_start: -30"

    def test_colors(self):
        """Errors are red and marked with ✗ when colors are on."""
        line = Logger(use_colors=True).format(LogCategory.SYSTEM, "hi", LogLevel.ERROR)[0]
        assert "\033[31m" in line
        assert "✗" in line


class TestLevels:
    """min_level filtering."""

    def test_debug_hidden_by_default(self, capsys):
        """Default INFO level drops debug records."""
        Logger(use_colors=False).debug(LogCategory.ANIMATION, "quiet")
        assert capsys.readouterr().out == ""

    def test_warn_shown_at_info(self, capsys):
        """Warnings pass the default INFO level."""
        Logger(use_colors=False).warn(LogCategory.ANIMATION, "loud")
        assert "⚠ loud" in capsys.readouterr().out

    def test_error_only(self, capsys):
        """ERROR level drops warnings and keeps errors."""
        logger = Logger(min_level=LogLevel.ERROR, use_colors=False)
        logger.warn(LogCategory.CONFIG, "skipped")
        logger.error(LogCategory.CONFIG, "kept")
        out = capsys.readouterr().out
        assert "skipped" not in out
        assert "kept" in out


class TestStream:
    """Output destination."""

    def test_custom_stream(self, capsys):
        """Lines go to the given stream, never to stdout."""
        buffer = io.StringIO()
        Logger(use_colors=False, stream=buffer).info(LogCategory.SYSTEM, "to buffer", frame=3)

        assert capsys.readouterr().out == ""
        assert "to buffer" in buffer.getvalue()
        assert "└─ frame: 3" in buffer.getvalue()

    def test_configure_stream(self, capsys, restore_logger):
        """configure_logger(stream=...) redirects the shared instance."""
        configure_logger(LogLevel.INFO, use_colors=False, stream=sys.stderr)
        get_logger().info(LogCategory.SYSTEM, "redirected")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "redirected" in captured.err


class TestBoundLogger:
    """Category-bound loggers."""

    def test_bound_category(self, capsys):
        """Bound logger stamps its category and renders kwargs as details."""
        bound = Logger(use_colors=False).for_category(LogCategory.RENDER_ENGINE)
        assert isinstance(bound, BoundLogger)
        bound.info("frame done", frame=12)
        out = capsys.readouterr().out
        assert "RENDER_ENGINE" in out
        assert "frame: 12" in out

    def test_with_category(self, capsys):
        """with_category() derives a logger for another category."""
        bound = Logger(use_colors=False).for_category(LogCategory.CONFIG).with_category(LogCategory.SYSTEM)
        bound.info("switched")
        assert "SYSTEM" in capsys.readouterr().out


class TestSingleton:
    """configure_logger() updates the shared instance in place."""

    def test_same_instance(self, restore_logger):
        """Reconfiguring keeps the identity bound loggers point at."""
        configure_logger(LogLevel.DEBUG, use_colors=False)
        assert get_logger() is restore_logger
        assert get_logger().min_level == LogLevel.DEBUG
        assert get_logger().use_colors is False
