"""Tests for logging module."""

import logging
import sys

from rich.logging import RichHandler

from multiformat.logging import configure_logging, get_logger


class TestConfigureLogging:
    """Test configure_logging function."""

    def test_configure_logging_defaults(self):
        logger = configure_logging(rich_tracebacks=False)
        assert logger.name == "multiformat"
        assert logger.level == logging.WARNING

    def test_configure_logging_debug_level(self):
        logger = configure_logging(level="debug", rich_tracebacks=False)
        assert logger.level == logging.DEBUG

    def test_configure_logging_int_level(self):
        logger = configure_logging(level=logging.ERROR, rich_tracebacks=False)
        assert logger.level == logging.ERROR

    def test_unknown_level_falls_back_to_warning(self):
        logger = configure_logging(level="chatty", rich_tracebacks=False)
        assert logger.level == logging.WARNING

    def test_rich_handler_added_once(self):
        configure_logging(rich_tracebacks=False)
        logger = configure_logging(rich_tracebacks=False)
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], RichHandler)


class TestGetLogger:
    """Test get_logger function."""

    def test_package_logger(self):
        assert get_logger().name == "multiformat"

    def test_child_logger(self):
        assert get_logger("cli").name == "multiformat.cli"



class TestRichTracebacks:
    """Test the Rich exception hook switch."""

    def test_installs_excepthook(self):
        original = sys.excepthook
        configure_logging(rich_tracebacks=True)
        assert sys.excepthook is not original

    def test_leaves_excepthook_alone(self):
        original = sys.excepthook
        configure_logging(rich_tracebacks=False)
        assert sys.excepthook is original
