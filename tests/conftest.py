"""Pytest configuration and shared fixtures."""

import logging
import sys

import pytest

from multiformat.models import Record, demo_record

EXPECTED_TABLE = "\n".join(
    [
        "┌───────┬───────┐",
        "│ Name  │ Value │",
        "╞═══════╪═══════╡",
        "│ Hello │ world │",
        "└───────┴───────┘",
    ]
)


@pytest.fixture
def record() -> Record:
    """The demo record every subcommand prints."""
    return demo_record()


@pytest.fixture
def expected_table() -> str:
    """Table rendering of the demo record."""
    return EXPECTED_TABLE


@pytest.fixture(autouse=True)
def cleanup_package_logger():
    """Undo configure_logging (handlers and Rich excepthook) after each test."""
    original_excepthook = sys.excepthook
    yield
    sys.excepthook = original_excepthook
    logger = logging.getLogger("multiformat")
    for handler in logger.handlers[:]:
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
