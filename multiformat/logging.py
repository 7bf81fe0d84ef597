"""
Rich-enhanced logging configuration.

Diagnostics are written to stderr through a Rich handler so they never
mix with the rendered output on stdout.

.. warning::
    By default, ``configure_logging()`` installs a **global traceback handler**
    via Rich. Set ``rich_tracebacks=False`` to disable this behavior.

Usage:
    from multiformat.logging import configure_logging, get_logger

    configure_logging(level="debug")
    logger = get_logger("cli")
    logger.debug("Selected format %s", "yaml")
"""

import logging
from typing import Literal

from rich.traceback import install as install_rich_traceback

from multiformat.utils.ui import err_console, get_rich_handler

# Module logger name - all package logs use this prefix
MODULE_LOGGER_NAME = "multiformat"

# Type alias for log levels
LogLevel = Literal["debug", "info", "warning", "error", "critical"]


def _get_log_level(level: LogLevel | str | int) -> int:
    """Convert level string to logging constant."""
    if isinstance(level, int):
        return level

    level_map = {
        "debug": logging.DEBUG,
        "info": logging.INFO,
        "warning": logging.WARNING,
        "error": logging.ERROR,
        "critical": logging.CRITICAL,
    }
    return level_map.get(level.lower(), logging.WARNING)


def configure_logging(
    level: LogLevel | str | int = "warning",
    rich_tracebacks: bool = True,
    show_path: bool = False,
    show_time: bool = True,
) -> logging.Logger:
    """
    Configure rich-enhanced logging for the package.

    Args:
        level: Log level for stderr output
        rich_tracebacks: Install Rich as the process-wide exception hook
        show_path: Show file path in log lines
        show_time: Show timestamp in log lines

    Returns:
        Configured package logger
    """
    log_level = _get_log_level(level)

    if rich_tracebacks:
        install_rich_traceback(
            console=err_console,
            show_locals=False,
            width=err_console.width,
            extra_lines=3,
            word_wrap=True,
        )

    logger = logging.getLogger(MODULE_LOGGER_NAME)
    logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicates
    for handler in logger.handlers[:]:
        handler.close()
        logger.removeHandler(handler)

    logger.addHandler(
        get_rich_handler(
            level=log_level,
            show_time=show_time,
            show_path=show_path,
            rich_tracebacks=rich_tracebacks,
        )
    )
    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Get a logger under the package namespace.

    Args:
        name: Optional sub-logger name (e.g., "cli", "output")

    Returns:
        Logger instance
    """
    if name:
        return logging.getLogger(f"{MODULE_LOGGER_NAME}.{name}")
    return logging.getLogger(MODULE_LOGGER_NAME)


__all__ = [
    "configure_logging",
    "get_logger",
    "LogLevel",
    "MODULE_LOGGER_NAME",
]
