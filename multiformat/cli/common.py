"""
Common utilities shared across CLI commands.

This module provides:
- Override flag factories (one per output format)
- The render-and-print step every subcommand ends with
- Shared console and UI instances
"""

from typing import Any

import typer

from multiformat.logging import get_logger
from multiformat.models import Record, demo_record
from multiformat.output import OutputFormat, get_formatter, select_from_flags
from multiformat.utils.ui import console, ui

__all__ = [
    "console",
    "emit",
    "format_flag",
    "logger",
    "ui",
]

logger = get_logger("cli")

# Extra option names per format
_FLAG_ALIASES: dict[OutputFormat, tuple[str, ...]] = {
    OutputFormat.TABLE: ("--tabular",),
}


def format_flag(fmt: OutputFormat) -> Any:
    """Build the boolean override option for a format.

    Args:
        fmt: Format the flag forces

    Returns:
        typer.Option default for a command parameter
    """
    return typer.Option(
        False,
        f"--{fmt.value}",
        *_FLAG_ALIASES.get(fmt, ()),
        help=f"Display as {fmt.description}",
    )


def emit(default: OutputFormat, record: Record | None = None, **flags: bool) -> OutputFormat:
    """Select the active format, render the record and print it to stdout.

    Args:
        default: The subcommand's own format
        record: Record to render (default: the demo record)
        **flags: Override flags keyed by format name

    Returns:
        The format that was rendered
    """
    selected = select_from_flags(default, **flags)
    if selected is not default:
        logger.debug("Overriding %s output with %s", default.value, selected.value)

    record = record if record is not None else demo_record()
    get_formatter(selected).format_record(record).output()
    return selected
