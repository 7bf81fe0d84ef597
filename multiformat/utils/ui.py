"""
Rich UI utilities for console feedback.

Rendered records go to stdout; everything else (status messages, logs,
tracebacks) goes to stderr so that stdout stays machine-parseable.

Usage:
    from multiformat.utils.ui import err_console, ui

    ui.error("Missing command", details="Try 'multiformat --help'")
"""

from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text
from rich.theme import Theme

# =============================================================================
# Custom Theme
# =============================================================================

MULTIFORMAT_THEME = Theme(
    {
        # Status colors
        "error": "bold red",
        "debug": "dim",
        "muted": "dim white",
    }
)

# =============================================================================
# Global Consoles
# =============================================================================

console = Console(theme=MULTIFORMAT_THEME, highlight=False)
err_console = Console(theme=MULTIFORMAT_THEME, stderr=True, highlight=True)

# =============================================================================
# Icons & Symbols
# =============================================================================


class Icons:
    """Unicode icons for consistent visual feedback."""

    ERROR = "✗"


# =============================================================================
# UI Helper Class
# =============================================================================


class UIHelper:
    """Central UI helper for status messages on stderr."""

    def __init__(self, console: Console):
        self.console = console

    def error(self, message: str, details: str | None = None, prefix: str = Icons.ERROR) -> None:
        """Print an error message."""
        text = Text()
        text.append(f"{prefix} ", style="error")
        text.append_text(Text.from_markup(f"[error]{message}[/error]"))
        if details:
            text.append(f"\n   {details}", style="muted")
        self.console.print(text)


# =============================================================================
# Rich Logging Handler
# =============================================================================


def get_rich_handler(
    level: int = 30,  # WARNING
    show_time: bool = True,
    show_path: bool = False,
    rich_tracebacks: bool = True,
    markup: bool = True,
    log_time_format: str = "[%X]",
) -> RichHandler:
    """
    Create a Rich logging handler writing to stderr.

    Args:
        level: Log level
        show_time: Show timestamp
        show_path: Show file path
        rich_tracebacks: Use rich tracebacks
        markup: Enable rich markup in log messages
        log_time_format: Time format string

    Returns:
        Configured RichHandler
    """
    return RichHandler(
        level=level,
        console=err_console,
        show_time=show_time,
        show_path=show_path,
        rich_tracebacks=rich_tracebacks,
        markup=markup,
        log_time_format=log_time_format,
        keywords=["debug", "text", "api", "json", "yaml", "table"],
    )


# =============================================================================
# Singleton UI Instance
# =============================================================================

ui = UIHelper(err_console)

__all__ = [
    "console",
    "err_console",
    "get_rich_handler",
    "Icons",
    "MULTIFORMAT_THEME",
    "ui",
    "UIHelper",
]
