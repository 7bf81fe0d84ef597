"""
Output format enumeration and override-flag selection.

Every subcommand has a default format; the shared override flags can
replace it. When several flags are given, a fixed precedence decides.
"""

from collections.abc import Iterable
from enum import Enum

from multiformat.logging import get_logger

logger = get_logger("output")


class OutputFormat(str, Enum):
    """Supported output formats."""

    DEBUG = "debug"
    TEXT = "text"
    API = "api"  # Compact JSON
    JSON = "json"  # Pretty JSON
    YAML = "yaml"
    TABLE = "table"

    @property
    def description(self) -> str:
        """Human-readable description used in help text."""
        return _DESCRIPTIONS[self]


_DESCRIPTIONS: dict[OutputFormat, str] = {
    OutputFormat.DEBUG: "internal debug representation",
    OutputFormat.TEXT: "text",
    OutputFormat.API: "unformatted JSON",
    OutputFormat.JSON: "pretty formatted JSON",
    OutputFormat.YAML: "YAML",
    OutputFormat.TABLE: "table",
}

# Highest precedence first
FORMAT_PRECEDENCE: tuple[OutputFormat, ...] = (
    OutputFormat.TABLE,
    OutputFormat.YAML,
    OutputFormat.JSON,
    OutputFormat.API,
    OutputFormat.TEXT,
    OutputFormat.DEBUG,
)


def select_format(default: OutputFormat, overrides: Iterable[OutputFormat] = ()) -> OutputFormat:
    """
    Pick the active output format.

    Args:
        default: The subcommand's own format
        overrides: Formats whose override flags were set

    Returns:
        The highest-precedence override, or the default when none is set
    """
    requested = set(overrides)
    for fmt in FORMAT_PRECEDENCE:
        if fmt in requested:
            return fmt
    return default


def select_from_flags(default: OutputFormat, **flags: bool) -> OutputFormat:
    """
    Pick the active output format from boolean flags named after formats.

    Args:
        default: The subcommand's own format
        **flags: e.g. ``table=True, yaml=False``

    Returns:
        Selected output format

    Raises:
        ValueError: If a flag does not name a known format
    """
    overrides = []
    for flag, enabled in flags.items():
        try:
            fmt = OutputFormat(flag)
        except ValueError:
            raise ValueError(f"Unknown format flag: {flag}") from None
        if enabled:
            overrides.append(fmt)

    selected = select_format(default, overrides)
    if len(overrides) > 1:
        logger.debug(
            "Multiple format flags given (%s), using %s",
            ", ".join(f.value for f in overrides),
            selected.value,
        )
    return selected
