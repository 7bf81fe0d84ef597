"""
Output formatting.

Format selection (default format plus override flags) and one formatter
per supported format: debug, text, compact JSON, pretty JSON, YAML, table.
"""

from .formats import FORMAT_PRECEDENCE, OutputFormat, select_format, select_from_flags
from .formatters import (
    DebugFormatter,
    JSONFormatter,
    OutputFormatter,
    TableFormatter,
    TextFormatter,
    YAMLFormatter,
    get_formatter,
    render,
)

__all__ = [
    "DebugFormatter",
    "FORMAT_PRECEDENCE",
    "JSONFormatter",
    "OutputFormat",
    "OutputFormatter",
    "TableFormatter",
    "TextFormatter",
    "YAMLFormatter",
    "get_formatter",
    "render",
    "select_format",
    "select_from_flags",
]
