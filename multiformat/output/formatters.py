"""
Output formatter implementations.

One formatter per output format:
- Debug (model representation)
- Text (one ``name: value`` line per field)
- JSON (compact for the API format, indented otherwise)
- YAML
- Table (Rich box-drawing table)

Usage:
    formatter = get_formatter(OutputFormat.TABLE)
    formatter.format_record(record)
    formatter.output()  # Writes to stdout
"""

import json
import sys
from abc import ABC, abstractmethod
from io import StringIO
from typing import Any, TextIO

import yaml
from rich.box import SQUARE_DOUBLE_HEAD, Box
from rich.console import Console
from rich.table import Table

from multiformat.models import Record

from .formats import OutputFormat


class OutputFormatter(ABC):
    """
    Base class for output formatters.

    Formatters convert a record into a specific output format and write
    it to a stream.
    """

    def __init__(self, output: TextIO | None = None):
        """
        Initialize formatter.

        Args:
            output: Stream to write to (None = stdout at write time)
        """
        self.output_target = output
        self._formatted: str = ""

    @abstractmethod
    def format_record(self, record: Record) -> "OutputFormatter":
        """
        Format a record for output.

        Args:
            record: Record to format

        Returns:
            Self for method chaining
        """

    @property
    def text(self) -> str:
        """Formatted text, without the trailing newline."""
        return self._formatted

    def output(self) -> None:
        """Write formatted text and a newline to the target stream."""
        stream = self.output_target if self.output_target is not None else sys.stdout
        stream.write(self._formatted)
        stream.write("\n")


class DebugFormatter(OutputFormatter):
    """Model representation, field names and values in declaration order."""

    def format_record(self, record: Record) -> "DebugFormatter":
        self._formatted = repr(record)
        return self


class TextFormatter(OutputFormatter):
    """Plain ``name: value`` lines for humans."""

    def format_record(self, record: Record) -> "TextFormatter":
        self._formatted = "\n".join(f"{key}: {value}" for key, value in record.as_dict().items())
        return self


class JSONFormatter(OutputFormatter):
    """
    JSON formatter for structured data output.

    Compact mode produces a single line with no whitespace, suitable for
    piping to other tools. Key order follows the record's field order.
    """

    def __init__(
        self,
        output: TextIO | None = None,
        indent: int = 2,
        compact: bool = False,
    ):
        super().__init__(output)
        self.indent = None if compact else indent
        self.separators = (",", ":") if compact else None

    def format_record(self, record: Record) -> "JSONFormatter":
        self._formatted = json.dumps(record.as_dict(), indent=self.indent, separators=self.separators)
        return self


class YAMLFormatter(OutputFormatter):
    """YAML block mapping in field order."""

    def format_record(self, record: Record) -> "YAMLFormatter":
        dumped = yaml.safe_dump(record.as_dict(), sort_keys=False, default_flow_style=False, allow_unicode=True)
        self._formatted = dumped.rstrip("\n")
        return self


class TableFormatter(OutputFormatter):
    """
    Rich table formatter.

    Renders a header row and one data row with box-drawing characters.
    Column widths are the widest cell plus one space of padding per side.
    """

    def __init__(
        self,
        output: TextIO | None = None,
        box: Box = SQUARE_DOUBLE_HEAD,
        width: int = 200,
    ):
        super().__init__(output)
        self.box = box
        self.width = width

    def format_record(self, record: Record) -> "TableFormatter":
        table = Table(box=self.box)
        for header in record.table_headers():
            table.add_column(header)
        table.add_row(*record.table_row())

        # Plain text, no ANSI styling, regardless of the real terminal
        buffer = StringIO()
        temp_console = Console(
            file=buffer,
            force_terminal=False,
            color_system=None,
            highlight=False,
            legacy_windows=False,
            width=self.width,
        )
        temp_console.print(table)
        self._formatted = buffer.getvalue().rstrip("\n")
        return self


def get_formatter(
    format: OutputFormat | str,
    output: TextIO | None = None,
    **kwargs: Any,
) -> OutputFormatter:
    """
    Factory function to get appropriate formatter.

    Args:
        format: Output format (debug, text, api, json, yaml, table)
        output: Output stream (None = stdout)
        **kwargs: Additional formatter-specific options

    Returns:
        OutputFormatter instance

    Raises:
        ValueError: If format is not supported
    """
    if isinstance(format, str) and not isinstance(format, OutputFormat):
        try:
            format = OutputFormat(format.lower())
        except ValueError:
            raise ValueError(f"Unsupported output format: {format}") from None

    if format is OutputFormat.API:
        kwargs.setdefault("compact", True)

    formatters: dict[OutputFormat, type[OutputFormatter]] = {
        OutputFormat.DEBUG: DebugFormatter,
        OutputFormat.TEXT: TextFormatter,
        OutputFormat.API: JSONFormatter,
        OutputFormat.JSON: JSONFormatter,
        OutputFormat.YAML: YAMLFormatter,
        OutputFormat.TABLE: TableFormatter,
    }

    formatter_class = formatters.get(format)
    if formatter_class is None:
        raise ValueError(f"Unsupported output format: {format}")

    return formatter_class(output=output, **kwargs)


def render(format: OutputFormat | str, record: Record) -> str:
    """Render a record in the given format, without a trailing newline."""
    return get_formatter(format).format_record(record).text
