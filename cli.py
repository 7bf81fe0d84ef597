#!/usr/bin/env python3
"""
CLI for the multi-format output demo.

Every subcommand prints the same record. Each one defaults to its own
output format, and the shared override flags (--debug, --text, --api,
--json, --yaml, --table) switch to another one.

This is the main entry point; the shared option and output helpers live
in multiformat/cli/.
"""

import typer

from multiformat import __version__
from multiformat.cli.common import console, emit, format_flag, ui
from multiformat.config import get_settings
from multiformat.logging import configure_logging, get_logger
from multiformat.output import OutputFormat

# Create main app
app = typer.Typer(
    name="multiformat",
    help="Print a record in the format each subcommand defaults to",
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)

logger = get_logger("cli")


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"multiformat {__version__}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug diagnostics on stderr"),
    log_level: str | None = typer.Option(
        None, "--log-level", help="Diagnostic log level (default: MULTIFORMAT_LOG_LEVEL or warning)"
    ),
    version: bool = typer.Option(
        False, "--version", callback=version_callback, is_eager=True, help="Show version and exit"
    ),
):
    """Print a record in the format each subcommand defaults to."""
    settings = get_settings()
    level = "debug" if verbose else (log_level or settings.log_level)
    configure_logging(level=level, rich_tracebacks=settings.rich_tracebacks)
    logger.debug("Log level %s", level)

    if ctx.invoked_subcommand is None:
        # Rich help prints itself and returns an empty string
        help_text = ctx.get_help()
        if help_text:
            typer.echo(help_text)
        ui.error("Missing command", details="Choose one of: debug, text, api, json, yaml, table")
        raise typer.Exit(2)


@app.command("debug")
def debug_command(
    text: bool = format_flag(OutputFormat.TEXT),
    api: bool = format_flag(OutputFormat.API),
    json: bool = format_flag(OutputFormat.JSON),
    yaml: bool = format_flag(OutputFormat.YAML),
    table: bool = format_flag(OutputFormat.TABLE),
):
    """Debug output by default."""
    emit(OutputFormat.DEBUG, text=text, api=api, json=json, yaml=yaml, table=table)


@app.command("text")
def text_command(
    debug: bool = format_flag(OutputFormat.DEBUG),
    api: bool = format_flag(OutputFormat.API),
    json: bool = format_flag(OutputFormat.JSON),
    yaml: bool = format_flag(OutputFormat.YAML),
    table: bool = format_flag(OutputFormat.TABLE),
):
    """Text output by default."""
    emit(OutputFormat.TEXT, debug=debug, api=api, json=json, yaml=yaml, table=table)


@app.command("api")
def api_command(
    debug: bool = format_flag(OutputFormat.DEBUG),
    text: bool = format_flag(OutputFormat.TEXT),
    json: bool = format_flag(OutputFormat.JSON),
    yaml: bool = format_flag(OutputFormat.YAML),
    table: bool = format_flag(OutputFormat.TABLE),
):
    """Unformatted JSON output by default."""
    emit(OutputFormat.API, debug=debug, text=text, json=json, yaml=yaml, table=table)


@app.command("json")
def json_command(
    debug: bool = format_flag(OutputFormat.DEBUG),
    text: bool = format_flag(OutputFormat.TEXT),
    api: bool = format_flag(OutputFormat.API),
    yaml: bool = format_flag(OutputFormat.YAML),
    table: bool = format_flag(OutputFormat.TABLE),
):
    """Pretty formatted JSON output by default."""
    emit(OutputFormat.JSON, debug=debug, text=text, api=api, yaml=yaml, table=table)


@app.command("yaml")
def yaml_command(
    debug: bool = format_flag(OutputFormat.DEBUG),
    text: bool = format_flag(OutputFormat.TEXT),
    api: bool = format_flag(OutputFormat.API),
    json: bool = format_flag(OutputFormat.JSON),
    table: bool = format_flag(OutputFormat.TABLE),
):
    """YAML output by default."""
    emit(OutputFormat.YAML, debug=debug, text=text, api=api, json=json, table=table)


@app.command("table")
def table_command(
    debug: bool = format_flag(OutputFormat.DEBUG),
    text: bool = format_flag(OutputFormat.TEXT),
    api: bool = format_flag(OutputFormat.API),
    json: bool = format_flag(OutputFormat.JSON),
    yaml: bool = format_flag(OutputFormat.YAML),
):
    """Table output by default."""
    emit(OutputFormat.TABLE, debug=debug, text=text, api=api, json=json, yaml=yaml)


if __name__ == "__main__":
    app()
