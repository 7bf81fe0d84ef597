"""
CLI module for the multi-format demo.

The subcommands themselves are assembled in the root ``cli.py``; this
package holds the pieces they share.
"""

from multiformat.cli.common import console, emit, format_flag, ui

__all__ = [
    "console",
    "emit",
    "format_flag",
    "ui",
]
