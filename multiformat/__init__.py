"""
Multi-format CLI output demo.

Six subcommands render the same record, each defaulting to a different
output format that shared flags can override.
"""

__version__ = "0.1.0"
