"""
Utility modules.
"""

from .ui import Icons, UIHelper, console, err_console, ui

__all__ = [
    "console",
    "err_console",
    "ui",
    "Icons",
    "UIHelper",
]
