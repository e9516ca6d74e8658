"""Terminal color handling and detection.

Provides ANSI color codes for diagnostics with automatic detection of
color support on standard error.
"""

import os
import platform
import sys


class Colors:
    """ANSI color codes for terminal output."""

    RESET = "\033[0m"
    DIM = "\033[2m"
    GREEN = "\033[92m"
    RED = "\033[91m"


def supports_color() -> bool:
    """Check if standard error supports color output.

    Returns:
        True if colors should be displayed, False otherwise.
    """
    # Any non-empty value disables color
    if os.environ.get("DEPLOY_NOTIFY_NO_COLOR") or os.environ.get("NO_COLOR"):
        return False
    if not hasattr(sys.stderr, "isatty") or not sys.stderr.isatty():
        return False
    if platform.system() == "Windows":
        return bool(os.environ.get("TERM") or os.environ.get("WT_SESSION"))
    return True


def disable_colors() -> None:
    """Blank out every color code."""
    for attr in dir(Colors):
        if not attr.startswith("_"):
            setattr(Colors, attr, "")


def init_colors() -> None:
    """Initialize colors based on terminal support.

    Disables all color codes if the terminal doesn't support colors.
    """
    if not supports_color():
        disable_colors()


# Auto-initialize on import
init_colors()

__all__ = ["Colors", "supports_color", "disable_colors", "init_colors"]
