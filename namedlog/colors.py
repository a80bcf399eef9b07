"""
ANSI color codes used for console output.
"""

from __future__ import annotations


RESET = "\x1b[0m"
RED = "\x1b[31m"
BLUE = "\x1b[34m"
MAGENTA = "\x1b[35m"
CYAN = "\x1b[36m"
WHITE = "\x1b[37m"
GREY = "\x1b[90m"

# Default color per level name
LEVEL_COLORS = {
    "info": CYAN,
    "warning": MAGENTA,
    "error": RED,
    "fatal": RED,
}


def color_for(level: str) -> str:
    """Return the console color for a level, white for custom levels."""
    return LEVEL_COLORS.get(level.lower(), WHITE)
