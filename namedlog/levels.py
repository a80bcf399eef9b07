"""
Level names and verbosity gating.

Verbosity is an integer threshold in [0, 3] deciding which levels reach
the console:

    3 - every level, custom levels included
    2 - everything except Info
    1 - everything except Info and Warning
    0 - Fatal only
"""

from __future__ import annotations


INFO = "Info"
WARNING = "Warning"
ERROR = "Error"
FATAL = "Fatal"

MIN_VERBOSITY = 0
MAX_VERBOSITY = 3
DEFAULT_VERBOSITY = 2
INHERIT = -1


def clamp(value: int, low: int, high: int) -> int:
    """Clamp an integer into [low, high]."""
    return max(low, min(high, int(value)))


def clamp_global(value: int) -> int:
    """Clamp a registry-wide verbosity into [0, 3]."""
    return clamp(value, MIN_VERBOSITY, MAX_VERBOSITY)


def clamp_instance(value: int) -> int:
    """Clamp a per-logger verbosity into [-1, 3]; -1 inherits the global value."""
    return clamp(value, INHERIT, MAX_VERBOSITY)


def is_enabled(level: str, verbosity: int) -> bool:
    """Decide whether a level is printed to the console at a verbosity.

    Args:
        level: Level name, compared case-insensitively
        verbosity: Effective verbosity in [0, 3]

    Returns:
        True if the console line should be printed
    """
    name = level.lower()
    if verbosity >= 3:
        return True
    if verbosity == 2:
        return name != "info"
    if verbosity == 1:
        return name not in ("info", "warning")
    return name == "fatal"
