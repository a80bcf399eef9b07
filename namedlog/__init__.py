"""
namedlog - named loggers with colored console output and per-level log files.

Usage:
    import namedlog

    log = namedlog.new("svc")
    log.warning("retry %d", 3)   # console + logs/svc-warning.log
"""

from __future__ import annotations

from namedlog.colors import BLUE, CYAN, GREY, MAGENTA, RED, RESET, WHITE
from namedlog.config import LoggerConfig
from namedlog.diagnostics import setup_logging
from namedlog.exceptions import ConfigError, FileOutputDisabled, LogPathError, NamedLogError
from namedlog.logger import Logger
from namedlog.registry import Registry, default_registry, set_default_registry
from namedlog.timer import Timer, format_duration

__version__ = "1.0.0"


def new(name: str, config: LoggerConfig | None = None) -> Logger:
    """Create the logger named name, or return it unchanged if it exists."""
    return default_registry().create_or_get(name, config)


def get(name: str) -> Logger:
    """Return the logger named name, creating it with defaults if needed."""
    return default_registry().get(name)


def close(name: str) -> None:
    """Remove the logger named name from the default registry."""
    default_registry().remove(name)


def set_verbosity(verbosity: int) -> None:
    """Set the global verbosity, clamped to [0, 3]."""
    default_registry().set_global_verbosity(verbosity)


def get_verbosity() -> int:
    return default_registry().get_global_verbosity()


__all__ = [
    "new",
    "get",
    "close",
    "set_verbosity",
    "get_verbosity",
    "default_registry",
    "set_default_registry",
    "Registry",
    "Logger",
    "LoggerConfig",
    "Timer",
    "format_duration",
    "setup_logging",
    "NamedLogError",
    "FileOutputDisabled",
    "LogPathError",
    "ConfigError",
    "RESET",
    "RED",
    "BLUE",
    "MAGENTA",
    "CYAN",
    "WHITE",
    "GREY",
]
