"""
Exception types for namedlog.
"""

from __future__ import annotations


class NamedLogError(Exception):
    """Base exception for logger errors."""

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path


class FileOutputDisabled(NamedLogError):
    """File output is turned off for this logger.

    Not a failure; the write path treats it as a silent no-op.
    """
    pass


class LogPathError(NamedLogError):
    """The log directory could not be created or is not a directory."""
    pass


class ConfigError(NamedLogError):
    """Invalid logger configuration."""
    pass
