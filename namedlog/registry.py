"""
Registry of named loggers.

A Registry maps names to Logger instances and holds the global verbosity
used by loggers that don't set their own. Applications can build and pass
their own Registry; module-level helpers in namedlog use the default one
returned by default_registry().
"""

from __future__ import annotations

import sys
import threading
from typing import Any, Callable

from namedlog.config import LoggerConfig
from namedlog.diagnostics import get_logger
from namedlog.levels import DEFAULT_VERBOSITY, clamp_global
from namedlog.logger import Logger

logger = get_logger(__name__)


class Registry:
    """Thread-safe mapping from name to Logger."""

    def __init__(
        self,
        verbosity: int = DEFAULT_VERBOSITY,
        exit_func: Callable[[int], Any] = sys.exit,
    ):
        self._loggers: dict[str, Logger] = {}
        self._lock = threading.Lock()
        self._verbosity = clamp_global(verbosity)
        self._exit = exit_func

    def __contains__(self, name: str) -> bool:
        return name in self._loggers

    def __len__(self) -> int:
        return len(self._loggers)

    def create_or_get(self, name: str, config: LoggerConfig | None = None) -> Logger:
        """Return the logger named name, creating it with defaults on first use.

        An existing logger is returned unchanged; config only applies when
        the logger is created here.

        Args:
            name: Logger name, also the log file prefix
            config: Optional configuration for a new logger

        Returns:
            The registered Logger
        """
        with self._lock:
            existing = self._loggers.get(name)
            if existing is not None:
                return existing

            new_logger = Logger(name, registry=self, exit_func=self._exit)
            if config is not None:
                new_logger.configure(config)
            self._loggers[name] = new_logger
            logger.debug("Created logger %r", name)
            return new_logger

    def lookup(self, name: str) -> Logger | None:
        """Return the logger named name, or None."""
        with self._lock:
            return self._loggers.get(name)

    def get(self, name: str) -> Logger:
        """Return the logger named name, creating it if it doesn't exist."""
        found = self.lookup(name)
        if found is None:
            return self.create_or_get(name)
        return found

    def remove(self, name: str) -> None:
        """Drop a logger from the registry. No effect if absent."""
        with self._lock:
            if self._loggers.pop(name, None) is not None:
                logger.debug("Removed logger %r", name)

    def clear(self) -> None:
        with self._lock:
            self._loggers.clear()

    def names(self) -> list[str]:
        with self._lock:
            return sorted(self._loggers)

    def set_global_verbosity(self, verbosity: int) -> None:
        """Set the verbosity inherited by loggers, clamped to [0, 3]."""
        self._verbosity = clamp_global(verbosity)

    def get_global_verbosity(self) -> int:
        return self._verbosity


# ============================================================================
# Default Registry
# ============================================================================


_default_registry: Registry | None = None
_default_lock = threading.Lock()


def default_registry() -> Registry:
    """Get the process-wide registry, creating it on first use."""
    global _default_registry
    with _default_lock:
        if _default_registry is None:
            _default_registry = Registry()
        return _default_registry


def set_default_registry(registry: Registry | None) -> None:
    """Replace the process-wide registry. None resets it to be recreated lazily."""
    global _default_registry
    with _default_lock:
        _default_registry = registry
