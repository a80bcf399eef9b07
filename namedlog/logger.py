"""
Named logger instance.

A Logger holds its configuration, emits leveled messages through the
write path and owns a single optional timer. Setters mutate in place and
return the logger so configuration can be chained:

    log = namedlog.new("svc").no_stdout().set_path("var/log").raw()
    log.warning("retry %d", 3)
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Any, Callable, NoReturn

from namedlog import levels
from namedlog.colors import color_for
from namedlog.config import DEFAULT_PATH, DEFAULT_TIME_LAYOUT, LoggerConfig, normalize_path
from namedlog.diagnostics import get_logger
from namedlog.levels import INHERIT, clamp_instance
from namedlog.timer import TIME_TAG, Timer, format_duration
from namedlog.writer import write_all

if TYPE_CHECKING:
    from namedlog.registry import Registry

logger = get_logger(__name__)


def render(template: str, args: tuple) -> str:
    """Apply printf-style args to template.

    A template that doesn't match its args is rendered as the template
    followed by the raw args, and reported as a diagnostic warning.
    """
    if not args:
        return template
    try:
        return template % args
    except (TypeError, ValueError) as e:
        logger.warning("ERROR: Logger - bad format %r for args %r: %s", template, args, e)
        return f"{template} {args!r}"


class Logger:
    """A named logger writing to the console and to per-level files."""

    def __init__(
        self,
        name: str,
        registry: "Registry | None" = None,
        exit_func: Callable[[int], Any] = sys.exit,
    ):
        self.name = name
        self.path = DEFAULT_PATH
        self.time_layout = DEFAULT_TIME_LAYOUT
        self.stdout_enabled = True
        self.file_enabled = True
        self.raw_mode = False
        self.verbosity = INHERIT
        self.timer = Timer()
        self._registry = registry
        self._exit = exit_func

    def __repr__(self) -> str:
        return f"Logger(name={self.name!r}, path={self.path!r}, verbosity={self.verbosity})"

    # ========================================================================
    # Configuration
    # ========================================================================

    def no_stdout(self) -> "Logger":
        """Disable console output."""
        self.stdout_enabled = False
        return self

    def no_file(self) -> "Logger":
        """Disable writing to log files."""
        self.file_enabled = False
        return self

    def raw(self) -> "Logger":
        """Omit timestamps from file lines. Console lines keep them."""
        self.raw_mode = True
        return self

    def set_path(self, path: str) -> "Logger":
        """Set the log directory; a trailing "/" is added if missing."""
        self.path = normalize_path(path)
        return self

    def set_time_layout(self, layout: str) -> "Logger":
        """Set the strftime layout used for timestamps."""
        self.time_layout = layout
        return self

    def set_verbosity(self, verbosity: int) -> "Logger":
        """Set the console verbosity, clamped to [-1, 3]. -1 inherits the global value."""
        self.verbosity = clamp_instance(verbosity)
        return self

    def configure(self, config: LoggerConfig) -> "Logger":
        """Apply every field of a LoggerConfig."""
        self.stdout_enabled = config.stdout
        self.file_enabled = config.file
        self.raw_mode = config.raw
        self.path = config.path
        self.time_layout = config.time_layout
        self.verbosity = config.verbosity
        return self

    @property
    def config(self) -> LoggerConfig:
        """Current configuration as a LoggerConfig snapshot."""
        return LoggerConfig(
            stdout=self.stdout_enabled,
            file=self.file_enabled,
            raw=self.raw_mode,
            path=self.path,
            time_layout=self.time_layout,
            verbosity=self.verbosity,
        )

    @property
    def effective_verbosity(self) -> int:
        """Own verbosity if set, otherwise the registry's global value."""
        if self.verbosity != INHERIT:
            return self.verbosity
        if self._registry is not None:
            return self._registry.get_global_verbosity()
        return levels.DEFAULT_VERBOSITY

    def close(self) -> None:
        """Remove this logger from its registry. The instance stays usable."""
        if self._registry is not None:
            self._registry.remove(self.name)

    # ========================================================================
    # Emission
    # ========================================================================

    def log(self, level: str, template: str, *args: Any, color: str | None = None) -> None:
        """Emit a message at any level, including custom ones.

        Args:
            level: Level name, used as console tag and file name component
            template: printf-style template, formatted with args if given
            color: Console color; defaults to the level color, white for custom levels
        """
        message = render(template, args)
        write_all(self, level, message, color or color_for(level))

    def info(self, template: str, *args: Any) -> None:
        self.log(levels.INFO, template, *args)

    def warning(self, template: str, *args: Any) -> None:
        self.log(levels.WARNING, template, *args)

    def error(self, template: str, *args: Any) -> None:
        self.log(levels.ERROR, template, *args)

    def fatal(self, template: str, *args: Any) -> NoReturn:
        """Write the message, then exit the process with status 1."""
        try:
            self.log(levels.FATAL, template, *args)
        finally:
            self._exit(1)
            raise SystemExit(1)

    # ========================================================================
    # Timer
    # ========================================================================

    def start_timer(self) -> None:
        """Start (or restart) this logger's timer."""
        self.timer.begin()

    def stop_timer(self, template: str) -> None:
        """Stop the timer and log template at Info with "{time}" replaced.

        Does nothing if the timer isn't running.
        """
        elapsed = self.timer.finish()
        if elapsed is None:
            return
        self.info(template.replace(TIME_TAG, format_duration(elapsed)))
