"""
Internal diagnostics for namedlog.

Failures inside the write path (unwritable directories, I/O errors) are
reported here through the standard logging module instead of being raised
to the application. Nothing is configured on import; without a call to
setup_logging() warnings reach stderr through Python's last-resort handler.
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime
from typing import Literal

from namedlog.colors import GREY, MAGENTA, RED, RESET, WHITE

ROOT_NAME = "namedlog"

# Module-level logger cache
_loggers: dict[str, logging.Logger] = {}


# ============================================================================
# Formatter
# ============================================================================


class DiagnosticFormatter(logging.Formatter):
    """Formatter for namedlog's own side notes."""

    COLORS = {
        "DEBUG": GREY,
        "INFO": WHITE,
        "WARNING": MAGENTA,
        "ERROR": RED,
        "CRITICAL": RED,
    }

    def __init__(self, use_colors: bool = True):
        self.use_colors = use_colors
        super().__init__()

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).strftime("%Y-%m-%d %H:%M:%S")
        level = record.levelname
        if self.use_colors:
            level = f"{self.COLORS.get(level, '')}{level}{RESET}"

        line = f"[{timestamp}] {level} [{record.name}] {record.getMessage()}"
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


# ============================================================================
# Setup Functions
# ============================================================================


def setup_logging(
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING",
    console_output: bool = True,
    use_colors: bool = True,
) -> logging.Logger:
    """Route namedlog diagnostics to stderr.

    Args:
        level: Minimum level to show
        console_output: Install a stderr handler; False silences diagnostics
        use_colors: Color the level tag

    Returns:
        The package root logger
    """
    root_logger = logging.getLogger(ROOT_NAME)
    root_logger.setLevel(getattr(logging, level))
    root_logger.handlers = []

    if console_output:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(DiagnosticFormatter(use_colors=use_colors))
        root_logger.addHandler(handler)
    else:
        root_logger.addHandler(logging.NullHandler())

    root_logger.propagate = False
    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Get or create a diagnostics logger under the "namedlog." namespace."""
    if not name.startswith(f"{ROOT_NAME}."):
        full_name = f"{ROOT_NAME}.{name}"
    else:
        full_name = name

    if full_name not in _loggers:
        _loggers[full_name] = logging.getLogger(full_name)

    return _loggers[full_name]
