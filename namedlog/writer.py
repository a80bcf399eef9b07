"""
Write path for named loggers.

Formats a message and dispatches it to the console (gated by verbosity)
and to a per-level log file under the logger's directory.
"""

from __future__ import annotations

import os
import sys
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING

from namedlog.colors import GREY, RESET, WHITE
from namedlog.diagnostics import get_logger
from namedlog.exceptions import FileOutputDisabled, LogPathError, NamedLogError
from namedlog.levels import is_enabled

if TYPE_CHECKING:
    from namedlog.logger import Logger

logger = get_logger(__name__)

FILE_MODE = 0o660
DIR_MODE = 0o775


def timestamp(layout: str) -> str:
    """Format the current local time, including its zone name."""
    return datetime.now().astimezone().strftime(layout)


def log_file_name(path: str, name: str, level: str) -> str:
    """Build "<path><name>-<level>.log", all lowercase; no prefix for an empty name."""
    prefix = f"{name.lower()}-" if name else ""
    return f"{path}{prefix}{level.lower()}.log"


def format_console_line(stamp: str, level: str, message: str, color: str) -> str:
    return f"{GREY}{stamp}: {color}{level.upper()}: {RESET}{message}\n"


def format_file_line(stamp: str | None, message: str) -> str:
    if stamp is None:
        return f"{message}\n"
    return f"{stamp}: {message}\n"


# ============================================================================
# Outputs
# ============================================================================


def write_to_stdout(log: "Logger", level: str, message: str, color: str = WHITE) -> bool:
    """Print a colored line if stdout is enabled and the level passes the gate.

    Returns:
        True if a line was printed
    """
    if not log.stdout_enabled:
        return False
    if not is_enabled(level, log.effective_verbosity):
        return False

    try:
        line = format_console_line(timestamp(log.time_layout), level, message, color)
        sys.stdout.write(line)
        sys.stdout.flush()
    except (OSError, ValueError) as e:
        logger.warning("ERROR: Logger - could not print %s line for %r: %s", level, log.name, e)
        return False
    return True


def check_path(path: str) -> None:
    """Make sure the log directory exists, creating it and its parents if needed.

    Raises:
        LogPathError: If the path is not a directory or cannot be created
    """
    directory = Path(path)
    if directory.is_dir():
        return
    if directory.exists():
        raise LogPathError(f"Log path {path} exists and is not a directory", path=path)

    try:
        directory.mkdir(mode=DIR_MODE, parents=True, exist_ok=True)
    except OSError as e:
        raise LogPathError(f"Couldn't create log folder {path}: {e}", path=path) from e


def _open_log(file_name: str, flags: int) -> int:
    return os.open(file_name, flags, FILE_MODE)


def write_to_file(log: "Logger", level: str, message: str) -> int:
    """Append a line to "<path><name>-<level>.log".

    Returns:
        Number of characters written

    Raises:
        FileOutputDisabled: If file output is off; the filesystem is not touched
        LogPathError: If the log directory is unusable
        OSError: If the file cannot be opened or written
    """
    if not log.file_enabled:
        raise FileOutputDisabled(f"Write to file is disabled for logger {log.name!r}")

    check_path(log.path)

    stamp = None if log.raw_mode else timestamp(log.time_layout)
    line = format_file_line(stamp, message)
    file_name = log_file_name(log.path, log.name, level)

    with open(file_name, "a", encoding="utf-8", errors="backslashreplace", opener=_open_log) as f:
        return f.write(line)


def write_all(log: "Logger", level: str, message: str, color: str = WHITE) -> int:
    """Write to console and file without ever raising.

    Console and file failures are reported as a diagnostic warning.

    Returns:
        Number of characters written to the file, 0 if nothing was written
    """
    write_to_stdout(log, level, message, color)
    try:
        return write_to_file(log, level, message)
    except FileOutputDisabled:
        return 0
    except NamedLogError as e:
        logger.warning("ERROR: Logger - %s", e)
    except (OSError, ValueError) as e:
        logger.warning("ERROR: Logger - could not write %s log for %r: %s", level, log.name, e)
    return 0
