"""
Elapsed-time helper attached to each logger.
"""

from __future__ import annotations

import time
from dataclasses import dataclass


TIME_TAG = "{time}"

_UNITS = (
    (3600.0, "h"),
    (60.0, "m"),
)


def format_duration(seconds: float) -> str:
    """Format a duration compactly.

    Example:
        >>> format_duration(0.0032)
        "3.2ms"
        >>> format_duration(123.5)
        "2m3.5s"
    """
    if seconds < 0:
        return "-" + format_duration(-seconds)
    if seconds == 0:
        return "0s"
    if seconds < 1e-6:
        return f"{seconds * 1e9:.0f}ns"
    if seconds < 1e-3:
        return f"{_trim(seconds * 1e6)}µs"
    if seconds < 1:
        return f"{_trim(seconds * 1e3)}ms"

    parts = []
    remaining = seconds
    for size, suffix in _UNITS:
        # Once a larger unit is printed, smaller ones are printed even when zero
        if parts or remaining >= size:
            count = int(remaining // size)
            parts.append(f"{count}{suffix}")
            remaining -= count * size
    parts.append(f"{_trim(remaining)}s")
    return "".join(parts)


def _trim(value: float) -> str:
    text = f"{value:.3f}".rstrip("0").rstrip(".")
    return text or "0"


@dataclass
class Timer:
    """Start instant and running flag for a logger's single timer."""

    start: float = 0.0
    running: bool = False

    def begin(self) -> None:
        self.start = time.perf_counter()
        self.running = True

    @property
    def elapsed(self) -> float:
        """Seconds since begin(), 0.0 when idle."""
        if not self.running:
            return 0.0
        return time.perf_counter() - self.start

    def finish(self) -> float | None:
        """Stop the timer, returning the elapsed seconds or None if it wasn't running."""
        if not self.running:
            return None
        elapsed = self.elapsed
        self.running = False
        return elapsed
