"""Logging utilities with timing and frame tracking."""

from __future__ import annotations
import sys
import time
from typing import Optional


class Logger:
    """Drawer logger with timestamps and frame counts."""

    def __init__(self):
        self._start_time: float = time.perf_counter()
        self._frame: int = 0

    def increment_frame(self) -> None:
        """Advance the frame counter by one rendered frame."""
        self._frame += 1

    @property
    def elapsed(self) -> float:
        """Seconds since logger was created."""
        return time.perf_counter() - self._start_time

    def log(self, msg: str) -> None:
        """Log a message with timestamp and frame number."""
        line = f"[{self.elapsed:7.3f}s F{self._frame:06d}] {msg}\n"
        try:
            sys.stdout.write(line)
            sys.stdout.flush()
        except (OSError, ValueError):
            # stdout closed or detached (pythonw, piped demo)
            try:
                sys.stderr.write(line)
                sys.stderr.flush()
            except (OSError, ValueError):
                pass


_logger: Optional[Logger] = None


def get_logger() -> Logger:
    """Get or create the process-wide logger instance."""
    global _logger
    if _logger is None:
        _logger = Logger()
    return _logger


def log(msg: str) -> None:
    """Log a message using the process-wide logger."""
    get_logger().log(msg)


def increment_frame() -> None:
    get_logger().increment_frame()


def now() -> float:
    """Get current time in seconds (monotonic, high precision)."""
    return time.perf_counter()
