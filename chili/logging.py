"""Logging utilities with timing and frame tracking."""

from __future__ import annotations
import sys
import time
from typing import Optional, TextIO


class Logger:
    """Application logger with timestamps and frame counts."""

    def __init__(self, out: Optional[TextIO] = None, err: Optional[TextIO] = None):
        self._start_time: float = time.perf_counter()
        self._frame: int = 0
        self._out = out
        self._err = err

    @property
    def frame(self) -> int:
        """Current frame number."""
        return self._frame

    def increment_frame(self) -> None:
        self._frame += 1

    @property
    def elapsed(self) -> float:
        """Seconds since logger was created."""
        return time.perf_counter() - self._start_time

    def format(self, msg: str) -> str:
        return f"[{self.elapsed:7.3f}s F{self._frame:06d}] {msg}\n"

    def log(self, msg: str) -> None:
        """Write an informational line to stdout."""
        self._write(self._out or sys.stdout, self.format(msg))

    def error(self, msg: str) -> None:
        """Write an error line to stderr."""
        self._write(self._err or sys.stderr, self.format(msg))

    @staticmethod
    def _write(stream: TextIO, line: str) -> None:
        stream.write(line)
        stream.flush()

    def __call__(self, msg: str) -> None:
        self.log(msg)


# Global logger instance
_logger: Optional[Logger] = None


def get_logger() -> Logger:
    """Get or create the global logger instance."""
    global _logger
    if _logger is None:
        _logger = Logger()
    return _logger


def log(msg: str) -> None:
    get_logger().log(msg)


def log_error(msg: str) -> None:
    get_logger().error(msg)


def get_frame() -> int:
    return get_logger().frame


def increment_frame() -> None:
    get_logger().increment_frame()
