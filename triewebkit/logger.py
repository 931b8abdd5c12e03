"""Simple timestamped logging to standard output."""

from __future__ import annotations

import inspect
import time
from enum import Enum


class LogLevel(Enum):
    """Severity of a log message."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


def log(level: LogLevel, message: str, file: str | None = None, line: int | None = None) -> None:
    """Print a message with a timestamp, level and optional source location."""
    stamp = time.strftime("%Y-%m-%d %H:%M:%S", time.localtime())
    location = f"[{file}:{line}] " if file is not None else ""
    print(f"[{stamp}] [{level.value}] {location}{message}", flush=True)


def _log_from_caller(level: LogLevel, message: str) -> None:
    frame = inspect.currentframe()
    caller = frame.f_back.f_back if frame and frame.f_back else None
    try:
        if caller is None:
            log(level, message)
        else:
            log(level, message, caller.f_code.co_filename, caller.f_lineno)
    finally:
        del frame, caller


def debug(message: str) -> None:
    """Log a debug message with the caller's location."""
    _log_from_caller(LogLevel.DEBUG, message)


def info(message: str) -> None:
    """Log an informational message with the caller's location."""
    _log_from_caller(LogLevel.INFO, message)


def warning(message: str) -> None:
    """Log a warning with the caller's location."""
    _log_from_caller(LogLevel.WARNING, message)


def error(message: str) -> None:
    """Log an error with the caller's location."""
    _log_from_caller(LogLevel.ERROR, message)