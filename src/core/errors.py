"""Errors raised by the core and reported by adapters."""

from __future__ import annotations

from typing import Optional


class LogScannerError(Exception):
    """Base class for every error log-scanner reports to its callers."""


class PatternError(LogScannerError, ValueError):
    """An undesired-notes line could not be compiled into a matcher."""

    def __init__(self, pattern: str, line_number: int, reason: str) -> None:
        super().__init__(f"Invalid pattern on line {line_number} ({pattern!r}): {reason}")
        self.pattern = pattern
        self.line_number = line_number
        self.reason = reason


class ReadError(LogScannerError, OSError):
    """Source text (log file or undesired notes) is unavailable."""

    def __init__(self, path: str, reason: Optional[str] = None) -> None:
        message = f"Failed to read {path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.path = path
        self.reason = reason


class WriteError(LogScannerError, OSError):
    """A scan result could not be delivered to its destination."""

    def __init__(self, path: str, reason: Optional[str] = None) -> None:
        message = f"Failed to write {path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.path = path
        self.reason = reason
