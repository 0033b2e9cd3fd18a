"""Scan results returned to the CLI and the HTTP server."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class ScanResult:
    """Outcome of scanning one log."""

    log_name: str
    messages: Tuple[str, ...]
    pattern_count: int

    @property
    def has_issues(self) -> bool:
        return bool(self.messages)
