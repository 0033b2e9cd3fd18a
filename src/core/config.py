"""Scanner configuration handed to the core.

settings.py resolves paths from config.json; the core only sees the result.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ScanConfig:
    """Where the scanner finds its undesired notes."""

    undesired_notes_path: str
