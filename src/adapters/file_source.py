"""Filesystem text source.

Implements the core TextSource port by reading whole files into memory.
"""

from __future__ import annotations

import logging

from core.errors import ReadError

LOGGER = logging.getLogger(__name__)


class FileTextSource:
    """Thin file reader that satisfies the TextSource contract."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self._encoding = encoding

    def read(self, name: str) -> str:
        """Return the file contents exactly as stored.

        ``newline=""`` disables newline translation so Windows line endings
        keep their carriage returns.
        """

        try:
            with open(name, "r", encoding=self._encoding, newline="") as handle:
                return handle.read()
        except (OSError, UnicodeDecodeError) as exc:
            LOGGER.debug("Failed to read %s: %s", name, exc)
            raise ReadError(name, str(exc)) from exc
