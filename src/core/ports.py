"""Where the scanner gets its text from and where matched lines go.

Files are the only source today; sinks are the console and report files.
"""

from __future__ import annotations

from typing import List, Protocol


class TextSource(Protocol):
    """Loads raw text by name; raises ``ReadError`` when it is unavailable."""

    def read(self, name: str) -> str:
        ...


class MessageSink(Protocol):
    """Delivers matched lines onward; raises ``WriteError`` on failure."""

    def deliver(self, log_name: str, messages: List[str]) -> None:
        ...
