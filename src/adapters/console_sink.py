"""Console sink that prints matched lines for review."""

from __future__ import annotations

import sys
from typing import List, Optional, TextIO

from adapters.output_formatting import format_messages


class ConsoleSink:
    """Prints matches, or a "no issues" notice, to a text stream."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream

    def deliver(self, log_name: str, messages: List[str]) -> None:
        # stdout is resolved per call, not at construction.
        stream = self._stream or sys.stdout
        print(format_messages(messages, mode="console"), file=stream)
