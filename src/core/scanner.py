"""Core log scanning pipeline.

The CLI and the HTTP server run the same steps for every scan:
1) Load and compile the undesired notes
2) Load the log text
3) Classify lines
4) Deliver the matches to every sink
"""

from __future__ import annotations

import logging
from typing import Iterable

from core.classifier import classify
from core.config import ScanConfig
from core.models import ScanResult
from core.patterns import compile_patterns
from core.ports import MessageSink, TextSource

LOGGER = logging.getLogger(__name__)


class LogScanner:
    """Orchestrates pattern loading, classification, and delivery."""

    def __init__(
        self,
        source: TextSource,
        sinks: Iterable[MessageSink],
        config: ScanConfig,
    ) -> None:
        self._source = source
        self._sinks = list(sinks)
        self._config = config

    @property
    def undesired_notes_path(self) -> str:
        return self._config.undesired_notes_path

    def scan(self, log_name: str) -> ScanResult:
        """Scan one log and hand the matched lines to every sink."""

        # Patterns are compiled on every call so concurrent scans never share
        # a matcher set, and a bad pattern fails before the log is touched.
        pattern_text = self._source.read(self._config.undesired_notes_path)
        matchers = compile_patterns(pattern_text)

        log_text = self._source.read(log_name)
        messages = classify(log_text, matchers)
        pattern_count = len(matchers.user_matchers)
        LOGGER.info(
            "Scanned %s: %s matching line(s) using %s undesired note pattern(s)",
            log_name,
            len(messages),
            pattern_count,
        )

        for sink in self._sinks:
            sink.deliver(log_name, messages)

        return ScanResult(
            log_name=log_name,
            messages=tuple(messages),
            pattern_count=pattern_count,
        )
