"""Report file sink.

Persists matched lines under the configured output directory, one report
per scanned log.
"""

from __future__ import annotations

import logging
import os
from typing import List

from adapters.output_formatting import derive_report_name, format_messages
from core.errors import WriteError

LOGGER = logging.getLogger(__name__)


class ReportFileSink:
    """Writes ``<log name> messages.txt`` files; satisfies MessageSink."""

    def __init__(self, output_dir: str, encoding: str = "utf-8") -> None:
        self._output_dir = output_dir
        self._encoding = encoding

    def report_path(self, log_name: str) -> str:
        return os.path.join(self._output_dir, derive_report_name(log_name))

    def deliver(self, log_name: str, messages: List[str]) -> None:
        path = self.report_path(log_name)
        try:
            os.makedirs(self._output_dir, exist_ok=True)
            with open(path, "w", encoding=self._encoding, newline="") as handle:
                handle.write(format_messages(messages, mode="report"))
        except OSError as exc:
            LOGGER.debug("Failed to write report %s: %s", path, exc)
            raise WriteError(path, str(exc)) from exc
        LOGGER.info("Report saved to %s", path)
