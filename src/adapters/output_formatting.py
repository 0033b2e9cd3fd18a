"""Shared output formatting helpers.

Keeping formatting here prevents drift between sinks and keeps the "no
issues" wording consistent regardless of delivery channel.
"""

from __future__ import annotations

from typing import List

NO_ISSUES_CONSOLE = "No issues were detected in the log file."
NO_ISSUES_REPORT = "No issues were found in the log file."

REPORT_SUFFIX = " messages.txt"


def derive_report_name(log_path: str) -> str:
    """Return the report file name for a log, e.g. ``app.log messages.txt``."""

    return f"{log_path.split('/')[-1]}{REPORT_SUFFIX}"


def _format_console(messages: List[str]) -> str:
    if not messages:
        return NO_ISSUES_CONSOLE
    return "\n".join(messages)


def _format_report(messages: List[str]) -> str:
    if not messages:
        return NO_ISSUES_REPORT
    # Lines keep their own carriage returns, only line feeds are added.
    return "".join(f"{message}\n" for message in messages)


def format_messages(messages: List[str], mode: str) -> str:
    """Return the matched lines formatted for the requested mode."""

    if mode == "console":
        return _format_console(messages)
    if mode == "report":
        return _format_report(messages)
    raise ValueError(f"Unsupported output format: {mode}")
