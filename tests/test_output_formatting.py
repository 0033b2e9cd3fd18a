from __future__ import annotations

import pytest

from adapters.output_formatting import (
    NO_ISSUES_CONSOLE,
    NO_ISSUES_REPORT,
    derive_report_name,
    format_messages,
)


def test_derive_report_name_uses_last_path_segment() -> None:
    assert derive_report_name("./example/example1.log") == "example1.log messages.txt"
    assert derive_report_name("app.log") == "app.log messages.txt"


def test_empty_messages_use_no_issues_wording() -> None:
    assert format_messages([], mode="console") == "No issues were detected in the log file."
    assert format_messages([], mode="report") == "No issues were found in the log file."
    assert NO_ISSUES_CONSOLE != NO_ISSUES_REPORT


def test_console_and_report_layouts() -> None:
    messages = ["WARNING: a", "ERROR: c\r"]
    assert format_messages(messages, mode="console") == "WARNING: a\nERROR: c\r"
    assert format_messages(messages, mode="report") == "WARNING: a\nERROR: c\r\n"


def test_unknown_mode_is_rejected() -> None:
    with pytest.raises(ValueError):
        format_messages(["x"], mode="html")
