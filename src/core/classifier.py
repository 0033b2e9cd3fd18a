"""Line classification against a compiled matcher set (core domain)."""

from __future__ import annotations

from typing import List

from core.patterns import MatcherSet, compile_patterns


def split_lines(text: str) -> List[str]:
    """Split on line feeds only; carriage returns stay part of the line."""

    return text.split("\n")


def classify(log_text: str, matchers: MatcherSet) -> List[str]:
    """Return every line accepted by at least one matcher.

    Lines are returned verbatim and in input order. A line repeated in the
    log is repeated in the result.
    """

    return [line for line in split_lines(log_text) if matchers.matches(line)]


def extract_messages(log_text: str, pattern_text: str) -> List[str]:
    """Compile ``pattern_text`` and classify ``log_text`` in one step."""

    return classify(log_text, compile_patterns(pattern_text))


def extract_warnings_and_errors(log_text: str) -> List[str]:
    """Classify ``log_text`` using only the built-in warning/error matchers."""

    return classify(log_text, compile_patterns(""))
