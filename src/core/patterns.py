"""Pattern compilation for undesired notes (core domain).

Patterns are written as literal text with an optional wildcard token. They
are parsed into literal/wildcard tokens first and only then compiled into a
native regex, so the wildcard semantics never depend on regex syntax leaking
in from user input.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import re
from typing import Iterator, List, Optional, Tuple, Union

from core.errors import PatternError

LOGGER = logging.getLogger(__name__)

WILDCARD_TOKEN = "<X>"

USER = "user"
BUILTIN = "builtin"


@dataclass(frozen=True)
class Literal:
    """Text that must appear verbatim at this position."""

    text: str


@dataclass(frozen=True)
class Wildcard:
    """Any sequence of zero or more characters."""


Token = Union[Literal, Wildcard]


@dataclass(frozen=True)
class Matcher:
    """Compiled line predicate anchored to the start of the line."""

    name: str
    source: str
    category: str
    regex: re.Pattern

    def matches(self, line: str) -> bool:
        return self.regex.match(line) is not None


@dataclass(frozen=True)
class MatcherSet:
    """Ordered matchers used for one classification pass.

    User matchers come first in input order, followed by the built-ins.
    Order never changes the result since a line is selected when any
    matcher accepts it.
    """

    matchers: Tuple[Matcher, ...]

    def __iter__(self) -> Iterator[Matcher]:
        return iter(self.matchers)

    def __len__(self) -> int:
        return len(self.matchers)

    @property
    def user_matchers(self) -> Tuple[Matcher, ...]:
        return tuple(m for m in self.matchers if m.category == USER)

    def matches(self, line: str) -> bool:
        return any(matcher.matches(line) for matcher in self.matchers)


def parse_pattern(pattern: str) -> Tuple[Token, ...]:
    """Split a pattern into literal segments and wildcards.

    Empty literal segments are dropped and consecutive wildcards collapse
    into one, e.g. ``"a<X><X>b"`` parses as ``(Literal("a"), Wildcard(),
    Literal("b"))``.
    """

    tokens: List[Token] = []
    for index, segment in enumerate(pattern.split(WILDCARD_TOKEN)):
        if index and not (tokens and isinstance(tokens[-1], Wildcard)):
            tokens.append(Wildcard())
        if segment:
            tokens.append(Literal(segment))
    return tuple(tokens)


def compile_tokens(tokens: Tuple[Token, ...]) -> re.Pattern:
    """Compile parsed tokens into a regex meant to be used with ``match``."""

    parts = [".*" if isinstance(token, Wildcard) else re.escape(token.text) for token in tokens]
    return re.compile("".join(parts))


def build_matcher(
    pattern: str,
    name: Optional[str] = None,
    category: str = USER,
    line_number: int = 1,
) -> Matcher:
    """Build a single prefix matcher from a pattern line.

    A pattern without any literal text would accept every line, so it is
    rejected rather than silently turning the scan into a full dump.
    """

    tokens = parse_pattern(pattern)
    if not any(isinstance(token, Literal) for token in tokens):
        reason = "pattern is empty" if not pattern else "pattern has no literal text"
        raise PatternError(pattern, line_number, reason)
    try:
        regex = compile_tokens(tokens)
    except re.error as exc:
        raise PatternError(pattern, line_number, str(exc)) from exc
    return Matcher(
        name=name or f"pattern {line_number}",
        source=pattern,
        category=category,
        regex=regex,
    )


def _pattern_lines(pattern_text: str) -> List[str]:
    lines = pattern_text.split("\n")
    # A trailing line break terminates the last pattern, it does not add one.
    if len(lines) > 1 and lines[-1] == "":
        lines.pop()
    return lines


def builtin_matchers() -> Tuple[Matcher, ...]:
    """Return the warning and error matchers present in every matcher set."""

    return (
        build_matcher("WARNING:", name="warning", category=BUILTIN),
        build_matcher("ERROR:", name="error", category=BUILTIN),
    )


def compile_patterns(pattern_text: str) -> MatcherSet:
    """Compile undesired-notes text (one pattern per line) into a matcher set.

    Empty text yields only the built-in matchers. Any malformed line raises
    ``PatternError`` before a matcher set exists, so a partially compiled set
    is never used for classification.
    """

    compiled: List[Matcher] = []
    if pattern_text:
        for line_number, line in enumerate(_pattern_lines(pattern_text), start=1):
            compiled.append(build_matcher(line, line_number=line_number))
    LOGGER.debug("Compiled %s undesired note pattern(s)", len(compiled))
    compiled.extend(builtin_matchers())
    return MatcherSet(matchers=tuple(compiled))
