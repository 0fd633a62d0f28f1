"""Regex engine boundary.

The shaping operations treat the engine as a black box described by the
RegexPattern protocol. StdlibPattern adapts Python's re module to it.
"""

import logging
import re
from typing import Protocol, runtime_checkable

from waivern_rx.errors import PatternCompileError
from waivern_rx.types import Span, SubmatchSpans

logger = logging.getLogger(__name__)


@runtime_checkable
class RegexPattern(Protocol):
    """A compiled pattern as seen by the shaping operations.

    Implementations must be safe for concurrent read-only use; nothing in
    waivern-rx adds synchronisation on top of them.
    """

    def group_names(self) -> tuple[str, ...]:
        """Declared group names in order, excluding the whole-match group.

        Unnamed groups are reported as an empty string.
        """
        ...

    def matches(self, subject: str) -> bool:
        """Return True if the pattern matches anywhere in subject."""
        ...

    def first_match(self, subject: str) -> SubmatchSpans | None:
        """Spans of the first match, or None if there is no match."""
        ...

    def first_match_text(self, subject: str) -> str | None:
        """Text of the first match, or None if there is no match."""
        ...

    def all_match_texts(self, subject: str) -> list[str]:
        """Texts of all non-overlapping matches in scan order."""
        ...

    def all_match_spans(self, subject: str) -> list[SubmatchSpans]:
        """Spans of all non-overlapping matches in scan order."""
        ...


def _to_spans(match: re.Match[str]) -> SubmatchSpans:
    groups: list[Span | None] = []
    for index in range(1, match.re.groups + 1):
        start, end = match.span(index)
        # re reports (-1, -1) for a group that did not participate
        groups.append(None if start == -1 else Span(start, end))
    return SubmatchSpans(match=Span(*match.span()), groups=tuple(groups))


class StdlibPattern:
    """RegexPattern backed by a compiled re.Pattern."""

    __slots__ = ("_regex", "_group_names")

    def __init__(self, regex: re.Pattern[str]) -> None:
        """Wrap an already compiled pattern.

        Args:
            regex: Compiled pattern; owned by the caller and never mutated

        """
        self._regex = regex
        names = [""] * regex.groups
        for name, index in regex.groupindex.items():
            names[index - 1] = name
        self._group_names = tuple(names)

    @property
    def regex(self) -> re.Pattern[str]:
        """The wrapped re.Pattern."""
        return self._regex

    @property
    def expression(self) -> str:
        """Expression text the pattern was compiled from."""
        return self._regex.pattern

    def group_names(self) -> tuple[str, ...]:
        return self._group_names

    def matches(self, subject: str) -> bool:
        return self._regex.search(subject) is not None

    def first_match(self, subject: str) -> SubmatchSpans | None:
        match = self._regex.search(subject)
        if match is None:
            return None
        return _to_spans(match)

    def first_match_text(self, subject: str) -> str | None:
        match = self._regex.search(subject)
        if match is None:
            return None
        return match.group()

    def all_match_texts(self, subject: str) -> list[str]:
        return [match.group() for match in self._regex.finditer(subject)]

    def all_match_spans(self, subject: str) -> list[SubmatchSpans]:
        return [_to_spans(match) for match in self._regex.finditer(subject)]

    def __repr__(self) -> str:
        return f"StdlibPattern({self._regex.pattern!r})"


def compile_pattern(expression: str, flags: int | re.RegexFlag = 0) -> StdlibPattern:
    """Compile a regular expression into a StdlibPattern.

    Named groups use the (?P<name>...) syntax.

    Args:
        expression: Regular expression text
        flags: re module flags to compile with

    Returns:
        The compiled pattern

    Raises:
        PatternCompileError: If the expression is not a valid regular expression

    """
    try:
        regex = re.compile(expression, flags)
    except re.error as e:
        logger.debug(f"Failed to compile {expression!r}: {e}")
        raise PatternCompileError(expression, str(e)) from e

    logger.debug(f"Compiled {expression!r} with {regex.groups} group(s)")
    return StdlibPattern(regex)


def as_pattern(pattern: RegexPattern | re.Pattern[str]) -> RegexPattern:
    """Return pattern as a RegexPattern, wrapping a raw re.Pattern if needed."""
    if isinstance(pattern, re.Pattern):
        return StdlibPattern(pattern)
    return pattern
