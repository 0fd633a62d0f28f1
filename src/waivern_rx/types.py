"""Types shared by the group-shaping operations."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeAlias

GroupMap: TypeAlias = dict[str, str]
ReplaceFunc: TypeAlias = Callable[[GroupMap], str]


@dataclass(frozen=True, slots=True)
class Span:
    """A start/end offset pair into a subject string.

    Attributes:
        start: Start position (inclusive) in the subject
        end: End position (exclusive) in the subject

    """

    start: int
    end: int

    @property
    def length(self) -> int:
        """Length of the spanned text."""
        return self.end - self.start

    def text(self, subject: str) -> str:
        """Return the slice of subject covered by this span."""
        return subject[self.start : self.end]


@dataclass(frozen=True, slots=True)
class SubmatchSpans:
    """Overall span and per-group spans of a single match.

    Attributes:
        match: Span of the whole match
        groups: One entry per declared group, in declaration order. None
            when the group did not participate in this match, which is
            distinct from a group that matched the empty string.

    """

    match: Span
    groups: tuple[Span | None, ...]
