"""Pattern-bound access to the shaping operations."""

from __future__ import annotations

import re

from waivern_rx.config import PatternConfig
from waivern_rx.engine import RegexPattern, as_pattern
from waivern_rx.groups import find_all_groups, find_groups
from waivern_rx.matches import find_all_matches, find_match
from waivern_rx.naming import group_identifiers
from waivern_rx.replace import replace_all_groups_func
from waivern_rx.types import GroupMap, ReplaceFunc


class GroupMatcher:
    """Binds one compiled pattern to the match, group and replace operations.

    Holds no state besides the pattern, so a single instance can be shared
    across threads as long as the pattern itself can.
    """

    __slots__ = ("_pattern",)

    def __init__(self, pattern: RegexPattern | re.Pattern[str]) -> None:
        self._pattern = as_pattern(pattern)

    @classmethod
    def from_config(cls, config: PatternConfig) -> GroupMatcher:
        """Compile the configured expression and bind it.

        Raises:
            PatternCompileError: If the expression is not a valid regular expression

        """
        return cls(config.compile())

    @property
    def pattern(self) -> RegexPattern:
        return self._pattern

    @property
    def group_identifiers(self) -> tuple[str, ...]:
        """Keys every GroupMap produced by this matcher will have."""
        return group_identifiers(self._pattern.group_names())

    def find_match(self, subject: str) -> tuple[str, bool]:
        return find_match(self._pattern, subject)

    def find_all_matches(self, subject: str) -> tuple[list[str] | None, bool]:
        return find_all_matches(self._pattern, subject)

    def find_groups(self, subject: str) -> tuple[GroupMap | None, bool]:
        return find_groups(self._pattern, subject)

    def find_all_groups(self, subject: str) -> tuple[list[GroupMap] | None, bool]:
        return find_all_groups(self._pattern, subject)

    def replace_all_groups_func(self, subject: str, replace: ReplaceFunc | None) -> str:
        return replace_all_groups_func(self._pattern, subject, replace)
