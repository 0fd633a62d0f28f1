"""Group-aware result shaping on top of a regular-expression engine.

Capture groups, named or positional, are presented as uniform GroupMaps
(dict[str, str]) for single-match and all-matches retrieval, and drive
template substitution across all matches in one pass.
"""

from waivern_rx.config import PatternConfig
from waivern_rx.engine import RegexPattern, StdlibPattern, as_pattern, compile_pattern
from waivern_rx.errors import PatternCompileError, RegexError
from waivern_rx.groups import build_group_map, find_all_groups, find_groups
from waivern_rx.matcher import GroupMatcher
from waivern_rx.matches import find_all_matches, find_match
from waivern_rx.naming import group_identifier, group_identifiers
from waivern_rx.replace import replace_all_groups_func
from waivern_rx.types import GroupMap, ReplaceFunc, Span, SubmatchSpans

__all__ = [
    "GroupMap",
    "GroupMatcher",
    "PatternCompileError",
    "PatternConfig",
    "RegexError",
    "RegexPattern",
    "ReplaceFunc",
    "Span",
    "StdlibPattern",
    "SubmatchSpans",
    "as_pattern",
    "build_group_map",
    "compile_pattern",
    "find_all_groups",
    "find_all_matches",
    "find_groups",
    "find_match",
    "group_identifier",
    "group_identifiers",
    "replace_all_groups_func",
]
