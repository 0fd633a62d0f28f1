"""Per-match group extraction.

Results are GroupMaps keyed by group identifier (see waivern_rx.naming).
The found flag distinguishes three outcomes:

- (None, False): the pattern does not match the subject
- (None, True): the pattern matches but declares no groups
- (mapping, True): one GroupMap per match, one key per declared group
"""

import re
from collections.abc import Sequence

from waivern_rx.engine import RegexPattern, as_pattern
from waivern_rx.naming import group_identifiers
from waivern_rx.types import GroupMap, Span


def build_group_map(
    identifiers: Sequence[str], subject: str, spans: Sequence[Span | None]
) -> GroupMap:
    """Pair each group identifier with the text its span covers.

    A group that did not participate in the match (None span) maps to an
    empty string rather than being left out.

    Args:
        identifiers: Resolved identifiers, one per declared group
        subject: The subject the spans index into
        spans: Group spans of one match, aligned with identifiers

    Returns:
        GroupMap with exactly one entry per identifier

    """
    return {
        identifier: "" if span is None else span.text(subject)
        for identifier, span in zip(identifiers, spans, strict=True)
    }


def find_groups(
    pattern: RegexPattern | re.Pattern[str], subject: str
) -> tuple[GroupMap | None, bool]:
    """Return the groups of the first match.

    Args:
        pattern: Compiled pattern
        subject: Text to search

    Returns:
        Tuple of (GroupMap or None, found)

    """
    pattern = as_pattern(pattern)
    first = pattern.first_match(subject)
    if first is None:
        return None, False

    identifiers = group_identifiers(pattern.group_names())
    if not identifiers:
        return None, True
    return build_group_map(identifiers, subject, first.groups), True


def find_all_groups(
    pattern: RegexPattern | re.Pattern[str], subject: str
) -> tuple[list[GroupMap] | None, bool]:
    """Return the groups of every non-overlapping match in scan order.

    Identifiers are resolved once from the declared groups, so a group
    surfaces under the same key in every match.

    Args:
        pattern: Compiled pattern
        subject: Text to search

    Returns:
        Tuple of (list of GroupMap or None, found)

    """
    pattern = as_pattern(pattern)
    if not pattern.matches(subject):
        return None, False

    identifiers = group_identifiers(pattern.group_names())
    if not identifiers:
        return None, True
    return [
        build_group_map(identifiers, subject, spans.groups)
        for spans in pattern.all_match_spans(subject)
    ], True
