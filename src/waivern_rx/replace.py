"""Group-driven substitution across all matches."""

import logging
import re

from waivern_rx.engine import RegexPattern, as_pattern
from waivern_rx.groups import build_group_map
from waivern_rx.naming import group_identifiers
from waivern_rx.types import ReplaceFunc

logger = logging.getLogger(__name__)


def replace_all_groups_func(
    pattern: RegexPattern | re.Pattern[str],
    subject: str,
    replace: ReplaceFunc | None,
) -> str:
    """Replace every match with the output of replace for its groups.

    Text outside the matches is copied through unchanged. Slices always come
    from the original subject's span offsets, so replacements of a different
    length than the text they replace do not shift later matches.

    A pattern without groups still calls replace once per match, with an
    empty GroupMap.

    Args:
        pattern: Compiled pattern
        subject: Text to rewrite
        replace: Called with each match's GroupMap; returns its substitute

    Returns:
        The rewritten string, or subject itself when nothing matches or
        replace is None

    """
    if replace is None:
        return subject

    pattern = as_pattern(pattern)
    all_spans = pattern.all_match_spans(subject)
    if not all_spans:
        return subject

    identifiers = group_identifiers(pattern.group_names())
    parts: list[str] = []
    last_end = 0
    for spans in all_spans:
        parts.append(subject[last_end : spans.match.start])
        parts.append(replace(build_group_map(identifiers, subject, spans.groups)))
        last_end = spans.match.end
    parts.append(subject[last_end:])

    logger.debug(
        f"Replaced {len(all_spans)} match(es) in subject of length {len(subject)}"
    )
    return "".join(parts)
