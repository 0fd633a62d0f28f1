"""Whole-match text extraction, ignoring group structure."""

import re

from waivern_rx.engine import RegexPattern, as_pattern


def find_match(
    pattern: RegexPattern | re.Pattern[str], subject: str
) -> tuple[str, bool]:
    """Return the text of the first match.

    Args:
        pattern: Compiled pattern
        subject: Text to search

    Returns:
        Tuple of (matched text, found). ("", False) when nothing matches.

    """
    text = as_pattern(pattern).first_match_text(subject)
    if text is None:
        return "", False
    return text, True


def find_all_matches(
    pattern: RegexPattern | re.Pattern[str], subject: str
) -> tuple[list[str] | None, bool]:
    """Return the texts of all non-overlapping matches in scan order.

    Args:
        pattern: Compiled pattern
        subject: Text to search

    Returns:
        Tuple of (matched texts, found). (None, False) when nothing matches.

    """
    pattern = as_pattern(pattern)
    if not pattern.matches(subject):
        return None, False
    return pattern.all_match_texts(subject), True
