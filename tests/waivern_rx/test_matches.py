"""Tests for whole-match text extraction."""

import re

import pytest

from waivern_rx import compile_pattern, find_all_matches, find_match

REGULAR_RX = r"(?P<greeting>\w+),\s*(?P<name>\w+)!"
NESTED_RX = r"(?P<greeting>\w+,\s*(?P<name>\w+)!)"
SIMPLE_RX = r"\w+,\s*\w+!"

REG_STR = "hello, world!"
ALT_STR = "hi, cosmos!"
EXT_STR = f"{REG_STR} {ALT_STR}"


class TestFindMatch:
    """Test retrieval of the first matched substring."""

    def test_returns_not_found_when_nothing_matches(self) -> None:
        """No match returns an empty string and found=False."""
        assert find_match(compile_pattern(r"\d+"), REG_STR) == ("", False)

    @pytest.mark.parametrize(
        ("expression", "subject"),
        [
            (SIMPLE_RX, REG_STR),
            (REGULAR_RX, REG_STR),
            (SIMPLE_RX, EXT_STR),
            (NESTED_RX, EXT_STR),
        ],
        ids=["single", "single_with_groups", "multiple", "multiple_with_groups"],
    )
    def test_returns_first_matching_substring(
        self, expression: str, subject: str
    ) -> None:
        """Only the first match is returned, regardless of groups."""
        assert find_match(compile_pattern(expression), subject) == (REG_STR, True)

    def test_empty_match_is_found(self) -> None:
        """A zero-width match is found, with empty text."""
        assert find_match(compile_pattern(r"\d*"), "abc") == ("", True)

    def test_accepts_raw_re_pattern(self) -> None:
        """A plain re.Pattern works without wrapping."""
        assert find_match(re.compile(SIMPLE_RX), EXT_STR) == (REG_STR, True)


class TestFindAllMatches:
    """Test retrieval of all matched substrings."""

    def test_returns_not_found_when_nothing_matches(self) -> None:
        """No match returns None and found=False."""
        assert find_all_matches(compile_pattern(r"\d+"), REG_STR) == (None, False)

    def test_single_match(self) -> None:
        """A single match is returned as a one-element list."""
        pattern = compile_pattern(SIMPLE_RX)

        assert find_all_matches(pattern, REG_STR) == ([REG_STR], True)

    def test_single_match_with_groups(self) -> None:
        """Groups do not affect the returned text."""
        pattern = compile_pattern(REGULAR_RX)

        assert find_all_matches(pattern, REG_STR) == ([REG_STR], True)

    @pytest.mark.parametrize("expression", [SIMPLE_RX, NESTED_RX])
    def test_multiple_matches_in_scan_order(self, expression: str) -> None:
        """All non-overlapping matches are returned left to right."""
        result, found = find_all_matches(compile_pattern(expression), EXT_STR)

        assert found is True
        assert result == [REG_STR, ALT_STR]

    def test_matches_do_not_overlap(self) -> None:
        """Scanning resumes after the end of the previous match."""
        result, found = find_all_matches(compile_pattern("aa"), "aaaaa")

        assert found is True
        assert result == ["aa", "aa"]
