"""Tests for group identifier resolution."""

from waivern_rx import compile_pattern, group_identifier, group_identifiers


class TestGroupIdentifier:
    """Test resolution of a single group's identifier."""

    def test_returns_declared_name(self) -> None:
        """Named groups resolve to their declared name."""
        assert group_identifier(("greeting", "name"), 1) == "name"

    def test_unnamed_group_uses_one_based_index(self) -> None:
        """Unnamed groups resolve to their 1-based position."""
        assert group_identifier(("", ""), 0) == "1"
        assert group_identifier(("", ""), 1) == "2"

    def test_position_counts_named_groups_too(self) -> None:
        """Position is among all groups, named and unnamed alike."""
        names = ("greeting", "", "")

        assert group_identifier(names, 1) == "2"
        assert group_identifier(names, 2) == "3"


class TestGroupIdentifiers:
    """Test resolution of every declared group."""

    def test_resolves_all_groups_in_declaration_order(self) -> None:
        """Identifiers follow declaration order."""
        pattern = compile_pattern(r"(?P<greeting>\w+),\s*(\w+)(!)")

        assert group_identifiers(pattern.group_names()) == ("greeting", "2", "3")

    def test_position_is_not_character_offset(self) -> None:
        """Unnamed group identifiers ignore where the group sits in the text."""
        pattern = compile_pattern(r"abcdef(x)ghijk(?:y)(z)")

        assert group_identifiers(pattern.group_names()) == ("1", "2")

    def test_no_groups_gives_empty_tuple(self) -> None:
        """A pattern without groups has no identifiers."""
        pattern = compile_pattern(r"\w+,\s*\w+!")

        assert group_identifiers(pattern.group_names()) == ()
