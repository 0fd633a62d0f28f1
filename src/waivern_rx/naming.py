"""Group identifier resolution.

Every group surfaces under one stable key: its declared name, or its
1-based position among all groups (named and unnamed) when it has none.
"""

from collections.abc import Sequence


def group_identifier(group_names: Sequence[str], index: int) -> str:
    """Resolve the identifier of the group at a zero-based index.

    Args:
        group_names: Declared group names, whole-match group excluded
        index: Zero-based group index, assumed in range

    Returns:
        The declared name, or the decimal text of index + 1 for an unnamed group

    """
    name = group_names[index]
    if not name:
        return str(index + 1)
    return name


def group_identifiers(group_names: Sequence[str]) -> tuple[str, ...]:
    """Resolve identifiers for every declared group, in declaration order."""
    return tuple(group_identifier(group_names, i) for i in range(len(group_names)))
