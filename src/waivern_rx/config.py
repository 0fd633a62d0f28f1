"""Configuration for building patterns from plain properties."""

from __future__ import annotations

import re
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field

from waivern_rx.engine import StdlibPattern, compile_pattern


class PatternConfig(BaseModel):
    """Strongly typed configuration for a single regular expression.

    Example:
        ```python
        config = PatternConfig.from_properties({
            "expression": r"(?P<key>\\w+)=(?P<value>\\w+)",
            "ignore_case": True,
        })
        pattern = config.compile()
        ```

    """

    model_config = ConfigDict(
        # Immutable - configuration cannot be modified after creation
        frozen=True,
        # Strict - extra fields not in the model are rejected
        extra="forbid",
    )

    expression: str = Field(
        min_length=1,
        description="Regular expression text; named groups use (?P<name>...)",
    )

    ignore_case: bool = Field(default=False, description="Match case-insensitively")

    multiline: bool = Field(
        default=False, description="Let ^ and $ match at line boundaries"
    )

    dot_all: bool = Field(default=False, description="Let . match newlines")

    verbose: bool = Field(
        default=False, description="Ignore whitespace and comments in the expression"
    )

    @property
    def flags(self) -> re.RegexFlag:
        """The re module flags selected by this configuration."""
        flags = re.RegexFlag(0)
        if self.ignore_case:
            flags |= re.IGNORECASE
        if self.multiline:
            flags |= re.MULTILINE
        if self.dot_all:
            flags |= re.DOTALL
        if self.verbose:
            flags |= re.VERBOSE
        return flags

    @classmethod
    def from_properties(cls, properties: dict[str, Any]) -> Self:
        """Create configuration from properties dictionary with validation.

        Args:
            properties: Dictionary containing configuration properties

        Returns:
            Validated configuration instance

        Raises:
            ValidationError: If properties are invalid or missing required fields

        """
        return cls.model_validate(properties)

    def compile(self) -> StdlibPattern:
        """Compile the configured expression.

        Raises:
            PatternCompileError: If the expression is not a valid regular expression

        """
        return compile_pattern(self.expression, self.flags)
