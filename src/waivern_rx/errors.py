"""Error classes for waivern-rx.

This module provides:
- RegexError: Base exception class for all waivern-rx errors
- PatternCompileError: Raised when an expression cannot be compiled

Absence of a match is never an error; the shaping operations report it
through their found flag instead.
"""


class RegexError(Exception):
    """Base exception for all waivern-rx errors."""

    pass


class PatternCompileError(RegexError):
    """Raised when a regular expression cannot be compiled."""

    def __init__(self, expression: str, reason: str) -> None:
        """Initialise with the offending expression and the engine's reason.

        Args:
            expression: The expression text that failed to compile
            reason: Error message reported by the regex engine

        """
        super().__init__(f"Invalid regular expression {expression!r}: {reason}")
        self.expression = expression
        self.reason = reason
