"""
Error types for calcdemo scanning, parsing, and evaluation.
"""

from __future__ import annotations

from dataclasses import dataclass


class CalcError(Exception):
    """Base exception for all calcdemo errors."""

    def __init__(self, message: str, context: ErrorContext | None = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message


class ParseError(CalcError):
    """
    Raised when an expression is syntactically invalid.

    Examples:
    - Missing primary expression ("+", "", "2 * @")
    - Missing closing parenthesis ("(2 + 3")
    - Trailing input after a complete expression ("2 3")
    - Parentheses nested deeper than the parser allows
    """

    pass


class LiteralRangeError(CalcError):
    """
    Raised when a number literal does not fit the configured integer width.
    """

    pass


class EvaluationError(CalcError):
    """
    Raised when a well-formed expression cannot be evaluated.

    Examples:
    - Division by zero
    - Intermediate result outside the configured integer width
    """

    pass


@dataclass
class ErrorContext:
    """
    Location of an error inside the source expression.

    Attributes:
        source: The full expression text
        column: Column number (1-indexed)
        length: Number of characters to underline
    """

    source: str
    column: int
    length: int = 1

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like:
                column 5
                  (2 + 3
                        ^
        """
        marker = " " * (self.column - 1) + "^" * max(1, self.length)
        return f"column {self.column}\n  {self.source}\n  {marker}"


def make_parse_error(
    message: str,
    source: str,
    offset: int,
    length: int = 1,
) -> ParseError:
    """
    Helper to create a ParseError with context.

    Args:
        message: Error description
        source: Expression text
        offset: 0-indexed offset of the offending token
        length: Width of the offending token

    Returns:
        ParseError with context attached
    """
    context = ErrorContext(source=source, column=offset + 1, length=length)
    return ParseError(message, context)
