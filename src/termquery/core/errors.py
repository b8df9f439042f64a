"""
Error types for termquery lexing and parsing.

Every error carries the offset into the query at which the problem was
detected. When the query text is known, an ``ErrorContext`` renders it with a
caret under that offset.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from termquery.core.query_lang.lexer import Token


class QueryError(Exception):
    """Base exception for all termquery errors."""

    def __init__(
        self,
        message: str,
        position: int,
        context: ErrorContext | None = None,
    ) -> None:
        self.message = message
        self.position = position
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        text = f"{self.message} ({self.position})"
        if self.context:
            return f"{text}\n{self.context.format()}"
        return text


class LexError(QueryError):
    """
    Raised when the query text cannot be split into tokens.

    Examples:
    - Characters outside the recognized classes (``@``, ``-``, tabs)
    """


class ParseError(QueryError):
    """
    Raised when the token sequence does not form a valid query.

    Examples:
    - Operators without operands
    - Unbalanced parentheses
    - Implicit and explicit operators used in one query
    """


class UnexpectedCharacter(LexError):
    """An input character matches none of the recognized classes."""

    def __init__(self, char: str, position: int, context: ErrorContext | None = None) -> None:
        self.char = char
        super().__init__(f"Unexpected character: {char!r}", position, context)


class UnexpectedToken(ParseError):
    """A token appears where no grammar production accepts it.

    ``token`` is ``None`` when the query ended early.
    """

    def __init__(
        self,
        token: Token | None,
        position: int,
        context: ErrorContext | None = None,
    ) -> None:
        self.token = token
        if token is None:
            message = "Unexpected end of input"
        else:
            message = f"Unexpected token: {token.kind} ({token.value!r})"
        super().__init__(message, position, context)


class ExpectedPunctuation(ParseError):
    """A required ``(`` or ``)`` is missing."""

    def __init__(self, expected: str, position: int, context: ErrorContext | None = None) -> None:
        self.expected = expected
        super().__init__(f'Expecting punctuation: "{expected}"', position, context)


class MixedOperatorStyle(ParseError):
    """Implicit juxtaposition and explicit ``&``/``|`` used in one query."""

    def __init__(self, position: int, context: ErrorContext | None = None) -> None:
        super().__init__(
            "Cannot mix implicit operators with explicit '&' or '|' in one query",
            position,
            context,
        )


@dataclass
class ErrorContext:
    """
    Source information for an error.

    Attributes:
        source: The full query text
        position: Zero-based offset of the problem
    """

    source: str
    position: int

    def format(self) -> str:
        """
        Format the query with a marker under the error position.

        Returns:
            Two lines like::

                  a b & c
                      ^
        """
        marker = " " * (self.position + 2) + "^"
        return f"  {self.source}\n{marker}"


def make_context(source: str | None, position: int) -> ErrorContext | None:
    """Build an ErrorContext when the source text is available."""
    if source is None:
        return None
    return ErrorContext(source=source, position=position)
