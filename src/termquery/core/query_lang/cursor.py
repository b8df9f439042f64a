"""
Character cursor over a query string.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import NoReturn

from termquery.core.errors import UnexpectedCharacter, make_context


class CharacterCursor:
    """Positional access to the characters of a query."""

    __slots__ = ("source", "position")

    def __init__(self, source: str) -> None:
        self.source = source
        self.position = 0

    def peek(self) -> str:
        """Current character, or ``""`` at end of input."""
        if self.position < len(self.source):
            return self.source[self.position]
        return ""

    def consume(self) -> str:
        ch = self.peek()
        if ch:
            self.position += 1
        return ch

    def at_end(self) -> bool:
        return self.position >= len(self.source)

    def read_while(self, predicate: Callable[[str], bool]) -> str:
        """Consume the longest run of characters accepted by ``predicate``."""
        start = self.position
        while not self.at_end() and predicate(self.peek()):
            self.position += 1
        return self.source[start : self.position]

    def unexpected_character(self) -> NoReturn:
        """Raise a lexical error for the current character."""
        raise UnexpectedCharacter(
            self.peek(),
            self.position,
            make_context(self.source, self.position),
        )

    def __repr__(self) -> str:
        return f"CharacterCursor(pos={self.position}, len={len(self.source)})"
