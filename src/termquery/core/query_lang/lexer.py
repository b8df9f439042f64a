"""
Lexer for the termquery language.

Turns a query string into a lazy stream of typed tokens with one token of
lookahead.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import StrEnum, auto

from termquery.core.charset import is_term_char
from termquery.core.query_lang.cursor import CharacterCursor


class TokenKind(StrEnum):
    """Token types for the query language."""

    TERM = auto()
    NOT = auto()
    AND = auto()
    OR = auto()
    LPAREN = auto()
    RPAREN = auto()


@dataclass(frozen=True, slots=True)
class Token:
    """A single token from the lexer."""

    kind: TokenKind
    value: str
    pos: int

    def __repr__(self) -> str:
        return f"Token({self.kind}, {self.value!r}, pos={self.pos})"


_SINGLE_CHAR: dict[str, TokenKind] = {
    "!": TokenKind.NOT,
    "&": TokenKind.AND,
    "|": TokenKind.OR,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
}


def _is_whitespace(ch: str) -> bool:
    return ch == " "


class Lexer:
    """Token stream over a CharacterCursor."""

    def __init__(self, source: str | CharacterCursor) -> None:
        self.cursor = CharacterCursor(source) if isinstance(source, str) else source
        self._current: Token | None = None

    @property
    def source(self) -> str:
        return self.cursor.source

    @property
    def position(self) -> int:
        """Offset of the cursor in the source."""
        return self.cursor.position

    def peek(self) -> Token | None:
        if self._current is None:
            self._current = self._read_next()
        return self._current

    def next(self) -> Token | None:
        tok = self._current
        self._current = None
        return tok if tok is not None else self._read_next()

    def at_end(self) -> bool:
        return self.peek() is None

    def __iter__(self) -> Iterator[Token]:
        while (tok := self.next()) is not None:
            yield tok

    def _read_next(self) -> Token | None:
        cursor = self.cursor
        cursor.read_while(_is_whitespace)
        if cursor.at_end():
            return None

        start = cursor.position
        ch = cursor.peek()

        if ch == '"':
            return Token(TokenKind.TERM, self._read_quoted(), start)

        if is_term_char(ch):
            return Token(TokenKind.TERM, cursor.read_while(is_term_char), start)

        kind = _SINGLE_CHAR.get(ch)
        if kind is not None:
            return Token(kind, cursor.consume(), start)

        cursor.unexpected_character()

    def _read_quoted(self) -> str:
        """Read a quoted term; a backslash makes the next character literal.

        An unterminated quote runs to end of input.
        """
        cursor = self.cursor
        cursor.consume()  # opening quote
        chars: list[str] = []
        escaped = False

        while not cursor.at_end():
            ch = cursor.consume()
            if escaped:
                chars.append(ch)
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                break
            else:
                chars.append(ch)

        return "".join(chars)


def tokenize(source: str) -> list[Token]:
    """Tokenize a query string into a list of tokens."""
    return list(Lexer(source))
