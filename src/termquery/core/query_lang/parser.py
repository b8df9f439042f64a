"""
Precedence-climbing parser for the termquery language.

Grammar:
    query       → expression EOF
    expression  → operand (op operand)*          explicit, climbed by precedence
    operand     → primary primary*               juxtaposition is an implicit "|"
    primary     → "!" primary | "(" expression ")" | TERM
    op          → "&" | "|"                      "&" binds tighter than "|"

A query uses either explicit operators or juxtaposition, never both:
``a b & c`` is rejected as ambiguous. The first form used pins the style for
the rest of the query, including nested groups.
"""

from __future__ import annotations

from enum import StrEnum, auto
from typing import NoReturn

from termquery.core.errors import (
    ExpectedPunctuation,
    MixedOperatorStyle,
    UnexpectedToken,
    make_context,
)
from termquery.core.ir.nodes import Node, NotNode, OpKind, OpNode, TermNode
from termquery.core.query_lang.lexer import Lexer, Token, TokenKind

# Binding strength: higher binds tighter
PRECEDENCE: dict[TokenKind, int] = {
    TokenKind.OR: 1,
    TokenKind.AND: 2,
}

_OP_KINDS: dict[TokenKind, OpKind] = {
    TokenKind.OR: OpKind.OR,
    TokenKind.AND: OpKind.AND,
}

_PUNCTUATION: dict[TokenKind, str] = {
    TokenKind.LPAREN: "(",
    TokenKind.RPAREN: ")",
}

# Tokens that can begin an operand
_OPERAND_START = frozenset({TokenKind.TERM, TokenKind.NOT, TokenKind.LPAREN})


class OperatorStyle(StrEnum):
    """How operands are combined within one query."""

    IMPLICIT = auto()
    EXPLICIT = auto()


class Parser:
    """Builds a query AST from a token stream."""

    def __init__(self, source: str | Lexer) -> None:
        self.lexer = Lexer(source) if isinstance(source, str) else source
        self.style: OperatorStyle | None = None

    def parse(self) -> Node:
        """Parse the whole query.

        Raises:
            UnexpectedToken: A token (or end of input) where none is allowed.
            ExpectedPunctuation: A missing closing parenthesis.
            MixedOperatorStyle: Implicit and explicit operators together.
            UnexpectedCharacter: The lexer hit an unknown character.
        """
        self.style = None
        node = self._parse_expression()

        tok = self.lexer.peek()
        if tok is not None:
            self._unexpected(tok)
        return node

    # -- Grammar rules --

    def _parse_expression(self) -> Node:
        """operand followed by any explicit operators."""
        return self._parse_operator(self._parse_operand(), 0)

    def _parse_operator(self, left: Node, prec: int) -> Node:
        """Fold explicit operators binding tighter than ``prec`` into ``left``."""
        while True:
            tok = self.lexer.peek()
            if tok is None or tok.kind not in PRECEDENCE:
                return left

            op_prec = PRECEDENCE[tok.kind]
            if op_prec <= prec:
                return left

            self._pin(OperatorStyle.EXPLICIT, tok)
            self.lexer.next()
            right = self._parse_operator(self._parse_operand(), op_prec)
            left = OpNode(kind=_OP_KINDS[tok.kind], left=left, right=right)

    def _parse_operand(self) -> Node:
        """primary, joined by implicit "|" to any operands that follow."""
        operands = [self._parse_primary()]
        while (tok := self.lexer.peek()) is not None and tok.kind in _OPERAND_START:
            self._pin(OperatorStyle.IMPLICIT, tok)
            operands.append(self._parse_primary())

        # a b c -> a | (b | c)
        node = operands.pop()
        while operands:
            node = OpNode(kind=OpKind.OR, left=operands.pop(), right=node)
        return node

    def _parse_primary(self) -> Node:
        """'!' primary | '(' expression ')' | TERM"""
        tok = self.lexer.peek()

        if tok is None:
            self._unexpected(None)

        if tok.kind == TokenKind.NOT:
            self.lexer.next()
            return NotNode(inner=self._parse_primary())

        if tok.kind == TokenKind.LPAREN:
            self._expect(TokenKind.LPAREN)
            node = self._parse_expression()
            self._expect(TokenKind.RPAREN)
            return node

        if tok.kind == TokenKind.TERM:
            self.lexer.next()
            return TermNode(value=tok.value)

        self._unexpected(tok)

    # -- Helpers --

    def _pin(self, style: OperatorStyle, tok: Token) -> None:
        if self.style is None:
            self.style = style
        elif self.style != style:
            raise MixedOperatorStyle(tok.pos, make_context(self.lexer.source, tok.pos))

    def _expect(self, kind: TokenKind) -> Token:
        tok = self.lexer.peek()
        if tok is None or tok.kind != kind:
            pos = tok.pos if tok is not None else self.lexer.position
            raise ExpectedPunctuation(
                _PUNCTUATION[kind],
                pos,
                make_context(self.lexer.source, pos),
            )
        self.lexer.next()
        return tok

    def _unexpected(self, tok: Token | None) -> NoReturn:
        pos = tok.pos if tok is not None else self.lexer.position
        raise UnexpectedToken(tok, pos, make_context(self.lexer.source, pos))


def parse_query(source: str) -> Node:
    """Parse a query string into an AST.

    Args:
        source: Query string (e.g., ``abc & !xyz | "two words"``)

    Returns:
        Root node of the parsed query.

    Raises:
        LexError: If the query contains an unknown character.
        ParseError: If the query is malformed.
    """
    return Parser(source).parse()
