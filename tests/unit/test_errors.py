"""Tests for termquery error types."""

import pytest

from termquery.core.errors import (
    ErrorContext,
    ExpectedPunctuation,
    LexError,
    MixedOperatorStyle,
    ParseError,
    QueryError,
    UnexpectedCharacter,
    UnexpectedToken,
    make_context,
)
from termquery.core.query_lang.lexer import Token, TokenKind


class TestErrorHierarchy:
    @pytest.mark.parametrize(
        ("error", "base"),
        [
            (UnexpectedCharacter("@", 0), LexError),
            (UnexpectedToken(None, 0), ParseError),
            (ExpectedPunctuation(")", 0), ParseError),
            (MixedOperatorStyle(0), ParseError),
        ],
    )
    def test_bases(self, error: QueryError, base: type[QueryError]) -> None:
        assert isinstance(error, base)
        assert isinstance(error, QueryError)


class TestErrorMessages:
    def test_message_includes_position(self) -> None:
        error = UnexpectedCharacter("@", 4)
        assert str(error) == "Unexpected character: '@' (4)"
        assert error.context is None

    def test_unexpected_token_message(self) -> None:
        error = UnexpectedToken(Token(TokenKind.RPAREN, ")", 2), 2)
        assert error.message == "Unexpected token: rparen (')')"

    def test_end_of_input_message(self) -> None:
        assert UnexpectedToken(None, 3).message == "Unexpected end of input"

    def test_expected_punctuation_message(self) -> None:
        assert ExpectedPunctuation(")", 6).message == 'Expecting punctuation: ")"'

    def test_message_with_context(self) -> None:
        error = MixedOperatorStyle(4, make_context("a b & c", 4))
        lines = str(error).split("\n")
        assert lines[1] == "  a b & c"
        assert lines[2] == "      ^"


class TestErrorContext:
    def test_format_marks_position(self) -> None:
        assert ErrorContext(source="abc @", position=4).format() == "  abc @\n      ^"

    def test_format_at_end_of_input(self) -> None:
        assert ErrorContext(source="(a", position=2).format() == "  (a\n    ^"

    def test_make_context_without_source(self) -> None:
        assert make_context(None, 3) is None
