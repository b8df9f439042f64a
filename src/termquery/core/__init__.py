"""Core termquery functionality: IR, lexer, parser, evaluator, interpreter."""

from . import ir
from .errors import (
    ErrorContext,
    ExpectedPunctuation,
    LexError,
    MixedOperatorStyle,
    ParseError,
    QueryError,
    UnexpectedCharacter,
    UnexpectedToken,
)
from .interpreter import Interpreter, compile_query, match

__all__ = [
    "ir",
    "QueryError",
    "LexError",
    "ParseError",
    "UnexpectedCharacter",
    "UnexpectedToken",
    "ExpectedPunctuation",
    "MixedOperatorStyle",
    "ErrorContext",
    "Interpreter",
    "compile_query",
    "match",
]
