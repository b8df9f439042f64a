"""
termquery query language.

Cursor, lexer, parser, and evaluator for boolean fuzzy-match queries.

Usage:
    from termquery.core.query_lang import evaluate, parse_query
    from termquery.core.ir import MatchContext

    tree = parse_query("abc & !xxx | def")
    context = MatchContext()
    evaluate(tree, "mystring abc def ghi jkl", context)
    # True
"""

from termquery.core.query_lang.evaluator import evaluate
from termquery.core.query_lang.lexer import Lexer, Token, TokenKind, tokenize
from termquery.core.query_lang.parser import OperatorStyle, Parser, parse_query

__all__ = [
    "Lexer",
    "OperatorStyle",
    "Parser",
    "Token",
    "TokenKind",
    "evaluate",
    "parse_query",
    "tokenize",
]
