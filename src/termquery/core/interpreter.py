"""
Query interpreter: compile a query once, match it against many subjects.

Usage:
    from termquery.core.interpreter import Interpreter

    interpreter = Interpreter('!abc | "defg ghij"')
    result = interpreter.execute("mystring abc defg ghi jkl")
    result.success  # True
    result.term     # {9: TermMatch(length=3, gap=0), 13: TermMatch(length=8, gap=1)}
"""

from __future__ import annotations

import logging

from termquery.core.errors import QueryError
from termquery.core.ir.nodes import MatchContext, Node
from termquery.core.query_lang.evaluator import evaluate
from termquery.core.query_lang.parser import Parser

logger = logging.getLogger(__name__)


class Interpreter:
    """Holds one query and its lazily compiled AST.

    Nothing is parsed at construction; syntax errors surface on the first
    ``compile()`` or ``execute()``.
    """

    def __init__(self, query: str) -> None:
        self.query = query
        self._root: Node | None = None

    @property
    def compiled(self) -> bool:
        return self._root is not None

    def compile(self) -> Node:
        """Parse the query on first call; later calls return the same tree.

        Raises:
            LexError: If the query contains an unknown character.
            ParseError: If the query is malformed.
        """
        if self._root is None:
            try:
                self._root = Parser(self.query).parse()
            except QueryError as e:
                logger.debug("Failed to compile query %r: %s", self.query, e.message)
                raise
            logger.debug("Compiled query %r -> %s", self.query, self._root)
        return self._root

    def execute(self, subject: str, context: MatchContext | None = None) -> MatchContext:
        """Match the query against ``subject``.

        Args:
            subject: Text to search.
            context: Optional context to record into. A fresh one is created
                when omitted.

        Returns:
            The context, with ``success`` set to the query's result.
        """
        root = self.compile()
        if context is None:
            context = MatchContext()
        context.success = evaluate(root, subject, context)
        return context

    def __repr__(self) -> str:
        return f"Interpreter({self.query!r}, compiled={self.compiled})"


def compile_query(query: str) -> Interpreter:
    """Create an interpreter and compile it immediately."""
    interpreter = Interpreter(query)
    interpreter.compile()
    return interpreter


def match(query: str, subject: str) -> MatchContext:
    """One-shot match of ``query`` against ``subject``."""
    return Interpreter(query).execute(subject)
