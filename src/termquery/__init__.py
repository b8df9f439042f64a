"""
termquery - boolean fuzzy-match queries over text.

Compile a query such as ``abc & !xxx | "two words"`` once, then test it
against any number of strings and see where each term matched.
"""

from __future__ import annotations

from ._version import get_version
from .core import ir
from .core.errors import LexError, ParseError, QueryError
from .core.interpreter import Interpreter, compile_query, match
from .core.ir import MatchContext

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "Interpreter",
    "MatchContext",
    "compile_query",
    "match",
    "QueryError",
    "LexError",
    "ParseError",
]
