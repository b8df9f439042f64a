"""
Character classes of the query language.

Shared by the lexer, which decides what an unquoted term is, and by the AST,
which quotes any term the lexer would not read back as a single word.
"""

import re

# ASCII letters and digits only
TERM_CHAR_RE = re.compile(r"[A-Za-z0-9]")
_BARE_TERM_RE = re.compile(r"[A-Za-z0-9]+")


def is_term_char(ch: str) -> bool:
    """True if ``ch`` can appear in an unquoted term."""
    return TERM_CHAR_RE.fullmatch(ch) is not None


def is_bare_term(value: str) -> bool:
    """True if ``value`` lexes as one unquoted term."""
    return _BARE_TERM_RE.fullmatch(value) is not None
