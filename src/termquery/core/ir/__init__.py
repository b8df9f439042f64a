"""
termquery Intermediate Representation (IR) types.

Query AST nodes and the match result produced by evaluating them.
"""

from .nodes import (
    TERM_CATEGORY,
    TOLERANCE_DIVISOR,
    MatchContext,
    Node,
    NotNode,
    OpKind,
    OpNode,
    TermMatch,
    TermNode,
)

__all__ = [
    "Node",
    "TermNode",
    "NotNode",
    "OpNode",
    "OpKind",
    "MatchContext",
    "TermMatch",
    "TERM_CATEGORY",
    "TOLERANCE_DIVISOR",
]
