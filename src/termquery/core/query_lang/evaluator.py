"""
Query evaluator for termquery.

Walks a compiled AST against a subject string. Term nodes record where they
matched in the MatchContext, so both sides of every operator are always
evaluated: a match found under a failed ``&`` or a negation is still
reported.
"""

from __future__ import annotations

from termquery.core.ir.nodes import (
    TERM_CATEGORY,
    MatchContext,
    Node,
    NotNode,
    OpKind,
    OpNode,
    TermNode,
)


def evaluate(node: Node, subject: str, context: MatchContext) -> bool:
    """Evaluate a query tree against a subject.

    Args:
        node: Compiled query AST.
        subject: Text to search.
        context: Receives the positions of term matches.

    Returns:
        Whether the subject satisfies the query.
    """
    if isinstance(node, TermNode):
        return _evaluate_term(node, subject, context)

    if isinstance(node, NotNode):
        return not evaluate(node.inner, subject, context)

    if isinstance(node, OpNode):
        return _evaluate_op(node, subject, context)

    raise TypeError(f"Unknown query node type: {type(node).__name__}")


def _evaluate_term(node: TermNode, subject: str, context: MatchContext) -> bool:
    """Search for the term, dropping up to ``tolerance`` trailing characters."""
    value = node.value
    for gap in range(node.tolerance + 1):
        candidate = value[: len(value) - gap]
        index = subject.find(candidate)
        if index != -1:
            context.record(TERM_CATEGORY, index, len(candidate), gap)
            return True
    return False


def _evaluate_op(node: OpNode, subject: str, context: MatchContext) -> bool:
    # No short-circuit: both sides must record their matches.
    left = evaluate(node.left, subject, context)
    right = evaluate(node.right, subject, context)

    if node.kind == OpKind.AND:
        return left and right
    return left or right
