"""
Query AST and match result types for termquery.

The AST is a closed set of frozen models:
- TermNode: fuzzy substring match of a word or quoted phrase
- NotNode: negation of a single operand
- OpNode: binary ``&`` / ``|`` over two operands

A compiled tree is immutable and can be evaluated against any number of
subjects. Each evaluation writes into its own MatchContext.
"""

from __future__ import annotations

import math
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field

from termquery.core.charset import is_bare_term

# Longer terms tolerate more trailing truncation: ceil(len / 4) characters.
TOLERANCE_DIVISOR = 4

# ---------------------------------------------------------------------------
# Operators
# ---------------------------------------------------------------------------


class OpKind(StrEnum):
    """Binary operators for queries."""

    AND = "&"
    OR = "|"


# ---------------------------------------------------------------------------
# AST node types
# ---------------------------------------------------------------------------


class TermNode(BaseModel):
    """A term: a word or quoted phrase searched for in the subject."""

    value: str = Field(description="Literal text to search for")

    model_config = ConfigDict(frozen=True)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def tolerance(self) -> int:
        """Maximum number of trailing characters that may be dropped."""
        return math.ceil(len(self.value) / TOLERANCE_DIVISOR)

    def __str__(self) -> str:
        if is_bare_term(self.value):
            return self.value
        escaped = self.value.replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'


class NotNode(BaseModel):
    """Negation: ``!inner``."""

    inner: Node

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"!{self.inner}"


class OpNode(BaseModel):
    """Binary operation: left op right."""

    kind: OpKind
    left: Node
    right: Node

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"({self.left} {self.kind.value} {self.right})"


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

Node = TermNode | NotNode | OpNode

# Rebuild models for recursive forward references
NotNode.model_rebuild()
OpNode.model_rebuild()


# ---------------------------------------------------------------------------
# Match results
# ---------------------------------------------------------------------------

TERM_CATEGORY = "term"


class TermMatch(BaseModel):
    """Where a term matched: ``length`` characters at the recorded offset,
    after dropping ``gap`` characters from the end of the term."""

    length: int
    gap: int

    model_config = ConfigDict(frozen=True)


class MatchContext(BaseModel):
    """
    Accumulated result of one evaluation pass.

    ``term`` maps the start offset of each match to its TermMatch. Only the
    first match found at a given offset is kept. ``success`` holds the value
    of the whole query once the root node has been evaluated.
    """

    success: bool = False
    term: dict[int, TermMatch] = Field(default_factory=dict)

    def matches(self, category: str) -> dict[int, TermMatch]:
        """Sub-mapping for a match category."""
        if category != TERM_CATEGORY:
            raise KeyError(f"Unknown match category: {category}")
        return self.term

    def record(self, category: str, offset: int, length: int, gap: int) -> bool:
        """Store a match unless one already exists at ``offset``.

        Returns:
            True if the match was stored.
        """
        bucket = self.matches(category)
        if offset in bucket:
            return False
        bucket[offset] = TermMatch(length=length, gap=gap)
        return True

    def to_dict(self) -> dict[str, Any]:
        """Plain-data form: ``{"success": ..., "term": {offset: {...}}}``."""
        return self.model_dump()
