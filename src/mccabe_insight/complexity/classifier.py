"""Decision-point classification of AST node kinds."""

from __future__ import annotations

from enum import Enum

from ..parsing.nodes import NodeKind


class Decision(Enum):
    """How a node kind contributes to the decision tally."""

    NONE = "none"
    UNCONDITIONAL = "unconditional"
    # Only a decision point for short-circuit operators
    CONDITIONAL = "conditional"


UNCONDITIONAL_KINDS = frozenset(
    {
        NodeKind.IF_STATEMENT,
        NodeKind.FOR_STATEMENT,
        NodeKind.WHILE_STATEMENT,
        NodeKind.SWITCH_CASE,
        NodeKind.SWITCH_DEFAULT,
        NodeKind.CONDITIONAL_EXPRESSION,
    }
)

# C spellings plus the C++ alternative tokens
LOGICAL_OPERATORS = frozenset({"&&", "||", "and", "or"})


def classify(kind: NodeKind) -> Decision:
    """Map a node kind to its decision rule."""
    if kind in UNCONDITIONAL_KINDS:
        return Decision.UNCONDITIONAL
    if kind is NodeKind.BINARY_OPERATOR:
        return Decision.CONDITIONAL
    return Decision.NONE


def is_logical_operator(symbol: str) -> bool:
    return symbol in LOGICAL_OPERATORS
