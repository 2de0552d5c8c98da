"""Accumulate the decision tally over one function's subtree."""

from __future__ import annotations

from ..exceptions import MalformedExpression
from ..logging_config import get_logger
from .classifier import Decision, classify, is_logical_operator
from .models import DECISION_TALLY, EMPTY_TALLY, Cursor, Tally
from .operators import binary_operator

logger = get_logger(__name__)


def is_decision_point(node: Cursor) -> bool:
    """Classify a single node, resolving binary operators from tokens.

    Raises:
        MalformedExpression: If a binary operator cannot be resolved.
    """
    decision = classify(node.kind())
    if decision is Decision.UNCONDITIONAL:
        return True
    if decision is Decision.CONDITIONAL:
        return is_logical_operator(binary_operator(node))
    return False


def count_decisions(function: Cursor) -> Tally:
    """Return the (edges, nodes) tally for every descendant of ``function``.

    The function node itself is not classified. Nested function-like
    constructs are walked like any other subtree. A bodyless declaration
    yields an empty tally.
    """
    if not function.has_body():
        return EMPTY_TALLY

    tally = EMPTY_TALLY
    # Depth-first pre-order
    stack = list(reversed(function.children()))
    while stack:
        node = stack.pop()
        try:
            if is_decision_point(node):
                tally = tally + DECISION_TALLY
        except MalformedExpression as e:
            line = e.line if e.line is not None else node.location()[0]
            logger.warning(
                f"Ignoring expression at line {line}: {e}", extra={"source_line": line}
            )
        stack.extend(reversed(node.children()))
    return tally
