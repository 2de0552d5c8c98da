"""Recover the operator symbol of a binary expression from its tokens."""

from __future__ import annotations

from ..exceptions import MalformedExpression
from .models import Cursor


def binary_operator(node: Cursor) -> str:
    """Return the operator symbol of a binary-operator node.

    The operator is the first token after the left-hand operand, i.e. the
    token of the whole expression at index len(tokens of left operand).

    Raises:
        MalformedExpression: If the node has no operand, the left operand
            spans no tokens, or no token follows it.
    """
    line = node.location()[0]

    children = node.children()
    if not children:
        raise MalformedExpression("binary expression has no operands", line)

    expression_tokens = node.tokens_in_extent()
    if not expression_tokens:
        raise MalformedExpression("expression extent has no tokens", line)

    lhs_count = len(children[0].tokens_in_extent())
    if lhs_count == 0:
        raise MalformedExpression("left operand has no tokens", line)
    if lhs_count >= len(expression_tokens):
        raise MalformedExpression(
            f"no operator token after {lhs_count} operand tokens", line
        )

    return expression_tokens[lhs_count].text
