"""Tests for recovering binary operator symbols from tokens."""

import pytest

from mccabe_insight.complexity.operators import binary_operator
from mccabe_insight.exceptions import AnalysisError, MalformedExpression
from mccabe_insight.parsing.nodes import NodeKind


class TestBinaryOperator:
    """Operator = token right after the left operand's tokens."""

    @pytest.mark.parametrize("op", ["&&", "||", "&", "+", "==", "<<"])
    def test_simple_operands(self, build, op):
        expr = build.binary(build.leaf("a"), op, build.leaf("b"))
        assert binary_operator(expr) == op

    def test_multi_token_left_operand(self, build):
        # (x + 1) && y
        inner = build.binary(build.leaf("x"), "+", build.leaf("1"))
        left = build.raw(NodeKind.OTHER, [inner], tokens=["(", "x", "+", "1", ")"])
        expr = build.binary(left, "&&", build.leaf("y"))
        assert binary_operator(expr) == "&&"

    def test_nested_left_binary(self, build):
        # a || b && c parsed as (a || b) ... only the outer operator is returned
        left = build.binary(build.leaf("a"), "||", build.leaf("b"))
        expr = build.binary(left, "&&", build.leaf("c"))
        assert binary_operator(expr) == "&&"
        assert binary_operator(left) == "||"


class TestMalformedExpression:
    """Degenerate extents fail with a named condition, never IndexError."""

    def test_empty_left_operand(self, build):
        expr = build.raw(
            NodeKind.BINARY_OPERATOR,
            [build.raw(tokens=[]), build.leaf("b")],
            tokens=["&&", "b"],
        )
        with pytest.raises(MalformedExpression, match="left operand has no tokens"):
            binary_operator(expr)

    def test_no_children(self, build):
        expr = build.raw(NodeKind.BINARY_OPERATOR, [], tokens=["a", "&&", "b"])
        with pytest.raises(MalformedExpression):
            binary_operator(expr)

    def test_extent_without_tokens(self, build):
        expr = build.raw(NodeKind.BINARY_OPERATOR, [build.leaf("a")], tokens=[])
        with pytest.raises(MalformedExpression):
            binary_operator(expr)

    def test_left_operand_covers_whole_extent(self, build):
        expr = build.raw(NodeKind.BINARY_OPERATOR, [build.leaf("a")], tokens=["a"])
        with pytest.raises(MalformedExpression, match="no operator token"):
            binary_operator(expr)

    def test_is_an_analysis_error(self, build):
        expr = build.raw(NodeKind.BINARY_OPERATOR, [], tokens=[], line=7)
        with pytest.raises(AnalysisError) as excinfo:
            binary_operator(expr)
        assert excinfo.value.line == 7
        assert "line=7" in str(excinfo.value)
