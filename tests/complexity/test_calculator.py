"""Tests for the McCabe formula."""

import pytest

from mccabe_insight.complexity.calculator import cyclomatic_complexity
from mccabe_insight.complexity.models import DECISION_TALLY, EMPTY_TALLY, Tally


@pytest.mark.parametrize(
    "tally, expected",
    [
        pytest.param(Tally(0, 0), 1, id="straight-line"),
        pytest.param(Tally(2, 1), 2, id="one-decision"),
        pytest.param(Tally(4, 2), 3, id="if-with-and"),
        pytest.param(Tally(20, 10), 11, id="ten-decisions"),
    ],
)
def test_cyclomatic_complexity(tally, expected):
    assert cyclomatic_complexity(tally) == expected


def test_formula_counts_entry_node():
    """E - (N + 1) + 2 for arbitrary tallies."""
    for edges, nodes in [(0, 0), (3, 1), (7, 5)]:
        assert cyclomatic_complexity(Tally(edges, nodes)) == edges - (nodes + 1) + 2


class TestTally:
    def test_addition(self):
        assert Tally(2, 1) + Tally(4, 2) == Tally(6, 3)

    def test_empty_is_identity(self):
        assert EMPTY_TALLY + DECISION_TALLY == DECISION_TALLY

    def test_immutable(self):
        tally = Tally(2, 1)
        with pytest.raises(AttributeError):
            tally.edges = 5
