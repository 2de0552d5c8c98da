"""McCabe cyclomatic complexity from a decision tally."""

from .models import Tally


def cyclomatic_complexity(tally: Tally) -> int:
    """Compute E - N + 2, counting one implicit entry node.

    The tally holds only decision-induced nodes, so the entry node is added
    here. An empty tally gives 1, the straight-line baseline.
    """
    edges = tally.edges
    nodes = tally.nodes + 1
    return edges - nodes + 2
