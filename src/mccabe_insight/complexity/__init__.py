"""McCabe cyclomatic complexity over a parsed syntax tree."""

from .accumulator import count_decisions, is_decision_point
from .calculator import cyclomatic_complexity
from .classifier import LOGICAL_OPERATORS, Decision, classify
from .enumerator import analyze_functions, iter_functions, measure_function
from .models import ComplexityRecord, Cursor, Tally
from .operators import binary_operator

__all__ = [
    "ComplexityRecord",
    "Cursor",
    "Tally",
    "Decision",
    "LOGICAL_OPERATORS",
    "classify",
    "binary_operator",
    "is_decision_point",
    "count_decisions",
    "cyclomatic_complexity",
    "iter_functions",
    "measure_function",
    "analyze_functions",
]
