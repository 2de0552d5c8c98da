"""
McCabe Insight - cyclomatic complexity for C and C++ functions

Parses a source unit with tree-sitter, classifies decision points
(if/for/while/case/default/ternary and short-circuit && / ||) and reports
one McCabe complexity score per function.
"""

__version__ = "0.1.0"

from .api import analyze_source, iter_records, run, run_paths
from .complexity import ComplexityRecord, Tally
from .config import AnalysisConfig, load_config

__all__ = [
    "analyze_source",  # Main entry point
    "iter_records",
    "run",
    "run_paths",
    "ComplexityRecord",
    "Tally",
    "AnalysisConfig",
    "load_config",
]
