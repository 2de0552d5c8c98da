"""Find function definitions in a source unit and measure each one."""

from __future__ import annotations

from typing import Iterator

from ..logging_config import get_logger
from ..parsing.nodes import NodeKind
from .accumulator import count_decisions
from .calculator import cyclomatic_complexity
from .models import ComplexityRecord, Cursor

logger = get_logger(__name__)


def iter_functions(root: Cursor) -> Iterator[Cursor]:
    """Yield function nodes below ``root`` in source order.

    Containers (preprocessor blocks, linkage specs, namespaces, class
    bodies) are searched; a matched function is never searched again.
    """
    stack = list(reversed(root.children()))
    while stack:
        node = stack.pop()
        if node.kind() is NodeKind.FUNCTION_DEFINITION:
            yield node
            continue
        stack.extend(reversed(node.children()))


def measure_function(function: Cursor) -> ComplexityRecord:
    """Build the complexity record for one function node."""
    tally = count_decisions(function)
    line, column = function.location()
    record = ComplexityRecord(
        line=line,
        name=function.spelling(),
        complexity=cyclomatic_complexity(tally),
        column=column,
        has_body=function.has_body(),
    )
    logger.debug(
        f"{record.name or '<anonymous>'} at line {line}: "
        f"edges={tally.edges} nodes={tally.nodes} complexity={record.complexity}"
    )
    return record


def analyze_functions(
    root: Cursor, report_declarations: bool = True
) -> Iterator[ComplexityRecord]:
    """Yield one record per function in discovery order.

    Args:
        root: Translation-unit node
        report_declarations: Also report bodyless prototypes (complexity 1)
    """
    for function in iter_functions(root):
        if not report_declarations and not function.has_body():
            logger.debug(f"Skipping prototype {function.spelling()!r}")
            continue
        yield measure_function(function)
