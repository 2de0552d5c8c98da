"""Public API for McCabe Insight.

Example:
    >>> from mccabe_insight import analyze_source
    >>> [r.to_line() for r in analyze_source("int f(int a) { if (a) return 1; return 0; }")]
    ['1 f 2']

    >>> from mccabe_insight import run
    >>> records = run(source_text, output_path="output.cy")
"""

from __future__ import annotations

import os
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator, Optional, Sequence, Union

from .complexity import ComplexityRecord, analyze_functions
from .config import AnalysisConfig
from .exceptions import AnalysisError, FileAccessError
from .logging_config import get_logger
from .output import RecordWriter
from .parsing import SourceUnit, parse_source

logger = get_logger(__name__)

# Default worker count: use CPU count, capped at 8 to avoid overwhelming I/O
_DEFAULT_WORKERS = min(os.cpu_count() or 4, 8)


@dataclass
class UnitResult:
    """Records (or the error) for one source unit of a batch."""

    name: str
    records: list[ComplexityRecord] = field(default_factory=list)
    error: Optional[AnalysisError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def parse_unit(
    source: Union[str, bytes], config: Optional[AnalysisConfig] = None, name: str = "<stdin>"
) -> SourceUnit:
    """Parse ``source`` with the language and strictness from ``config``."""
    config = config or AnalysisConfig()
    return parse_source(
        source,
        language=config.language,
        name=name,
        encoding=config.encoding,
        strict_syntax=config.strict_syntax,
    )


def iter_records(
    source: Union[str, bytes], config: Optional[AnalysisConfig] = None, name: str = "<stdin>"
) -> Iterator[ComplexityRecord]:
    """Parse ``source`` and lazily yield a record per function.

    Raises:
        ParseError: Before the first record, if ``source`` cannot be parsed
    """
    config = config or AnalysisConfig()
    unit = parse_unit(source, config, name)
    return analyze_functions(unit.root, report_declarations=config.report_declarations)


def analyze_source(
    source: Union[str, bytes], config: Optional[AnalysisConfig] = None, name: str = "<stdin>"
) -> list[ComplexityRecord]:
    """Return the complexity records of every function in ``source``."""
    return list(iter_records(source, config, name))


def run(
    source: Union[str, bytes],
    config: Optional[AnalysisConfig] = None,
    name: str = "<stdin>",
    output_path: Optional[Union[str, Path]] = None,
) -> list[ComplexityRecord]:
    """Analyze one unit, streaming each record to the sink as it is found.

    The sink is truncated before parsing, so a parse failure leaves it empty.

    Args:
        source: Full source text
        config: Analysis configuration (defaults if None)
        name: Label for diagnostics
        output_path: Sink path (defaults to ``config.output_path``)

    Returns:
        Records in discovery order

    Raises:
        ParseError: If the unit cannot be parsed
        FileAccessError: If the sink cannot be opened
    """
    config = config or AnalysisConfig()
    records: list[ComplexityRecord] = []
    with RecordWriter(output_path or config.output_path) as sink:
        for record in iter_records(source, config, name):
            sink.write(record)
            records.append(record)
    return records


def analyze_file(path: Path, config: Optional[AnalysisConfig] = None) -> UnitResult:
    """Analyze one file, capturing analysis errors in the result."""
    config = config or AnalysisConfig()
    try:
        try:
            content = path.read_bytes()
        except OSError as e:
            raise FileAccessError(path, e.strerror or str(e))
        records = analyze_source(content, config, name=str(path))
    except AnalysisError as e:
        logger.error(f"{e.__class__.__name__}: {e}")
        return UnitResult(name=str(path), error=e)
    return UnitResult(name=str(path), records=records)


def analyze_paths(
    paths: Sequence[Path],
    config: Optional[AnalysisConfig] = None,
    parallel: bool = True,
) -> Iterator[UnitResult]:
    """Analyze independent files, yielding results in input order.

    Units share no state, so they are analyzed on a thread pool; results
    come back to the calling thread, which is the only one that writes.
    """
    config = config or AnalysisConfig()
    workers = config.workers or _DEFAULT_WORKERS

    if not parallel or workers == 1 or len(paths) < 2:
        for path in paths:
            yield analyze_file(path, config)
        return

    with ThreadPoolExecutor(max_workers=workers) as executor:
        yield from executor.map(lambda p: analyze_file(p, config), paths)


def run_paths(
    paths: Sequence[Path],
    config: Optional[AnalysisConfig] = None,
    output_path: Optional[Union[str, Path]] = None,
) -> list[UnitResult]:
    """Analyze several files into one sink, appending each file's records in input order.

    Units that fail contribute no records; the run continues with the rest.
    """
    config = config or AnalysisConfig()
    results: list[UnitResult] = []
    with RecordWriter(output_path or config.output_path) as sink:
        for result in analyze_paths(paths, config):
            sink.write_all(result.records)
            results.append(result)
    failed = sum(1 for r in results if not r.ok)
    if failed:
        logger.warning(f"{failed} of {len(results)} unit(s) failed to analyze")
    return results


def all_records(results: Iterable[UnitResult]) -> list[ComplexityRecord]:
    return [record for result in results for record in result.records]
