"""
Logging configuration for McCabe Insight.

Diagnostics go to stderr through rich; stdout carries only ``--format``
output and the record sink is a file, so neither is touched here.

Records about a position in the analyzed source carry it as
``extra={"source_line": n}``; the file log prints it, the terminal
handler leaves it out.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "mccabe_insight"

VERBOSITY_LEVELS = {
    "quiet": logging.ERROR,
    "normal": logging.WARNING,
    "verbose": logging.DEBUG,
}

_FILE_FORMAT = "%(asctime)s %(levelname)-8s %(name)s [src:%(source_line)s] %(message)s"


class SourceLineFilter(logging.Filter):
    """Give every record a ``source_line`` attribute ("-" when absent)."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "source_line"):
            record.source_line = "-"
        return True


def resolve_level(
    verbose: bool = False, quiet: bool = False, verbosity: Optional[str] = None
) -> int:
    """Log level for the given flags; ``quiet`` wins over ``verbose``, flags over ``verbosity``."""
    if quiet:
        return logging.ERROR
    if verbose:
        return logging.DEBUG
    return VERBOSITY_LEVELS.get(verbosity or "normal", logging.WARNING)


def setup_logging(
    verbose: bool = False,
    quiet: bool = False,
    log_file: Optional[str] = None,
    verbosity: Optional[str] = None,
) -> logging.Logger:
    """
    Route mccabe_insight logging to a rich stderr handler.

    Args:
        verbose: Enable DEBUG level logging
        quiet: Suppress all but ERROR level logging
        log_file: Optional file that also receives every record, with its source line
        verbosity: "quiet", "normal" or "verbose", used when neither flag is set

    Returns:
        The package logger
    """
    level = resolve_level(verbose, quiet, verbosity)
    debug = level <= logging.DEBUG

    handlers: list[logging.Handler] = [
        RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            tracebacks_show_locals=debug,
            # source snippets and identifiers may contain [brackets]
            markup=False,
            show_time=debug,
            show_path=debug,
        )
    ]

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(_FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        handlers.append(file_handler)

    for handler in handlers:
        handler.addFilter(SourceLineFilter())

    # Reconfigurable: the CLI sets up once from flags, again once config is loaded
    logging.basicConfig(level=level, format="%(message)s", handlers=handlers, force=True)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Logger under the mccabe_insight namespace (``get_logger(__name__)`` in modules)."""
    if name is None:
        return logging.getLogger(LOGGER_NAME)

    if not name.startswith(LOGGER_NAME):
        name = f"{LOGGER_NAME}.{name}"

    return logging.getLogger(name)
