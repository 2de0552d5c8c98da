"""Output formatters for McCabe Insight."""

from .base import BaseFormatter
from .csv_formatter import CsvFormatter
from .json_formatter import JsonFormatter
from .quiet_formatter import QuietFormatter
from .rich_formatter import RichFormatter
from .text_formatter import TextFormatter

FORMATTERS = {
    "quiet": QuietFormatter,
    "text": TextFormatter,
    "json": JsonFormatter,
    "csv": CsvFormatter,
    "rich": RichFormatter,
}


def get_formatter(name: str) -> BaseFormatter:
    """Get a formatter instance by name.

    Args:
        name: One of "quiet", "text", "json", "csv", "rich"

    Raises:
        ValueError: If name is not recognized
    """
    cls = FORMATTERS.get(name)
    if cls is None:
        raise ValueError(f"Unknown formatter: {name!r}. Choose from: {', '.join(sorted(FORMATTERS))}")
    return cls()


__all__ = [
    "BaseFormatter",
    "QuietFormatter",
    "TextFormatter",
    "JsonFormatter",
    "CsvFormatter",
    "RichFormatter",
    "FORMATTERS",
    "get_formatter",
]
