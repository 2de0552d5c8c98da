"""Plain text formatter — the same lines the sink receives."""

from typing import List

from ..complexity.models import ComplexityRecord
from .base import BaseFormatter


class TextFormatter(BaseFormatter):
    """Render ``<line> <name> <complexity>``, one function per line."""

    def render(self, records: List[ComplexityRecord]) -> None:
        if records:
            print(self.format(records))

    def format(self, records: List[ComplexityRecord]) -> str:
        return "\n".join(r.to_line() for r in records)
