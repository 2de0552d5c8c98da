"""CSV formatter for McCabe Insight."""

import csv
import io
from typing import List

from ..complexity.models import ComplexityRecord
from .base import BaseFormatter


class CsvFormatter(BaseFormatter):
    """Render records as CSV."""

    def render(self, records: List[ComplexityRecord]) -> None:
        print(self.format(records), end="")

    def format(self, records: List[ComplexityRecord]) -> str:
        output = io.StringIO()
        writer = csv.writer(output, lineterminator="\n")
        writer.writerow(["line", "column", "name", "complexity", "has_body"])
        for r in records:
            writer.writerow([r.line, r.column, r.name, r.complexity, str(r.has_body).lower()])
        return output.getvalue()
