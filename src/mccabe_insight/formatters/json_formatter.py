"""JSON formatter for McCabe Insight."""

import json
from dataclasses import asdict
from typing import List

from ..complexity.models import ComplexityRecord
from .base import BaseFormatter


class JsonFormatter(BaseFormatter):
    """Render records as JSON."""

    def render(self, records: List[ComplexityRecord]) -> None:
        print(self.format(records))

    def format(self, records: List[ComplexityRecord]) -> str:
        data = [asdict(r) for r in records]
        return json.dumps(data, indent=2)
