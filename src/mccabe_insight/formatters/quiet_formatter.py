"""Quiet formatter — nothing on stdout; the sink file is the output."""

from typing import List

from ..complexity.models import ComplexityRecord
from .base import BaseFormatter


class QuietFormatter(BaseFormatter):
    def render(self, records: List[ComplexityRecord]) -> None:
        pass

    def format(self, records: List[ComplexityRecord]) -> str:
        return ""
