"""Base formatter interface for McCabe Insight output rendering."""

from abc import ABC, abstractmethod
from typing import List

from ..complexity.models import ComplexityRecord


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    @abstractmethod
    def render(self, records: List[ComplexityRecord]) -> None:
        """Render records to stderr/stdout as appropriate."""

    @abstractmethod
    def format(self, records: List[ComplexityRecord]) -> str:
        """Return formatted string representation of records."""
