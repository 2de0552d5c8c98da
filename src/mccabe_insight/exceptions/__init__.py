"""Exception hierarchy for McCabe Insight."""

from .analysis import (
    AnalysisError,
    FileAccessError,
    MalformedExpression,
    ParseError,
    UnsupportedLanguageError,
)
from .base import McCabeInsightError
from .config import ConfigurationError, InvalidConfigError

__all__ = [
    "McCabeInsightError",
    "AnalysisError",
    "FileAccessError",
    "ParseError",
    "MalformedExpression",
    "UnsupportedLanguageError",
    "ConfigurationError",
    "InvalidConfigError",
]
