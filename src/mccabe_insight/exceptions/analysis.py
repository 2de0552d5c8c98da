"""Analysis-related exceptions: file access, parsing, malformed expressions."""

from pathlib import Path
from typing import List, Optional

from .base import McCabeInsightError


class AnalysisError(McCabeInsightError):
    """Base class for analysis-related errors."""
    pass


class FileAccessError(AnalysisError):
    """Raised when a source file cannot be accessed or read."""

    def __init__(self, filepath: Path, reason: str):
        super().__init__(
            f"Cannot access file: {filepath}",
            details={"filepath": str(filepath), "reason": reason},
        )
        self.filepath = filepath
        self.reason = reason


class ParseError(AnalysisError):
    """Raised when the parser cannot build a syntax tree for a source unit."""

    def __init__(self, source: str, language: str, reason: str):
        super().__init__(
            f"Parse failure in {language} source: {source}",
            details={"source": source, "language": language, "reason": reason},
        )
        self.source = source
        self.language = language
        self.reason = reason


class MalformedExpression(AnalysisError):
    """Raised when a binary operator's symbol cannot be located in its tokens."""

    def __init__(self, reason: str, line: Optional[int] = None):
        details = {"reason": reason}
        if line is not None:
            details["line"] = str(line)

        super().__init__("Cannot determine binary operator", details=details)
        self.reason = reason
        self.line = line


class UnsupportedLanguageError(AnalysisError):
    """Raised when attempting to analyze an unsupported language."""

    def __init__(self, language: str, supported_languages: List[str]):
        super().__init__(
            f"Unsupported language: {language}",
            details={"language": language, "supported": ", ".join(supported_languages)},
        )
        self.language = language
        self.supported_languages = supported_languages
