"""Tests for the exception hierarchy."""

from pathlib import Path

import pytest

from mccabe_insight.exceptions import (
    AnalysisError,
    ConfigurationError,
    FileAccessError,
    InvalidConfigError,
    MalformedExpression,
    McCabeInsightError,
    ParseError,
    UnsupportedLanguageError,
)


class TestHierarchy:
    @pytest.mark.parametrize(
        "exc",
        [
            ParseError("<stdin>", "c", "no tree"),
            MalformedExpression("left operand has no tokens", 3),
            FileAccessError(Path("x.c"), "denied"),
            UnsupportedLanguageError("go", ["c", "cpp"]),
        ],
    )
    def test_analysis_errors(self, exc):
        assert isinstance(exc, AnalysisError)
        assert isinstance(exc, McCabeInsightError)

    def test_config_errors(self):
        exc = InvalidConfigError("workers", 0, "must be at least 1")
        assert isinstance(exc, ConfigurationError)
        assert isinstance(exc, McCabeInsightError)


class TestMessages:
    def test_details_rendered(self):
        exc = ParseError("main.c", "c", "syntax error near line 4")
        assert str(exc) == (
            "Parse failure in c source: main.c "
            "(source=main.c, language=c, reason=syntax error near line 4)"
        )

    def test_no_details(self):
        assert str(McCabeInsightError("plain")) == "plain"

    def test_malformed_expression_without_line(self):
        exc = MalformedExpression("empty extent")
        assert exc.line is None
        assert exc.details == {"reason": "empty extent"}

    def test_unsupported_language_lists_supported(self):
        exc = UnsupportedLanguageError("rust", ["c", "cpp"])
        assert exc.details["supported"] == "c, cpp"
