"""Tests for logging setup."""

import logging

import pytest
from rich.logging import RichHandler

from mccabe_insight.logging_config import (
    SourceLineFilter,
    get_logger,
    resolve_level,
    setup_logging,
)


class TestSetupLogging:
    def test_default_level_is_warning(self):
        assert setup_logging().level == logging.WARNING

    def test_verbose(self):
        assert setup_logging(verbose=True).level == logging.DEBUG

    def test_quiet_wins(self):
        assert setup_logging(verbose=True, quiet=True).level == logging.ERROR

    @pytest.mark.parametrize(
        "verbosity, level",
        [("quiet", logging.ERROR), ("normal", logging.WARNING), ("verbose", logging.DEBUG)],
    )
    def test_verbosity(self, verbosity, level):
        assert setup_logging(verbosity=verbosity).level == level

    def test_rich_handler_installed(self):
        setup_logging()
        assert any(isinstance(h, RichHandler) for h in logging.getLogger().handlers)

    def test_reconfigure_replaces_handlers(self):
        setup_logging()
        setup_logging(verbose=True)
        rich_handlers = [h for h in logging.getLogger().handlers if isinstance(h, RichHandler)]
        assert len(rich_handlers) == 1

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "run.log"
        logger = setup_logging(log_file=str(log_file))
        logger.warning("written to file")
        get_logger("complexity.accumulator").warning("bad operand", extra={"source_line": 12})
        for handler in logging.getLogger().handlers:
            handler.flush()
        lines = log_file.read_text().splitlines()
        assert "[src:-] written to file" in lines[0]
        assert "mccabe_insight.complexity.accumulator [src:12] bad operand" in lines[1]


class TestResolveLevel:
    def test_flags_override_verbosity(self):
        assert resolve_level(verbose=True, verbosity="quiet") == logging.DEBUG
        assert resolve_level(quiet=True, verbosity="verbose") == logging.ERROR

    def test_unknown_verbosity_falls_back_to_warning(self):
        assert resolve_level(verbosity="loud") == logging.WARNING


class TestSourceLineFilter:
    def test_default_placeholder(self):
        record = logging.LogRecord("x", logging.WARNING, __file__, 1, "msg", None, None)
        assert SourceLineFilter().filter(record)
        assert record.source_line == "-"

    def test_keeps_existing_line(self):
        record = logging.LogRecord("x", logging.WARNING, __file__, 1, "msg", None, None)
        record.source_line = 7
        SourceLineFilter().filter(record)
        assert record.source_line == 7


class TestGetLogger:
    def test_root_logger(self):
        assert get_logger().name == "mccabe_insight"

    def test_prefixes_module_names(self):
        assert get_logger("api").name == "mccabe_insight.api"

    def test_keeps_qualified_names(self):
        assert get_logger("mccabe_insight.output").name == "mccabe_insight.output"
