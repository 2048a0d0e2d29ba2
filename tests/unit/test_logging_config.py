"""
RF Signal - Logging Configuration Tests
"""

import json
import logging
import sys

import pytest

from rf_signal.config.schema import LoggingConfig
from rf_signal.core import logging_config
from rf_signal.core.logging_config import (
    ColoredFormatter,
    StructuredFormatter,
    configure_logging,
    get_logger,
    set_level,
    setup_logging,
)


@pytest.fixture
def clean_logging(monkeypatch):
    """Reset the module flag and restore root handlers after the test."""
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    monkeypatch.setattr(logging_config, "_initialized", False)
    yield root
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


def _record(msg="Split capture", **extra):
    record = logging.LogRecord(
        name="rf_signal.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=10,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestStructuredFormatter:
    def test_core_fields(self):
        entry = json.loads(StructuredFormatter().format(_record()))

        assert entry["level"] == "INFO"
        assert entry["logger"] == "rf_signal.test"
        assert entry["message"] == "Split capture"
        assert "timestamp" in entry

    def test_extra_fields(self):
        entry = json.loads(StructuredFormatter().format(_record(windows=5)))
        assert entry["windows"] == 5

    def test_non_serializable_extra(self):
        entry = json.loads(StructuredFormatter().format(_record(rate=complex(1, 2))))
        assert entry["rate"] == "(1+2j)"

    def test_exception(self):
        try:
            raise ValueError("boom")
        except ValueError:
            record = _record()
            record.exc_info = sys.exc_info()

        entry = json.loads(StructuredFormatter().format(record))
        assert "ValueError: boom" in entry["exception"]


class TestColoredFormatter:
    def test_level_coloured_without_mutating_record(self):
        record = _record()
        output = ColoredFormatter("%(levelname)s %(message)s").format(record)

        assert "\033[32m" in output
        assert record.levelname == "INFO"


class TestSetupLogging:
    def test_sets_level_and_handler(self, clean_logging):
        setup_logging(level="DEBUG")

        assert clean_logging.level == logging.DEBUG
        assert len(clean_logging.handlers) == 1

    def test_idempotent(self, clean_logging):
        setup_logging(level="INFO")
        setup_logging(level="DEBUG")

        assert clean_logging.level == logging.INFO

    def test_force(self, clean_logging):
        setup_logging(level="INFO")
        setup_logging(level="ERROR", force=True)

        assert clean_logging.level == logging.ERROR
        assert len(clean_logging.handlers) == 1

    def test_structured_console(self, clean_logging):
        setup_logging(structured=True)
        assert isinstance(clean_logging.handlers[0].formatter, StructuredFormatter)

    def test_log_file(self, clean_logging, tmp_path):
        log_file = tmp_path / "logs" / "rf_signal.log"

        setup_logging(level="INFO", log_file=str(log_file))
        get_logger("rf_signal.test").info("Capture read", extra={"num_samples": 8})
        for handler in clean_logging.handlers:
            handler.flush()

        lines = log_file.read_text().splitlines()
        entry = json.loads(lines[-1])
        assert entry["message"] == "Capture read"
        assert entry["num_samples"] == 8


class TestConfigureLogging:
    def test_from_config_section(self, clean_logging, tmp_path):
        log_file = tmp_path / "analysis.log"

        configure_logging(LoggingConfig(level="info", log_file=str(log_file), structured=True))

        assert clean_logging.level == logging.INFO
        assert len(clean_logging.handlers) == 2
        assert all(isinstance(h.formatter, StructuredFormatter) for h in clean_logging.handlers)

    def test_force(self, clean_logging):
        configure_logging(LoggingConfig(level="ERROR"))
        configure_logging(LoggingConfig(level="DEBUG"), force=True)

        assert clean_logging.level == logging.DEBUG

class TestSetLevel:
    def test_set_level_by_name(self):
        logger = get_logger("rf_signal.test.level")
        set_level("rf_signal.test.level", "debug")
        assert logger.level == logging.DEBUG

    def test_set_level_by_number(self):
        set_level("rf_signal.test.level", logging.ERROR)
        assert get_logger("rf_signal.test.level").level == logging.ERROR
