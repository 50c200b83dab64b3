"""
Test suite for logging configuration

Tests JSON formatting, handler setup and structured action logging.
"""

import io
import json
import logging

import pytest

from strongbox.logging_config import (
    JSONFormatter, setup_logging, get_logger, log_action
)


def capture(logger_name):
    """Attach a JSON handler writing to a StringIO"""
    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(JSONFormatter())
    logger = setup_logging("DEBUG", logger_name=logger_name)
    logger.handlers[:] = [handler]
    return logger, stream


class TestJSONFormatter:
    def test_format_drops_empty_fields(self):
        record = logging.LogRecord("strongbox.test", logging.INFO, __file__, 1,
                                   "hello %s", ("world",), None)

        entry = json.loads(JSONFormatter().format(record))

        assert entry["level"] == "INFO"
        assert entry["logger"] == "strongbox.test"
        assert entry["message"] == "hello world"
        assert "timestamp" in entry
        assert "account" not in entry
        assert "outcome" not in entry


class TestSetupLogging:
    def test_json_handler_installed(self):
        logger = setup_logging("info")

        assert logger.name == "strongbox"
        assert logger.level == logging.INFO
        assert not logger.propagate
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].formatter, JSONFormatter)

    def test_repeated_setup_does_not_duplicate_handlers(self):
        setup_logging()
        logger = setup_logging()

        assert len(logger.handlers) == 1

    def test_text_format(self):
        logger = setup_logging("DEBUG", fmt="text")

        assert not isinstance(logger.handlers[0].formatter, JSONFormatter)

    def test_log_file(self, tmp_path):
        path = tmp_path / "strongbox.log"
        logger = setup_logging("INFO", log_file=str(path))

        logger.info("to file")
        logger.handlers[0].flush()

        entry = json.loads(path.read_text().splitlines()[0])
        assert entry["message"] == "to file"

    def test_unknown_format(self):
        with pytest.raises(ValueError, match="Unknown log format"):
            setup_logging(fmt="xml")

    def test_get_logger(self):
        assert get_logger("strongbox.accounts").name == "strongbox.accounts"


class TestLogAction:
    def test_structured_fields(self):
        logger, stream = capture("strongbox")

        log_action(logger, "info", "deposit 100: ok", account="Moe",
                   action="deposit", outcome="ok", extra={"balance": "2100"})

        entry = json.loads(stream.getvalue())
        assert entry["account"] == "Moe"
        assert entry["action"] == "deposit"
        assert entry["outcome"] == "ok"
        assert entry["extra"] == {"balance": "2100"}

    def test_below_level_not_emitted(self):
        logger, stream = capture("strongbox")
        logger.setLevel(logging.WARNING)

        log_action(logger, "debug", "quiet", action="deposit")

        assert stream.getvalue() == ""

    def test_child_logger_output(self):
        _, stream = capture("strongbox")
        child = get_logger("strongbox.batch")

        log_action(child, "info", "deposit_all 1000: 4 succeeded, 0 failed",
                   action="deposit_all")

        entry = json.loads(stream.getvalue())
        assert entry["logger"] == "strongbox.batch"
        assert entry["action"] == "deposit_all"
