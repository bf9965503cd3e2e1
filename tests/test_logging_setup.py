"""
Tests for structlog configuration.
"""
import json
import logging

import structlog

from dt2js.config import LoggingConfig
from dt2js.logging_setup import configure_logging


def test_configure_logging_writes_json_to_file(tmp_path):
    log_file = tmp_path / "dt2js.log"
    configure_logging(LoggingConfig(level="INFO", format="json", file=log_file))
    try:
        structlog.get_logger("dt2js.test").info("Conversion finished.", type_name="Cat")
        logging.getLogger().handlers[0].flush()

        lines = [json.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines()]
        assert lines[-1]["event"] == "Conversion finished."
        assert lines[-1]["type_name"] == "Cat"
        assert lines[-1]["level"] == "info"
        assert "timestamp" in lines[-1]
    finally:
        for handler in logging.getLogger().handlers:
            handler.close()
        logging.getLogger().handlers.clear()


def test_configure_logging_filters_below_level(tmp_path):
    log_file = tmp_path / "dt2js.log"
    configure_logging(LoggingConfig(level="WARNING", format="json", file=log_file))
    try:
        log = structlog.get_logger("dt2js.test.filter")
        log.info("Hidden.")
        log.warning("Shown.")
        logging.getLogger().handlers[0].flush()

        events = [json.loads(line)["event"] for line in log_file.read_text(encoding="utf-8").splitlines()]
        assert events == ["Shown."]
    finally:
        for handler in logging.getLogger().handlers:
            handler.close()
        logging.getLogger().handlers.clear()
