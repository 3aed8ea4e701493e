"""Tests for logging setup."""

import json
import logging
import logging.handlers

import pytest

from contact_relay.config import LoggingConfig
from contact_relay.logging import StructuredFormatter, setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for handler in root.handlers:
        handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_structured_formatter_includes_extra_fields():
    record = logging.LogRecord(
        "contact_relay.dispatcher", logging.ERROR, __file__, 10, "Provider %s failed", ("resend",), None
    )
    record.provider = "resend"

    data = json.loads(StructuredFormatter().format(record))

    assert data["message"] == "Provider resend failed"
    assert data["level"] == "ERROR"
    assert data["provider"] == "resend"
    assert "msg" not in data


def test_setup_logging_with_file(restore_root_logger, tmp_path):
    log_file = tmp_path / "logs" / "relay.log"

    setup_logging(LoggingConfig(level="debug", file_path=str(log_file), console_output=False))

    root = restore_root_logger
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0], logging.handlers.RotatingFileHandler)
    assert log_file.parent.is_dir()
    assert logging.getLogger("urllib3").level == logging.WARNING


def test_setup_logging_console_only(restore_root_logger):
    setup_logging(LoggingConfig(console_output=True, file_path=None))

    root = restore_root_logger
    assert root.level == logging.INFO
    assert [type(h) for h in root.handlers] == [logging.StreamHandler]
