# Copyright (c) 2025 Henru Wang
# All rights reserved.

"""Tests for logging setup."""

import json
import logging
import sys
import tempfile
from pathlib import Path

import pytest

from fixture_data.export import export_fixtures
from fixture_data.logging_setup import (
    ConsoleFormatter,
    StructuredFormatter,
    fixture_fields,
    setup_logging,
)
from fixture_data.user_data import UserData


pytestmark = pytest.mark.usefixtures("restore_root_logger")


def test_setup_logging_creates_directory():
    """Test that setup_logging creates the log directory."""
    with tempfile.TemporaryDirectory() as tmpdir:
        log_dir = Path(tmpdir) / ".fixture_data_logs"
        assert not log_dir.exists()

        setup_logging(log_dir=log_dir, console_output=False)

        assert log_dir.is_dir()
        assert len(list(log_dir.glob("fixture_data_*.log"))) == 1


def test_logging_produces_json(tmp_path):
    """Test that logs are written in JSON format."""
    setup_logging(log_dir=tmp_path, log_level=logging.INFO, console_output=False)

    logging.getLogger("test_logger").info("Test message")

    log_file = next(tmp_path.glob("*.log"))
    log_lines = [line for line in log_file.read_text().splitlines() if line]

    # Startup message + test message
    assert len(log_lines) >= 2
    for line in log_lines:
        log_entry = json.loads(line)
        assert {"timestamp", "level", "logger", "message"} <= set(log_entry)

    assert json.loads(log_lines[-1])["message"] == "Test message"


def test_logging_levels(tmp_path):
    """Test that records below the configured level are dropped."""
    setup_logging(log_dir=tmp_path, log_level=logging.WARNING, console_output=False)

    logger = logging.getLogger("test_logger")
    logger.info("Info message")
    logger.warning("Warning message")

    log_file = next(tmp_path.glob("*.log"))
    messages = [json.loads(line)["message"] for line in log_file.read_text().splitlines()]

    assert "Info message" not in messages
    assert "Warning message" in messages


def test_console_output_handler(tmp_path):
    setup_logging(log_dir=tmp_path, console_output=True)

    stream_handlers = [
        h for h in logging.getLogger().handlers if type(h) is logging.StreamHandler
    ]
    assert len(stream_handlers) == 1
    assert stream_handlers[0].stream is sys.stderr


def test_structured_formatter_exception_and_extra_fields():
    formatter = StructuredFormatter()
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        record = logging.LogRecord(
            "fixture_data", logging.ERROR, __file__, 1, "failed", None, sys.exc_info()
        )
    record.extra_fields = {"fixture": "users"}

    log_entry = json.loads(formatter.format(record))

    assert log_entry["level"] == "ERROR"
    assert log_entry["message"] == "failed"
    assert "RuntimeError: boom" in log_entry["exception"]
    assert log_entry["fixture"] == "users"


def test_setup_logging_returns_log_file(tmp_path):
    log_file = setup_logging(log_dir=tmp_path, console_output=False)

    assert log_file.parent == tmp_path
    startup = json.loads(log_file.read_text().splitlines()[0])
    assert startup["log_file"] == str(log_file)


def test_fixture_fields():
    assert fixture_fields(fixture="users", records=4) == {
        "extra_fields": {"fixture": "users", "records": 4}
    }


def test_console_formatter_appends_fields():
    record = logging.LogRecord("fixture_data", logging.INFO, __file__, 1, "exported", None, None)
    record.extra_fields = {"fixture": "users", "records": 4}

    text = ConsoleFormatter().format(record)

    assert text.endswith("exported fixture=users records=4")


def test_console_formatter_without_fields():
    record = logging.LogRecord("fixture_data", logging.INFO, __file__, 1, "plain", None, None)
    assert ConsoleFormatter().format(record).endswith("INFO - plain")


def test_export_and_registration_fields_reach_log_file(tmp_path, registry):
    log_file = setup_logging(log_dir=tmp_path, log_level=logging.DEBUG, console_output=False)

    registry.clear()
    registry.register(UserData())
    export_fixtures(registry, include_passwords=False)

    entries = [json.loads(line) for line in log_file.read_text().splitlines()]
    registered = [e for e in entries if e["message"] == "Registered fixture 'users'"]
    exported = [e for e in entries if e["message"] == "Exported fixture 'users'"]

    assert registered[0]["provider"] == "UserData"
    assert exported[0]["fixture"] == "users"
    assert exported[0]["records"] == 4
    assert exported[0]["passwords_masked"] is True
