"""Tests for structured logging functionality."""

from __future__ import annotations

import json
import logging
import sys

import pytest

from habitpilot.config import BaseConfig
from habitpilot.logging_config import JSONFormatter, get_logger, session_log_path, setup_logging


@pytest.fixture(autouse=True)
def _reset_habitpilot_logger():
    yield
    logger = logging.getLogger("habitpilot")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


def _record(**kwargs) -> logging.LogRecord:
    record = logging.LogRecord(
        name="test.logger",
        level=kwargs.pop("level", logging.INFO),
        pathname="test.py",
        lineno=42,
        msg=kwargs.pop("msg", "Test message"),
        args=(),
        exc_info=kwargs.pop("exc_info", None),
    )
    record.module = "test_module"
    record.funcName = "test_function"
    for key, value in kwargs.items():
        setattr(record, key, value)
    return record


def test_json_formatter():
    """JSONFormatter emits the standard fields."""
    log_data = json.loads(JSONFormatter().format(_record()))

    assert log_data["level"] == "INFO"
    assert log_data["logger"] == "test.logger"
    assert log_data["message"] == "Test message"
    assert log_data["module"] == "test_module"
    assert log_data["function"] == "test_function"
    assert log_data["line"] == 42
    assert "timestamp" in log_data
    assert "extra" not in log_data


def test_json_formatter_with_exception():
    try:
        raise ValueError("Test error")
    except ValueError:
        exc_info = sys.exc_info()

    log_data = json.loads(JSONFormatter().format(_record(level=logging.ERROR, exc_info=exc_info)))

    assert log_data["exception"]["type"] == "ValueError"
    assert "Test error" in log_data["exception"]["message"]
    assert log_data["exception"]["traceback"] is not None


def test_json_formatter_includes_extra_fields():
    log_data = json.loads(JSONFormatter().format(_record(habit_id="h1", count=3)))

    assert log_data["extra"] == {"habit_id": "h1", "count": 3}


def test_setup_logging(tmp_path):
    """Logging setup creates the JSON log file inside DATA_DIR."""
    config = BaseConfig()
    config.DATA_DIR = tmp_path
    config.DEV_MODE = True

    logger = setup_logging(config)

    assert logger.name == "habitpilot"
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 3  # console + rotating file + session buffer

    log_file = tmp_path / "logs" / "habitpilot.log"
    assert log_file.exists()

    get_logger("services.habits").warning("Habit store warning", extra={"habit_id": "h1"})
    for handler in logger.handlers:
        handler.flush()

    lines = [json.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines() if line.strip()]
    assert lines[0]["message"] == "Logging initialized"
    assert lines[-1]["message"] == "Habit store warning"
    assert lines[-1]["extra"]["habit_id"] == "h1"
    assert session_log_path().parent == tmp_path / "logs"


def test_setup_logging_twice_does_not_duplicate_handlers(tmp_path):
    config = BaseConfig()
    config.DATA_DIR = tmp_path

    setup_logging(config)
    logger = setup_logging(config)

    assert len(logger.handlers) == 3


def test_get_logger():
    assert get_logger("module1").name == "habitpilot.module1"
    assert get_logger("habitpilot.services.habits").name == "habitpilot.services.habits"
    assert get_logger("module1") is not get_logger("module2")


@pytest.mark.parametrize("dev_mode", [True, False])
def test_logging_levels_by_mode(tmp_path, dev_mode):
    config = BaseConfig()
    config.DATA_DIR = tmp_path
    config.DEV_MODE = dev_mode

    logger = setup_logging(config)

    console = next(
        h for h in logger.handlers
        if type(h) is logging.StreamHandler
    )
    assert console.level == (logging.INFO if dev_mode else logging.WARNING)
