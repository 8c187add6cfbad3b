"""
Tests for configuration and structured logging setup.
"""

import json
import logging

import pytest

from instrument.config import InstrumentConfig
from instrument.logging_config import StoreIDFilter, get_logger, setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


def test_config_defaults(monkeypatch):
    for key in ("INSTRUMENT_LOG_LEVEL", "INSTRUMENT_LOG_FORMAT", "INSTRUMENT_METRICS_ENABLED", "INSTRUMENT_METRICS_PORT"):
        monkeypatch.delenv(key, raising=False)

    config = InstrumentConfig.from_env()

    assert config == InstrumentConfig(log_level="INFO", log_format="json", metrics_enabled=False, metrics_port=8080)


def test_config_from_env(monkeypatch):
    monkeypatch.setenv("INSTRUMENT_LOG_LEVEL", "debug")
    monkeypatch.setenv("INSTRUMENT_LOG_FORMAT", "TEXT")
    monkeypatch.setenv("INSTRUMENT_METRICS_ENABLED", "true")
    monkeypatch.setenv("INSTRUMENT_METRICS_PORT", "not-a-port")

    config = InstrumentConfig.from_env()

    assert config.log_level == "DEBUG"
    assert config.log_format == "text"
    assert config.metrics_enabled is True
    assert config.metrics_port == 8080


def test_json_logging_includes_store_id(restore_root_logger, capsys):
    setup_logging(InstrumentConfig(log_level="INFO", log_format="json"))

    get_logger("instrument.test", store_id="store-9").info("Toggled action")

    line = capsys.readouterr().err.strip().splitlines()[-1]
    record = json.loads(line)
    assert record["message"] == "Toggled action"
    assert record["store_id"] == "store-9"
    assert record["level"] == "INFO"


def test_text_logging_defaults_store_id(restore_root_logger, capsys):
    setup_logging(InstrumentConfig(log_level="WARNING", log_format="text"))

    logging.getLogger("instrument.test").info("hidden")
    logging.getLogger("instrument.test").warning("visible")

    err = capsys.readouterr().err
    assert "hidden" not in err
    assert "visible" in err
    assert "[store_id=N/A]" in err


def test_store_id_filter_keeps_existing_value():
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)
    record.store_id = "store-1"

    assert StoreIDFilter().filter(record)
    assert record.store_id == "store-1"
