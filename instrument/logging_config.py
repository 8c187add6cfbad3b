"""
Structured logging configuration for the instrumentation engine.

Provides JSON-formatted logs with store_id support for correlating log lines
of one instrumented store.

Environment Variables:
    INSTRUMENT_LOG_LEVEL: Log level (DEBUG, INFO, WARNING, ERROR) - default: INFO
    INSTRUMENT_LOG_FORMAT: Log format (json, text) - default: json

Usage:
    from instrument.logging_config import setup_logging, get_logger

    setup_logging()
    logger = get_logger(__name__, store_id="store-1")
    logger.info("Toggled action", extra={"action_id": 2})
"""

import logging
import sys
from typing import Optional

from pythonjsonlogger import jsonlogger

from .config import InstrumentConfig

LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def setup_logging(config: Optional[InstrumentConfig] = None) -> None:
    """
    Configure root logger with structured logging.

    Reads configuration from the environment unless config is given:
    - INSTRUMENT_LOG_LEVEL: DEBUG, INFO, WARNING, ERROR (default: INFO)
    - INSTRUMENT_LOG_FORMAT: json, text (default: json)
    """
    config = config or InstrumentConfig.from_env()
    level = LEVELS.get(config.log_level, logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.addFilter(StoreIDFilter())

    if config.log_format == "json":
        formatter: logging.Formatter = jsonlogger.JsonFormatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s %(store_id)s",
            rename_fields={
                "asctime": "timestamp",
                "name": "logger",
                "levelname": "level",
            },
        )
    else:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s [store_id=%(store_id)s]",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    handler.setFormatter(formatter)
    root_logger.addHandler(handler)


def get_logger(name: str, store_id: Optional[str] = None) -> logging.LoggerAdapter:
    """
    Get a logger with optional store_id for correlation.

    Args:
        name: Logger name (typically __name__)
        store_id: Id of the instrumented store the log lines belong to

    Returns:
        LoggerAdapter with store_id in extra fields
    """
    logger = logging.getLogger(name)
    return logging.LoggerAdapter(logger, {"store_id": store_id or "N/A"})


class StoreIDFilter(logging.Filter):
    """
    Logging filter that adds store_id to all log records.

    Ensures all logs have a store_id field, even if not set via LoggerAdapter.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "store_id"):
            record.store_id = "N/A"  # type: ignore
        return True
