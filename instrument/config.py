"""
Runtime configuration read from environment variables.

Environment Variables:
    INSTRUMENT_LOG_LEVEL: DEBUG, INFO, WARNING, ERROR, CRITICAL - default: INFO
    INSTRUMENT_LOG_FORMAT: json or text - default: json
    INSTRUMENT_METRICS_ENABLED: true/false - default: false
    INSTRUMENT_METRICS_PORT: HTTP port for /metrics - default: 8080
"""

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class InstrumentConfig:
    log_level: str = "INFO"
    log_format: str = "json"
    metrics_enabled: bool = False
    metrics_port: int = 8080

    @staticmethod
    def from_env() -> "InstrumentConfig":
        port = os.getenv("INSTRUMENT_METRICS_PORT", "8080")
        try:
            metrics_port = int(port)
        except ValueError:
            metrics_port = 8080
        return InstrumentConfig(
            log_level=os.getenv("INSTRUMENT_LOG_LEVEL", "INFO").upper(),
            log_format=os.getenv("INSTRUMENT_LOG_FORMAT", "json").lower(),
            metrics_enabled=os.getenv("INSTRUMENT_METRICS_ENABLED", "false").lower() == "true",
            metrics_port=metrics_port,
        )
