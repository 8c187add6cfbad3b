"""
Prometheus metrics for the lifted-state engine.

Environment Variables:
    INSTRUMENT_METRICS_ENABLED: Enable metrics server (true/false) - default: false
    INSTRUMENT_METRICS_PORT: HTTP port for /metrics endpoint - default: 8080

Usage:
    from instrument.metrics import init_metrics, start_metrics_server

    init_metrics()
    start_metrics_server(enabled=True, port=8080)

Recording helpers are no-ops until init_metrics() has run, so the engine can
call them unconditionally.
"""

import logging
import threading
from typing import Optional

from prometheus_client import Counter, Histogram, start_http_server

logger = logging.getLogger(__name__)

REDUCER_CALLS_TOTAL: Optional[Counter] = None
REDUCER_ERRORS_TOTAL: Optional[Counter] = None
RECOMPUTE_TOTAL: Optional[Counter] = None
RECOMPUTE_POSITIONS: Optional[Histogram] = None

_metrics_initialized = False
_metrics_lock = threading.Lock()


def init_metrics() -> None:
    """
    Initialize Prometheus metrics (call once at startup).

    Thread-safe via module-level lock; repeated calls are ignored.
    """
    global REDUCER_CALLS_TOTAL, REDUCER_ERRORS_TOTAL, RECOMPUTE_TOTAL, RECOMPUTE_POSITIONS
    global _metrics_initialized

    with _metrics_lock:
        if _metrics_initialized:
            return

        REDUCER_CALLS_TOTAL = Counter(
            "instrument_reducer_calls_total",
            "Reducer invocations made by the lifted-state engine",
            labelnames=["replaying"],
        )
        REDUCER_ERRORS_TOTAL = Counter(
            "instrument_reducer_errors_total",
            "Reducer invocations that raised and were recorded as error states",
        )
        RECOMPUTE_TOTAL = Counter(
            "instrument_recompute_total",
            "Recompute sweeps triggered, by lifted action type",
            labelnames=["operation"],
        )
        RECOMPUTE_POSITIONS = Histogram(
            "instrument_recompute_positions",
            "Number of cache positions rebuilt per recompute sweep",
            buckets=(1, 2, 5, 10, 25, 50, 100, 250, 1000),
        )

        _metrics_initialized = True
        logger.info("Prometheus metrics initialized")


def metrics_enabled() -> bool:
    return _metrics_initialized


def record_reducer_call(replaying: bool) -> None:
    if REDUCER_CALLS_TOTAL is not None:
        REDUCER_CALLS_TOTAL.labels(replaying=str(replaying).lower()).inc()


def record_reducer_error() -> None:
    if REDUCER_ERRORS_TOTAL is not None:
        REDUCER_ERRORS_TOTAL.inc()


def record_recompute(operation: str, positions: int) -> None:
    if RECOMPUTE_TOTAL is not None:
        RECOMPUTE_TOTAL.labels(operation=operation).inc()
    if RECOMPUTE_POSITIONS is not None:
        RECOMPUTE_POSITIONS.observe(positions)


def start_metrics_server(enabled: bool = False, port: int = 8080) -> None:
    """
    Start Prometheus HTTP server on the given port.

    Args:
        enabled: Whether to start the server
        port: HTTP port for /metrics
    """
    if not enabled:
        logger.info("Metrics server disabled")
        return

    init_metrics()
    try:
        start_http_server(port)
        logger.info(f"Metrics server started on port {port}")
    except OSError as e:
        logger.error(f"Failed to start metrics server on port {port}: {e}")
        raise
