"""
Prometheus metrics for the reconciliation engine.

Metrics are created by init_metrics(); until then every track_* helper is a
no-op, so the engine can run without a metrics registry.

Usage:
    from helicopter.metrics import start_metrics_server

    start_metrics_server(enabled=True, port=8080)
    # curl http://localhost:8080/metrics
"""

import logging
import threading

from prometheus_client import Counter, Gauge, start_http_server

logger = logging.getLogger(__name__)

ACTIONS_SUBMITTED: "Counter" = None  # type: ignore
ACTIONS_TERMINATED: "Counter" = None  # type: ignore
EVENTS_PROCESSED: "Counter" = None  # type: ignore
PENDING_ACTIONS: "Gauge" = None  # type: ignore

_metrics_initialized = False
_metrics_lock = threading.Lock()


def init_metrics() -> None:
    """
    Initialize Prometheus metrics (call once at startup).

    Thread-safe and idempotent via module-level lock.
    """
    global ACTIONS_SUBMITTED, ACTIONS_TERMINATED, EVENTS_PROCESSED, PENDING_ACTIONS
    global _metrics_initialized

    with _metrics_lock:
        if _metrics_initialized:
            return

        ACTIONS_SUBMITTED = Counter(
            "helicopter_actions_submitted_total",
            "Total number of actions submitted to a registry",
        )

        # Terminated actions (labels: kind = SUCCESS, INTERRUPTED, ERROR)
        ACTIONS_TERMINATED = Counter(
            "helicopter_actions_terminated_total",
            "Total number of actions that reached a terminal outcome",
            labelnames=["kind"],
        )

        # Real and synthetic (timer) events alike
        EVENTS_PROCESSED = Counter(
            "helicopter_events_processed_total",
            "Total number of events folded into pending actions",
        )

        PENDING_ACTIONS = Gauge(
            "helicopter_pending_actions",
            "Number of actions pending across all registries",
        )

        _metrics_initialized = True
        logger.info("Prometheus metrics initialized")


def start_metrics_server(enabled: bool, port: int) -> None:
    """
    Start Prometheus metrics HTTP server in background thread.

    Args:
        enabled: Whether to start metrics server
        port: HTTP port for /metrics endpoint
    """
    if not enabled:
        logger.info("Metrics server disabled")
        return

    init_metrics()

    try:
        start_http_server(port, addr="0.0.0.0")
        logger.info(f"Metrics server started on http://0.0.0.0:{port}/metrics")
    except OSError as e:
        logger.error(f"Failed to start metrics server: {e}")


def track_submitted() -> None:
    if ACTIONS_SUBMITTED is not None:
        ACTIONS_SUBMITTED.inc()


def track_terminated(kind: str) -> None:
    """
    Track an action reaching a terminal outcome.

    Args:
        kind: Outcome kind ("SUCCESS", "INTERRUPTED" or "ERROR")
    """
    if ACTIONS_TERMINATED is not None:
        ACTIONS_TERMINATED.labels(kind=kind).inc()


def track_event() -> None:
    if EVENTS_PROCESSED is not None:
        EVENTS_PROCESSED.inc()


def track_pending_added() -> None:
    if PENDING_ACTIONS is not None:
        PENDING_ACTIONS.inc()


def track_pending_retired(count: int) -> None:
    # Gauge sums over every registry in the process
    if PENDING_ACTIONS is not None:
        PENDING_ACTIONS.dec(count)
