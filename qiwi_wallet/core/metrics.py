"""Prometheus metrics for the QIWI wallet client.

Technical Metrics:
- qiwi_api_request_latency_seconds: Wallet API round-trip latency
- qiwi_api_requests_total: Wallet API requests by method and outcome
- qiwi_api_remote_errors_total: Business errors reported by the wallet
- qiwi_history_pages_total: Payment history pages fetched
"""

import time
from contextlib import contextmanager
from typing import Generator

from prometheus_client import Counter, Histogram, REGISTRY, generate_latest
from prometheus_client.exposition import CONTENT_TYPE_LATEST

from qiwi_wallet.core.config import settings


api_request_latency = Histogram(
    "qiwi_api_request_latency_seconds",
    "Wallet API request latency in seconds",
    ["method"],
    buckets=[0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0],
)

api_requests_total = Counter(
    "qiwi_api_requests_total",
    "Total wallet API requests",
    ["method", "outcome"],  # success, http_error, connection_error, invalid_text
)

api_remote_errors_total = Counter(
    "qiwi_api_remote_errors_total",
    "Errors reported by the wallet in the response envelope",
    ["error_code"],
)

history_pages_total = Counter(
    "qiwi_history_pages_total",
    "Payment history pages fetched",
)


@contextmanager
def track_api_latency(method: str) -> Generator[None, None, None]:
    """Context manager to observe wallet API latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        if settings.metrics_enabled:
            api_request_latency.labels(method=method).observe(
                time.perf_counter() - start
            )


def record_api_request(method: str, outcome: str) -> None:
    """Record a finished wallet API request."""
    if settings.metrics_enabled:
        api_requests_total.labels(method=method, outcome=outcome).inc()


def record_remote_error(error_code: str) -> None:
    """Record an error code returned inside a response envelope."""
    if settings.metrics_enabled:
        api_remote_errors_total.labels(error_code=error_code).inc()


def record_history_page() -> None:
    """Record one fetched payment history page."""
    if settings.metrics_enabled:
        history_pages_total.inc()


def get_metrics() -> bytes:
    """Generate Prometheus metrics output."""
    return generate_latest(REGISTRY)


def get_metrics_content_type() -> str:
    """Get the content type for Prometheus metrics."""
    return CONTENT_TYPE_LATEST
