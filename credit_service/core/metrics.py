"""Prometheus metrics for the Credit Service.

Business Metrics:
- credit_service_credits_created_total: Credits registered by status
- credit_service_credit_value: Distribution of credit values
- credit_service_business_errors_total: Rejected operations by error code

Technical Metrics:
- credit_service_credit_creation_latency_seconds: Credit creation latency
- credit_service_http_requests_total: HTTP requests by endpoint/status
"""

import time
from contextlib import contextmanager
from decimal import Decimal
from typing import Generator

from prometheus_client import Counter, Histogram, REGISTRY, generate_latest
from prometheus_client.exposition import CONTENT_TYPE_LATEST


# =============================================================================
# Business Metrics
# =============================================================================

credits_created_total = Counter(
    "credit_service_credits_created_total",
    "Total number of credits registered",
    ["status"],
)

credit_value_histogram = Histogram(
    "credit_service_credit_value",
    "Registered credit values",
    buckets=[1_000, 5_000, 10_000, 50_000, 100_000, 250_000, 500_000, 1_000_000],
)

business_errors_total = Counter(
    "credit_service_business_errors_total",
    "Total number of rejected operations by error code",
    ["code"],
)


# =============================================================================
# Technical Metrics
# =============================================================================

credit_creation_latency = Histogram(
    "credit_service_credit_creation_latency_seconds",
    "Credit creation latency in seconds",
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5],
)

http_requests_total = Counter(
    "credit_service_http_requests_total",
    "Total HTTP requests by endpoint and status",
    ["method", "endpoint", "status"],
)

http_request_latency = Histogram(
    "credit_service_http_request_latency_seconds",
    "HTTP request latency by endpoint",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)


# =============================================================================
# Helper Functions
# =============================================================================

def record_credit_created(status: str, credit_value: Decimal) -> None:
    """Record a registered credit."""
    credits_created_total.labels(status=status).inc()
    credit_value_histogram.observe(float(credit_value))


def record_business_error(code: str) -> None:
    """Record a rejected operation."""
    business_errors_total.labels(code=code).inc()


@contextmanager
def track_credit_creation_latency() -> Generator[None, None, None]:
    """Context manager to track credit creation latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        credit_creation_latency.observe(time.perf_counter() - start)


def record_http_request(method: str, endpoint: str, status: int, duration: float) -> None:
    """Record an HTTP request."""
    http_requests_total.labels(method=method, endpoint=endpoint, status=str(status)).inc()
    http_request_latency.labels(method=method, endpoint=endpoint).observe(duration)


def get_metrics() -> bytes:
    """Get current metrics in Prometheus format."""
    return generate_latest(REGISTRY)


def get_metrics_content_type() -> str:
    """Get the content type for metrics response."""
    return CONTENT_TYPE_LATEST
