"""Prometheus metrics for the credit application service.

Business Metrics:
- credit_app_customers_registered_total: Customers registered
- credit_app_customers_deleted_total: Customers deleted
- credit_app_credits_created_total: Credits created
- credit_app_credit_value_total: Sum of credit values granted
- credit_app_credit_rejections_total: Credit requests rejected by reason

Technical Metrics:
- credit_app_http_requests_total: HTTP requests by endpoint/status
- credit_app_http_request_latency_seconds: HTTP request latency
"""

from prometheus_client import Counter, Histogram, REGISTRY, generate_latest
from prometheus_client.exposition import CONTENT_TYPE_LATEST


# =============================================================================
# Business Metrics
# =============================================================================

customers_registered = Counter(
    "credit_app_customers_registered_total",
    "Total number of customers registered",
)

customers_deleted = Counter(
    "credit_app_customers_deleted_total",
    "Total number of customers deleted",
)

credits_created = Counter(
    "credit_app_credits_created_total",
    "Total number of credits created",
)

credit_value_total = Counter(
    "credit_app_credit_value_total",
    "Sum of the values of all credits created",
)

credit_rejections = Counter(
    "credit_app_credit_rejections_total",
    "Total number of credit requests rejected",
    ["reason"],  # invalid_date, customer_not_found
)


# =============================================================================
# Technical Metrics
# =============================================================================

http_requests_total = Counter(
    "credit_app_http_requests_total",
    "Total HTTP requests by endpoint and status",
    ["method", "endpoint", "status"],
)

http_request_latency = Histogram(
    "credit_app_http_request_latency_seconds",
    "HTTP request latency by endpoint",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)


# =============================================================================
# Helper Functions
# =============================================================================

def record_customer_registered() -> None:
    customers_registered.inc()


def record_customer_deleted() -> None:
    customers_deleted.inc()


def record_credit_created(credit_value: float) -> None:
    """Record a created credit and its value."""
    credits_created.inc()
    credit_value_total.inc(credit_value)


def record_credit_rejection(reason: str) -> None:
    credit_rejections.labels(reason=reason).inc()


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
