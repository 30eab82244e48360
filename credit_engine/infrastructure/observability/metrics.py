"""Prometheus metrics for monitoring credit checks and HTTP latency"""

from prometheus_client import Counter, Histogram

# Credit check metrics
credit_check_counter = Counter(
    "credit_check_total",
    "Total credit limit checks",
    ["outcome"],  # ok | rejected | error
)

installments_histogram = Histogram(
    "credit_installments",
    "Installments offered per credit check",
    buckets=[1, 2, 3, 4, 6, 8, 10, 12],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_credit_check(installments: int) -> None:
    """Record a successful credit check and its installment count"""
    credit_check_counter.labels(outcome="ok").inc()
    installments_histogram.observe(installments)


def record_rejected_check() -> None:
    """Record a credit check rejected for invalid input"""
    credit_check_counter.labels(outcome="rejected").inc()


def record_failed_check() -> None:
    """Record a credit check that failed with a server error"""
    credit_check_counter.labels(outcome="error").inc()
