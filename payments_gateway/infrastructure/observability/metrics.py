"""Prometheus metrics for query volume, record store health and HTTP latency"""

from typing import Optional
from prometheus_client import Counter, Histogram

# Query metrics
payment_query_counter = Counter(
    "payments_query_total",
    "Total payment queries served",
    ["filter_type"],  # ALL | CARD | BANK | CASH | GIFT
)

payment_query_result_size = Histogram(
    "payments_query_result_size",
    "Number of payments returned per query",
    buckets=[0, 1, 5, 10, 25, 50, 100, 250, 1000],
)

# Record store metrics
store_fetch_failures_counter = Counter(
    "payments_store_fetch_failures_total",
    "Failed record store calls",
)

upstream_latency_histogram = Histogram(
    "payments_api_latency_seconds",
    "Payments API response time",
    buckets=[0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)

upstream_retry_counter = Counter(
    "payments_api_retries_total",
    "Retried payments API calls",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_query(filter_type: Optional[str], result_count: int) -> None:
    """Record query volume by filter and result size distribution"""
    payment_query_counter.labels(filter_type=filter_type or "ALL").inc()
    payment_query_result_size.observe(result_count)
