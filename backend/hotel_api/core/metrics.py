"""
Metrics instrumentation for observability.
Exposes Prometheus-compatible metrics at /metrics endpoint.
"""

from prometheus_client import Counter, generate_latest, CONTENT_TYPE_LATEST
from fastapi import Response

# Eligibility gate decisions
hotel_access_checks = Counter(
    'hotel_access_checks_total',
    'Hotel eligibility checks',
    ['result']  # granted, not_found, payment_required
)

# Hotel read operations
hotel_queries = Counter(
    'hotel_queries_total',
    'Hotel list/detail queries',
    ['operation', 'result']  # list/detail, found/not_found
)

# Database metrics
db_operations = Counter(
    'db_operations_total',
    'Total database operations',
    ['operation']
)


def metrics_endpoint() -> Response:
    """Prometheus metrics endpoint."""
    return Response(
        content=generate_latest(),
        media_type=CONTENT_TYPE_LATEST
    )


def record_access_check(result: str):
    """Result: granted, not_found, payment_required"""
    hotel_access_checks.labels(result=result).inc()


def record_hotel_query(operation: str, found: bool):
    result = "found" if found else "not_found"
    hotel_queries.labels(operation=operation, result=result).inc()


def record_db_operation(operation: str):
    db_operations.labels(operation=operation).inc()
