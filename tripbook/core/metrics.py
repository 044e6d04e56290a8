"""
Metrics instrumentation for observability.
Exposes Prometheus-compatible metrics at /metrics endpoint.
"""

from fastapi import Response
from prometheus_client import CONTENT_TYPE_LATEST, Counter, generate_latest

# Booking metrics
bookings_created = Counter(
    'bookings_created_total',
    'Bookings created',
    ['status']  # initial status: pending, confirmed
)

booking_status_updates = Counter(
    'booking_status_updates_total',
    'Booking status changes',
    ['status']  # new status
)

# Auth metrics
auth_attempts = Counter(
    'auth_attempts_total',
    'Login and registration attempts',
    ['action', 'result']  # login/register, success/failure
)

# Store metrics
store_operations = Counter(
    'store_operations_total',
    'Data access operations',
    ['entity', 'operation']  # users/bookings/posts/packages, get/list/create/update/delete
)


def metrics_endpoint() -> Response:
    """Prometheus metrics endpoint."""
    return Response(
        content=generate_latest(),
        media_type=CONTENT_TYPE_LATEST
    )


def record_booking_created(status: str):
    bookings_created.labels(status=status).inc()


def record_status_update(status: str):
    booking_status_updates.labels(status=status).inc()


def record_auth_attempt(action: str, success: bool):
    """Record auth attempt. Action: login, register"""
    result = "success" if success else "failure"
    auth_attempts.labels(action=action, result=result).inc()


def record_store_operation(entity: str, operation: str):
    store_operations.labels(entity=entity, operation=operation).inc()
