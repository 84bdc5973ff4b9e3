"""
Metrics instrumentation for observability.
Exposes Prometheus-compatible metrics at /metrics endpoint.
"""

import time
from contextlib import contextmanager
from typing import Iterator

from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST
from fastapi import Response

from app.core.exceptions import BookingError

# Booking metrics
booking_attempts = Counter(
    'booking_attempts_total',
    'Total booking operations by outcome',
    ['operation', 'status']  # get/create/update; success, not_found, cannot_book, error
)

booking_latency = Histogram(
    'booking_latency_seconds',
    'Booking operation latency',
    ['operation'],
    buckets=[0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0]
)

# Database metrics
room_claim_conflicts = Counter(
    'room_claim_conflicts_total',
    'Room claims lost to a concurrent booking (version conflicts)'
)


def metrics_endpoint() -> Response:
    """Prometheus metrics endpoint."""
    return Response(
        content=generate_latest(),
        media_type=CONTENT_TYPE_LATEST
    )


def record_booking_attempt(operation: str, status: str):
    booking_attempts.labels(operation=operation, status=status).inc()


def record_room_conflict():
    room_claim_conflicts.inc()


@contextmanager
def track_booking(operation: str) -> Iterator[None]:
    """Time a booking operation and count its outcome."""
    start = time.perf_counter()
    try:
        yield
    except BookingError as exc:
        record_booking_attempt(operation, exc.kind)
        raise
    except Exception:
        record_booking_attempt(operation, "error")
        raise
    else:
        record_booking_attempt(operation, "success")
    finally:
        booking_latency.labels(operation=operation).observe(time.perf_counter() - start)
