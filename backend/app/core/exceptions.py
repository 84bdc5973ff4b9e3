"""
Domain errors raised by the booking flow.

Services raise these instead of HTTPException; the handlers registered in
app.api.errors translate them into responses.
"""

from fastapi import status


class BookingError(Exception):
    """Base class for booking errors that map to a known HTTP status."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    kind: str = "booking_error"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class NotFoundError(BookingError):
    """A prerequisite entity (enrollment, room, ticket, booking) is missing."""

    status_code = status.HTTP_404_NOT_FOUND
    kind = "not_found"

    def __init__(self, message: str = "No result for this search!"):
        super().__init__(message)


class CannotBookError(BookingError):
    """A business rule forbids the booking: capacity, payment, remote ticket or ownership."""

    status_code = status.HTTP_403_FORBIDDEN
    kind = "cannot_book"

    def __init__(self, message: str = "Cannot book this room"):
        super().__init__(message)
