"""
Dependency providers that assemble the booking service per request.

Repositories wrap the request's AsyncSession; nothing is shared between
requests except the engine's connection pool.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import get_settings
from app.db.session import get_db
from app.repositories import (
    SqlBookingRepository,
    SqlEnrollmentRepository,
    SqlRoomRepository,
    SqlTicketRepository,
)
from app.services.booking_service import BookingService
from app.services.booking_validator import BookingValidator


def get_booking_validator(db: AsyncSession = Depends(get_db)) -> BookingValidator:
    return BookingValidator(
        rooms=SqlRoomRepository(db),
        enrollments=SqlEnrollmentRepository(db),
        tickets=SqlTicketRepository(db),
    )


def get_booking_service(
    db: AsyncSession = Depends(get_db),
    validator: BookingValidator = Depends(get_booking_validator),
) -> BookingService:
    return BookingService(
        bookings=SqlBookingRepository(db),
        rooms=validator.rooms,
        validator=validator,
        max_attempts=get_settings().BOOKING_MAX_RETRIES,
    )
