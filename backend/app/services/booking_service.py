"""
Booking service: read, create and move a user's hotel room booking.

Every write is preceded by BookingValidator and guarded by the optimistic
room claim (see app.repositories.room_repository). A lost claim means another
booking landed on the room after validation, so the flow re-validates with
fresh data and tries again, up to `max_attempts` times.

Writes are committed before the booking is returned: a failed commit must
reach the client as an error, never as a 200.
"""

from typing import Optional

from app.core.exceptions import CannotBookError, NotFoundError
from app.core.logging import get_logger
from app.core.metrics import record_room_conflict, track_booking
from app.models.booking import Booking
from app.repositories.interfaces import BookingRepository, RoomRepository
from app.services.booking_validator import BookingValidator

logger = get_logger(__name__)

MAX_RETRY_ATTEMPTS = 3


class BookingService:

    def __init__(
        self,
        bookings: BookingRepository,
        rooms: RoomRepository,
        validator: BookingValidator,
        max_attempts: int = MAX_RETRY_ATTEMPTS,
    ):
        self.bookings = bookings
        self.rooms = rooms
        self.validator = validator
        self.max_attempts = max_attempts

    async def get_booking(self, user_id: int) -> Booking:
        with track_booking("get"):
            booking = await self.bookings.find_by_user_id(user_id)
            if not booking:
                raise NotFoundError()
            return booking

    async def create_booking(self, user_id: int, room_id: Optional[int]) -> Booking:
        """
        Book a room for the user.

        Not idempotent: calling it twice leaves the user with two bookings.
        """
        with track_booking("create"):
            for attempt in range(1, self.max_attempts + 1):
                room = await self.validator.validate(user_id, room_id)

                if not await self.rooms.claim(room):
                    self._conflict(room.id, attempt)
                    continue

                booking = await self.bookings.create(user_id, room.id)
                await self.bookings.commit()
                logger.info(
                    "booking_created",
                    booking_id=booking.id,
                    user_id=user_id,
                    room_id=room.id,
                    attempt=attempt,
                )
                return booking

            raise CannotBookError("Room is in high demand. Please try again.")

    async def update_booking(
        self,
        user_id: int,
        room_id: Optional[int],
        booking_id: Optional[int],
    ) -> Booking:
        """Move the user's booking `booking_id` to room `room_id`."""
        with track_booking("update"):
            for attempt in range(1, self.max_attempts + 1):
                room = await self.validator.validate(user_id, room_id)

                if not booking_id or not room_id:
                    raise NotFoundError()

                booking = await self.bookings.find_by_id(booking_id)
                if not booking or booking.user_id != user_id:
                    logger.warning(
                        "booking_rejected",
                        user_id=user_id,
                        booking_id=booking_id,
                        reason="not_owner" if booking else "booking_missing",
                    )
                    raise CannotBookError()

                if not await self.rooms.claim(room):
                    self._conflict(room.id, attempt)
                    continue

                previous_room_id = booking.room_id
                booking = await self.bookings.update_room(booking, room.id)
                await self.bookings.commit()
                logger.info(
                    "booking_updated",
                    booking_id=booking.id,
                    user_id=user_id,
                    from_room_id=previous_room_id,
                    room_id=room.id,
                    attempt=attempt,
                )
                return booking

            raise CannotBookError("Room is in high demand. Please try again.")

    def _conflict(self, room_id: int, attempt: int) -> None:
        record_room_conflict()
        logger.info(
            "booking_retry",
            room_id=room_id,
            attempt=attempt,
            reason="version_conflict",
        )
