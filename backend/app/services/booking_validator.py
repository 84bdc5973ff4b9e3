"""
Eligibility check run before any booking write.
"""

from typing import Optional

from app.core.exceptions import CannotBookError, NotFoundError
from app.core.logging import get_logger
from app.models.hotel import Room
from app.models.ticket import TicketStatus
from app.repositories.interfaces import EnrollmentRepository, RoomRepository, TicketRepository

logger = get_logger(__name__)


class BookingValidator:
    """
    Decides whether a user may take a place in a room.

    Reads only; never writes. Raises NotFoundError when the enrollment, the
    room or the ticket is missing and CannotBookError when the room is full,
    the ticket is unpaid or the ticket is for remote attendance.
    """

    def __init__(
        self,
        rooms: RoomRepository,
        enrollments: EnrollmentRepository,
        tickets: TicketRepository,
    ):
        self.rooms = rooms
        self.enrollments = enrollments
        self.tickets = tickets

    async def validate(self, user_id: int, room_id: Optional[int]) -> Room:
        """Return the validated room, with its bookings loaded."""
        enrollment = await self.enrollments.find_with_address_by_user_id(user_id)
        room = await self.rooms.find_by_id(room_id) if room_id else None
        ticket = await self.tickets.find_by_enrollment_id(enrollment.id) if enrollment else None

        missing = None
        if not enrollment:
            missing = "enrollment_missing"
        elif not room:
            missing = "room_missing"
        elif not ticket:
            missing = "ticket_missing"

        if missing:
            logger.info(
                "booking_prerequisite_missing",
                user_id=user_id,
                room_id=room_id,
                reason=missing,
            )
            raise NotFoundError()

        reason = None
        if room.is_full:
            reason = "room_full"
        elif ticket.status != TicketStatus.PAID:
            reason = "ticket_not_paid"
        elif ticket.ticket_type.is_remote:
            reason = "ticket_remote"

        if reason:
            logger.warning(
                "booking_rejected",
                user_id=user_id,
                room_id=room.id,
                reason=reason,
                occupancy=len(room.bookings),
                capacity=room.capacity,
            )
            raise CannotBookError()

        return room
