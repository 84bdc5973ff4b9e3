"""
Data-access interfaces for the booking flow.

Services receive implementations through their constructors, so the same
business logic runs against SQLAlchemy in the API and against in-memory
fakes in unit tests.
"""

from abc import ABC, abstractmethod
from typing import Optional

from app.models.booking import Booking
from app.models.enrollment import Enrollment
from app.models.hotel import Room
from app.models.ticket import Ticket


class BookingRepository(ABC):

    @abstractmethod
    async def find_by_id(self, booking_id: int) -> Optional[Booking]:
        pass

    @abstractmethod
    async def find_by_user_id(self, user_id: int) -> Optional[Booking]:
        """Return the user's booking with its room loaded, or None."""
        pass

    @abstractmethod
    async def create(self, user_id: int, room_id: int) -> Booking:
        pass

    @abstractmethod
    async def update_room(self, booking: Booking, room_id: int) -> Booking:
        pass

    @abstractmethod
    async def commit(self) -> None:
        """Make the pending booking write durable."""
        pass


class RoomRepository(ABC):

    @abstractmethod
    async def find_by_id(self, room_id: int) -> Optional[Room]:
        """Return the room with its current bookings loaded, or None."""
        pass

    @abstractmethod
    async def claim(self, room: Room) -> bool:
        """
        Bump the room version if it still matches the one read with `room`.

        Returns:
            True if this caller won the room (proceed to write)
            False if another booking changed it since it was read
        """
        pass


class EnrollmentRepository(ABC):

    @abstractmethod
    async def find_with_address_by_user_id(self, user_id: int) -> Optional[Enrollment]:
        pass


class TicketRepository(ABC):

    @abstractmethod
    async def find_by_enrollment_id(self, enrollment_id: int) -> Optional[Ticket]:
        """Return the enrollment's ticket with its ticket type loaded, or None."""
        pass
