"""
Repository layer - persistence access behind small interfaces.
Keeps business logic clean from SQLAlchemy details.
"""

from .interfaces import BookingRepository, RoomRepository, EnrollmentRepository, TicketRepository
from .booking_repository import SqlBookingRepository
from .room_repository import SqlRoomRepository
from .enrollment_repository import SqlEnrollmentRepository
from .ticket_repository import SqlTicketRepository

__all__ = [
    'BookingRepository', 'RoomRepository', 'EnrollmentRepository', 'TicketRepository',
    'SqlBookingRepository', 'SqlRoomRepository', 'SqlEnrollmentRepository', 'SqlTicketRepository',
]
