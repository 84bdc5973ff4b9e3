from app.models.user import User, Session
from app.models.enrollment import Enrollment, Address
from app.models.ticket import Ticket, TicketType, TicketStatus
from app.models.hotel import Hotel, Room
from app.models.booking import Booking

__all__ = [
    "User", "Session",
    "Enrollment", "Address",
    "Ticket", "TicketType", "TicketStatus",
    "Hotel", "Room",
    "Booking",
]
