from hotel_api.models.user import User, Session
from hotel_api.models.enrollment import Enrollment
from hotel_api.models.ticket import Ticket, TicketStatus, TicketType
from hotel_api.models.hotel import Hotel, Room

__all__ = [
    "User", "Session",
    "Enrollment",
    "Ticket", "TicketStatus", "TicketType",
    "Hotel", "Room",
]
