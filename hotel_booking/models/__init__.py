# Entity models
from hotel_booking.models.entities import (
    User, Session, Enrollment, TicketType, Ticket, TicketStatus,
    Hotel, Room, Booking
)

__all__ = [
    'User', 'Session', 'Enrollment', 'TicketType', 'Ticket', 'TicketStatus',
    'Hotel', 'Room', 'Booking'
]
