# Repositories
from hotel_booking.repositories.booking_repository import BookingRepository, SqlBookingRepository
from hotel_booking.repositories.enrollment_repository import (
    EnrollmentRepository, TicketRepository, SqlEnrollmentRepository, SqlTicketRepository
)
from hotel_booking.repositories.user_repository import (
    UserRepository, SessionRepository, SqlUserRepository, SqlSessionRepository
)

__all__ = [
    'BookingRepository', 'SqlBookingRepository',
    'EnrollmentRepository', 'TicketRepository', 'SqlEnrollmentRepository', 'SqlTicketRepository',
    'UserRepository', 'SessionRepository', 'SqlUserRepository', 'SqlSessionRepository'
]
