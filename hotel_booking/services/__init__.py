# Business services
from hotel_booking.services.booking_service import BookingService
from hotel_booking.services.auth_service import AuthService

__all__ = ['BookingService', 'AuthService']
