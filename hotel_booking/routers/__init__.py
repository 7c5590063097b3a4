# API routers
from hotel_booking.routers import auth, booking

__all__ = ['auth', 'booking']
