"""
Booking repository - data access for bookings and rooms
No business rules here; callers decide what absence means.
"""
from abc import ABC, abstractmethod
from typing import List, Optional
from sqlalchemy.orm import Session, joinedload, selectinload
from hotel_booking.models.entities import Booking, Room


class BookingRepository(ABC):
    """Booking and room lookups used by the booking service"""

    @abstractmethod
    def find_booking_by_user(self, user_id: int) -> List[Booking]:
        """Bookings of a user, each with its room"""
        raise NotImplementedError

    @abstractmethod
    def find_booking_id(self, user_id: int) -> Optional[int]:
        """Identifier of the user's booking"""
        raise NotImplementedError

    @abstractmethod
    def find_room_by_id(self, room_id: int) -> Optional[Room]:
        """Room with its current bookings"""
        raise NotImplementedError

    @abstractmethod
    def create_booking(self, user_id: int, room_id: int) -> Booking:
        raise NotImplementedError

    @abstractmethod
    def update_booking_by_id(self, booking_id: int, room_id: int) -> Optional[Booking]:
        raise NotImplementedError


class SqlBookingRepository(BookingRepository):
    """SQLAlchemy implementation"""

    def __init__(self, db: Session):
        self.db = db

    def find_booking_by_user(self, user_id: int) -> List[Booking]:
        return self.db.query(Booking).options(
            joinedload(Booking.room)
        ).filter(
            Booking.user_id == user_id
        ).order_by(Booking.id).all()

    def find_booking_id(self, user_id: int) -> Optional[int]:
        row = self.db.query(Booking.id).filter(
            Booking.user_id == user_id
        ).order_by(Booking.id).first()
        return row.id if row else None

    def find_room_by_id(self, room_id: int) -> Optional[Room]:
        return self.db.query(Room).options(
            selectinload(Room.bookings)
        ).filter(Room.id == room_id).first()

    def create_booking(self, user_id: int, room_id: int) -> Booking:
        booking = Booking(user_id=user_id, room_id=room_id)
        self.db.add(booking)
        self.db.commit()
        self.db.refresh(booking)
        return booking

    def update_booking_by_id(self, booking_id: int, room_id: int) -> Optional[Booking]:
        booking = self.db.query(Booking).filter(Booking.id == booking_id).first()
        if not booking:
            return None
        booking.room_id = room_id
        self.db.commit()
        self.db.refresh(booking)
        return booking
