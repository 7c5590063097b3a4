"""
Enrollment and ticket lookups consulted for booking eligibility
"""
from abc import ABC, abstractmethod
from typing import Optional
from sqlalchemy.orm import Session, joinedload
from hotel_booking.models.entities import Enrollment, Ticket


class EnrollmentRepository(ABC):

    @abstractmethod
    def find_by_user_id(self, user_id: int) -> Optional[Enrollment]:
        raise NotImplementedError


class TicketRepository(ABC):

    @abstractmethod
    def find_by_enrollment_id(self, enrollment_id: int) -> Optional[Ticket]:
        """Ticket of an enrollment with its ticket type"""
        raise NotImplementedError


class SqlEnrollmentRepository(EnrollmentRepository):

    def __init__(self, db: Session):
        self.db = db

    def find_by_user_id(self, user_id: int) -> Optional[Enrollment]:
        return self.db.query(Enrollment).filter(Enrollment.user_id == user_id).first()


class SqlTicketRepository(TicketRepository):

    def __init__(self, db: Session):
        self.db = db

    def find_by_enrollment_id(self, enrollment_id: int) -> Optional[Ticket]:
        return self.db.query(Ticket).options(
            joinedload(Ticket.ticket_type)
        ).filter(Ticket.enrollment_id == enrollment_id).first()
