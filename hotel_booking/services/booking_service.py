"""
Booking service - eligibility and room allocation
Checks always run in the same order: ticket, existing booking, room
existence, room capacity. The first failing check decides the error.
"""
import logging
from hotel_booking.errors import ForbiddenError, NotFoundError
from hotel_booking.models.entities import Booking, Room, TicketStatus
from hotel_booking.repositories.booking_repository import BookingRepository
from hotel_booking.repositories.enrollment_repository import EnrollmentRepository, TicketRepository

logger = logging.getLogger(__name__)


class BookingService:
    """Booking service"""

    def __init__(self, booking_repository: BookingRepository,
                 enrollment_repository: EnrollmentRepository,
                 ticket_repository: TicketRepository):
        self.booking_repository = booking_repository
        self.enrollment_repository = enrollment_repository
        self.ticket_repository = ticket_repository

    # ============== Checks ==============

    def _check_ticket(self, user_id: int) -> None:
        """Require an enrollment with a paid ticket that includes hotel"""
        enrollment = self.enrollment_repository.find_by_user_id(user_id)
        if not enrollment:
            logger.info(f"User {user_id} rejected: no enrollment")
            raise ForbiddenError()

        ticket = self.ticket_repository.find_by_enrollment_id(enrollment.id)
        if not ticket:
            logger.info(f"User {user_id} rejected: no ticket")
            raise ForbiddenError()

        if ticket.status != TicketStatus.PAID or ticket.ticket_type.includes_hotel is not True:
            logger.info(
                f"User {user_id} rejected: ticket {ticket.id} status={ticket.status.value} "
                f"includes_hotel={ticket.ticket_type.includes_hotel}"
            )
            raise ForbiddenError()

    def _check_room(self, room_id: int) -> Room:
        """Room must exist, then must have a free slot"""
        room = self.booking_repository.find_room_by_id(room_id)
        if not room:
            logger.info(f"Room {room_id} not found")
            raise NotFoundError()

        # a room already over capacity counts as full too
        if len(room.bookings) >= room.capacity:
            logger.info(f"Room {room_id} is full ({len(room.bookings)}/{room.capacity})")
            raise ForbiddenError()
        return room

    # ============== Operations ==============

    def get_booking_by_id(self, user_id: int) -> Booking:
        """Current booking of the user, with its room"""
        self._check_ticket(user_id)

        bookings = self.booking_repository.find_booking_by_user(user_id)
        if len(bookings) < 1:
            raise NotFoundError()
        return bookings[0]

    def booking_process(self, user_id: int, room_id: int) -> dict:
        """Book a room for a user who has none yet"""
        self._check_ticket(user_id)

        if len(self.booking_repository.find_booking_by_user(user_id)) > 0:
            logger.info(f"User {user_id} rejected: already has a booking")
            raise ForbiddenError()

        self._check_room(room_id)

        booking = self.booking_repository.create_booking(user_id, room_id)
        logger.info(f"Booking {booking.id} created: user {user_id} -> room {room_id}")

        return {"id": self.booking_repository.find_booking_id(user_id)}

    def update_booking(self, user_id: int, room_id: int) -> dict:
        """
        Move the user's booking to another room

        Capacity is checked against the destination room as it stands; the
        user's own current slot is not discounted.
        """
        self._check_ticket(user_id)

        bookings = self.booking_repository.find_booking_by_user(user_id)
        if len(bookings) < 1:
            logger.info(f"User {user_id} rejected: no booking to change")
            raise ForbiddenError()
        old_room_id = bookings[0].room_id

        self._check_room(room_id)

        booking_id = self.booking_repository.find_booking_id(user_id)
        self.booking_repository.update_booking_by_id(booking_id, room_id)
        logger.info(f"Booking {booking_id} moved: room {old_room_id} -> room {room_id}")

        return {"id": self.booking_repository.find_booking_id(user_id)}
