"""
Booking routes
"""
import logging
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from hotel_booking.database import get_db
from hotel_booking.errors import RequestError, ErrorKind
from hotel_booking.models.schemas import (
    BookingRequest, BookingIdResponse, BookingWithRoomResponse, RoomResponse
)
from hotel_booking.repositories import (
    SqlBookingRepository, SqlEnrollmentRepository, SqlTicketRepository
)
from hotel_booking.security.auth import get_current_user_id
from hotel_booking.services.booking_service import BookingService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/booking", tags=["booking"])


def get_booking_service(db: Session = Depends(get_db)) -> BookingService:
    """Service wired to the request's database session"""
    return BookingService(
        SqlBookingRepository(db),
        SqlEnrollmentRepository(db),
        SqlTicketRepository(db)
    )


def _forbidden_or_not_found(error: RequestError) -> HTTPException:
    # only an explicit NotFound becomes 404, everything else is 403
    if error.kind == ErrorKind.NOT_FOUND:
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=error.message)
    return HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=error.message)


@router.get("", response_model=BookingWithRoomResponse)
def get_booking(
    user_id: int = Depends(get_current_user_id),
    service: BookingService = Depends(get_booking_service)
):
    """Current booking of the user"""
    try:
        booking = service.get_booking_by_id(user_id)
    except RequestError as e:
        # only an explicit Forbidden becomes 403, everything else is 404
        if e.kind == ErrorKind.FORBIDDEN:
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=e.message)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)
    except Exception as e:
        logger.exception(f"Reading booking of user {user_id} failed: {e}")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")

    room = booking.room
    return BookingWithRoomResponse(
        id=booking.id,
        room=RoomResponse(
            id=room.id,
            name=room.name,
            capacity=room.capacity,
            hotel_id=room.hotel_id,
            created_at=room.created_at,
            updated_at=room.updated_at
        )
    )


@router.post("", response_model=BookingIdResponse)
def booking_process(
    data: BookingRequest,
    user_id: int = Depends(get_current_user_id),
    service: BookingService = Depends(get_booking_service)
):
    """Book a room"""
    try:
        return service.booking_process(user_id, data.room_id)
    except RequestError as e:
        raise _forbidden_or_not_found(e)
    except Exception as e:
        logger.exception(f"Booking room {data.room_id} for user {user_id} failed: {e}")
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Forbidden")


@router.put("/{booking_id}", response_model=BookingIdResponse)
def update_booking(
    booking_id: int,
    data: BookingRequest,
    user_id: int = Depends(get_current_user_id),
    service: BookingService = Depends(get_booking_service)
):
    """Move the user's booking to another room"""
    try:
        return service.update_booking(user_id, data.room_id)
    except RequestError as e:
        raise _forbidden_or_not_found(e)
    except Exception as e:
        logger.exception(f"Moving booking of user {user_id} to room {data.room_id} failed: {e}")
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Forbidden")
