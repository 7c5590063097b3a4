"""
Authentication routes
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from hotel_booking.database import get_db
from hotel_booking.models.schemas import SignUpRequest, SignInRequest, SignInResponse, UserResponse
from hotel_booking.repositories import SqlUserRepository, SqlSessionRepository
from hotel_booking.services.auth_service import AuthService

router = APIRouter(prefix="/auth", tags=["auth"])


def get_auth_service(db: Session = Depends(get_db)) -> AuthService:
    return AuthService(SqlUserRepository(db), SqlSessionRepository(db))


@router.post("/sign-up", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def sign_up(data: SignUpRequest, service: AuthService = Depends(get_auth_service)):
    """Register a user"""
    try:
        return service.sign_up(data.email, data.password)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))


@router.post("/sign-in", response_model=SignInResponse)
def sign_in(data: SignInRequest, service: AuthService = Depends(get_auth_service)):
    """Log in and receive a bearer token"""
    try:
        return service.sign_in(data.email, data.password)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))
