"""
Authentication
Bearer JWT that must also be backed by a stored session.
"""
import bcrypt
import logging
from datetime import datetime, timedelta, UTC
from typing import Optional
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError, jwt
from sqlalchemy.orm import Session
from hotel_booking.config import settings
from hotel_booking.database import get_db
from hotel_booking.repositories.user_repository import SqlSessionRepository

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


def get_password_hash(password: str) -> str:
    """Hash a password"""
    salt = bcrypt.gensalt()
    return bcrypt.hashpw(password.encode('utf-8'), salt).decode('utf-8')


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return bcrypt.checkpw(plain_password.encode('utf-8'), hashed_password.encode('utf-8'))


def create_access_token(user_id: int) -> str:
    """Issue a JWT for a user"""
    expire = datetime.now(UTC) + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode = {
        "userId": user_id,
        "exp": expire
    }
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def _unauthorized() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Unauthorized",
        headers={"WWW-Authenticate": "Bearer"}
    )


def decode_token(token: str) -> dict:
    """Decode a JWT, 401 when it is invalid"""
    try:
        return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError:
        raise _unauthorized()


def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: Session = Depends(get_db)
) -> int:
    """Authenticated user id of the request"""
    if credentials is None:
        raise _unauthorized()

    token = credentials.credentials
    payload = decode_token(token)

    user_id = payload.get("userId")
    if not isinstance(user_id, int):
        raise _unauthorized()

    session = SqlSessionRepository(db).find_by_token(token)
    if not session or session.user_id != user_id:
        logger.info(f"No session for token of user {user_id}")
        raise _unauthorized()

    return user_id
