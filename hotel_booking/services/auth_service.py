"""
Authentication service - sign up and sign in
"""
import logging
from hotel_booking.repositories.user_repository import UserRepository, SessionRepository
from hotel_booking.security.auth import get_password_hash, verify_password, create_access_token

logger = logging.getLogger(__name__)


class AuthService:
    """Authentication service"""

    def __init__(self, user_repository: UserRepository, session_repository: SessionRepository):
        self.user_repository = user_repository
        self.session_repository = session_repository

    def sign_up(self, email: str, password: str):
        if self.user_repository.find_by_email(email):
            raise ValueError("Email already registered")
        user = self.user_repository.create(email, get_password_hash(password))
        logger.info(f"User {user.id} signed up")
        return user

    def sign_in(self, email: str, password: str) -> dict:
        """Verify credentials and open a session"""
        user = self.user_repository.find_by_email(email)
        if not user or not verify_password(password, user.password):
            raise ValueError("Invalid email or password")

        token = create_access_token(user.id)
        self.session_repository.create(user.id, token)
        logger.info(f"User {user.id} signed in")

        return {
            "user": {"id": user.id, "email": user.email},
            "token": token
        }
