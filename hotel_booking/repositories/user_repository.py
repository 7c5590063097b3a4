"""
User and session persistence for authentication
"""
from abc import ABC, abstractmethod
from typing import Optional
from sqlalchemy.orm import Session
from hotel_booking.models.entities import User, Session as LoginSession


class UserRepository(ABC):

    @abstractmethod
    def find_by_email(self, email: str) -> Optional[User]:
        raise NotImplementedError

    @abstractmethod
    def create(self, email: str, password_hash: str) -> User:
        raise NotImplementedError


class SessionRepository(ABC):

    @abstractmethod
    def find_by_token(self, token: str) -> Optional[LoginSession]:
        raise NotImplementedError

    @abstractmethod
    def create(self, user_id: int, token: str) -> LoginSession:
        raise NotImplementedError


class SqlUserRepository(UserRepository):

    def __init__(self, db: Session):
        self.db = db

    def find_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == email).first()

    def create(self, email: str, password_hash: str) -> User:
        user = User(email=email, password=password_hash)
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        return user


class SqlSessionRepository(SessionRepository):

    def __init__(self, db: Session):
        self.db = db

    def find_by_token(self, token: str) -> Optional[LoginSession]:
        return self.db.query(LoginSession).filter(LoginSession.token == token).first()

    def create(self, user_id: int, token: str) -> LoginSession:
        session = LoginSession(user_id=user_id, token=token)
        self.db.add(session)
        self.db.commit()
        self.db.refresh(session)
        return session
