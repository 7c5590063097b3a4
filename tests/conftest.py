"""
Pytest configuration and shared fixtures
"""
import os

os.environ.setdefault("DATABASE_URL", "sqlite://")

import itertools
import pytest
from datetime import date
from decimal import Decimal
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

from hotel_booking.database import Base, get_db
from hotel_booking.models import entities  # noqa
from hotel_booking.models.entities import (
    User, Session as LoginSession, Enrollment, TicketType, Ticket, TicketStatus,
    Hotel, Room, Booking
)
from hotel_booking.security.auth import get_password_hash, create_access_token
from hotel_booking.main import app

_sequence = itertools.count(1)


@pytest.fixture(scope="function")
def db_engine():
    """In-memory database engine"""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def db_session(db_engine):
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture(scope="function")
def client(db_session):
    """Test client bound to the in-memory session"""
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


# ============== Factories ==============

def _save(db, obj):
    db.add(obj)
    db.commit()
    db.refresh(obj)
    return obj


@pytest.fixture
def make_user(db_session):
    def _make(email=None, password="123456"):
        email = email or f"user{next(_sequence)}@example.com"
        return _save(db_session, User(email=email, password=get_password_hash(password)))
    return _make


@pytest.fixture
def make_token(db_session):
    """Issue a token backed by a stored session"""
    def _make(user):
        token = create_access_token(user.id)
        _save(db_session, LoginSession(user_id=user.id, token=token))
        return token
    return _make


@pytest.fixture
def make_enrollment(db_session):
    def _make(user):
        n = next(_sequence)
        return _save(db_session, Enrollment(
            user_id=user.id,
            name=f"Participant {n}",
            cpf=f"{n:011d}",
            birthday=date(1990, 1, 1),
            phone="21999999999"
        ))
    return _make


@pytest.fixture
def make_ticket_type(db_session):
    def _make(includes_hotel=True, is_remote=False):
        return _save(db_session, TicketType(
            name="Presencial + Hotel" if includes_hotel else "Presencial",
            price=Decimal("600.00"),
            is_remote=is_remote,
            includes_hotel=includes_hotel
        ))
    return _make


@pytest.fixture
def make_ticket(db_session):
    def _make(enrollment, ticket_type, status=TicketStatus.PAID):
        return _save(db_session, Ticket(
            enrollment_id=enrollment.id,
            ticket_type_id=ticket_type.id,
            status=status
        ))
    return _make


@pytest.fixture
def make_hotel(db_session):
    def _make(name=None):
        return _save(db_session, Hotel(
            name=name or f"Hotel {next(_sequence)}",
            image="https://example.com/hotel.png"
        ))
    return _make


@pytest.fixture
def make_room(db_session):
    def _make(hotel, capacity=3, name=None):
        return _save(db_session, Room(
            name=name or f"Room {next(_sequence)}",
            capacity=capacity,
            hotel_id=hotel.id
        ))
    return _make


@pytest.fixture
def make_booking(db_session):
    def _make(user, room):
        return _save(db_session, Booking(user_id=user.id, room_id=room.id))
    return _make


@pytest.fixture
def make_eligible_user(make_user, make_enrollment, make_ticket_type, make_ticket):
    """User holding a paid ticket that includes hotel"""
    def _make():
        user = make_user()
        enrollment = make_enrollment(user)
        make_ticket(enrollment, make_ticket_type(includes_hotel=True), TicketStatus.PAID)
        return user
    return _make


# ============== Common fixtures ==============

@pytest.fixture
def hotel(make_hotel):
    return make_hotel()


@pytest.fixture
def room(make_room, hotel):
    return make_room(hotel, capacity=3)


@pytest.fixture
def eligible_user(make_eligible_user):
    return make_eligible_user()


@pytest.fixture
def auth_headers(eligible_user, make_token):
    """Bearer headers of the eligible user"""
    return {"Authorization": f"Bearer {make_token(eligible_user)}"}
