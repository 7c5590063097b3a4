"""
Authentication API tests
"""
from fastapi.testclient import TestClient

from hotel_booking.models.entities import Session as LoginSession


class TestSignUp:

    def test_sign_up(self, client: TestClient):
        response = client.post("/auth/sign-up", json={
            "email": "participant@example.com",
            "password": "123456"
        })

        assert response.status_code == 201
        data = response.json()
        assert data["email"] == "participant@example.com"
        assert "password" not in data

    def test_duplicate_email(self, client: TestClient, make_user):
        make_user(email="taken@example.com")

        response = client.post("/auth/sign-up", json={
            "email": "taken@example.com",
            "password": "123456"
        })

        assert response.status_code == 409

    def test_invalid_email(self, client: TestClient):
        response = client.post("/auth/sign-up", json={"email": "nope", "password": "123456"})
        assert response.status_code == 422


class TestSignIn:

    def test_sign_in_opens_session(self, client: TestClient, make_user, db_session):
        user = make_user(email="guest@example.com", password="secret1")

        response = client.post("/auth/sign-in", json={
            "email": "guest@example.com",
            "password": "secret1"
        })

        assert response.status_code == 200
        data = response.json()
        assert data["user"] == {"id": user.id, "email": "guest@example.com"}
        session = db_session.query(LoginSession).filter(LoginSession.token == data["token"]).first()
        assert session is not None
        assert session.user_id == user.id

    def test_wrong_password(self, client: TestClient, make_user):
        make_user(email="guest@example.com", password="secret1")

        response = client.post("/auth/sign-in", json={
            "email": "guest@example.com",
            "password": "wrong"
        })

        assert response.status_code == 401

    def test_unknown_email(self, client: TestClient):
        response = client.post("/auth/sign-in", json={
            "email": "ghost@example.com",
            "password": "secret1"
        })

        assert response.status_code == 401

    def test_token_opens_booking_routes(self, client: TestClient, make_user, make_enrollment,
                                        make_ticket_type, make_ticket):
        user = make_user(email="guest@example.com", password="secret1")
        make_ticket(make_enrollment(user), make_ticket_type(includes_hotel=True))

        token = client.post("/auth/sign-in", json={
            "email": "guest@example.com",
            "password": "secret1"
        }).json()["token"]

        response = client.get("/booking", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 404
