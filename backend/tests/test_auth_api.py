"""
Integration tests for /api/auth and bearer token handling.
"""

import jwt
from fastapi import status

from config import app_config
from conftest import DEFAULT_PASSWORD, auth_headers
from models import Artist, User


class TestRegister:

    def test_register_returns_token_and_user(self, client, db_session):
        response = client.post("/api/auth/register", json={
            "name": "Ana Lopez",
            "email": "ana@example.com",
            "password": "secret123"
        })

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["token"]
        assert data["user"]["email"] == "ana@example.com"
        assert data["user"]["role"] == "USER"
        assert "password" not in data["user"]

        stored = db_session.query(User).filter_by(email="ana@example.com").one()
        assert stored.password != "secret123"
        assert stored.password.startswith("$2")

    def test_token_claims(self, client):
        response = client.post("/api/auth/register", json={
            "name": "Ana Lopez",
            "email": "ana@example.com",
            "password": "secret123"
        })

        claims = jwt.decode(response.json()["token"], app_config.JWT_SECRET, algorithms=["HS256"])
        assert claims["sub"] == "ana@example.com"
        assert claims["role"] == "USER"
        assert claims["uid"] == response.json()["user"]["id"]

    def test_register_as_artist_creates_artist(self, client, db_session):
        response = client.post("/api/auth/register", json={
            "name": "The Band",
            "email": "band@example.com",
            "password": "secret123",
            "role": "ARTIST"
        })

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["user"]["role"] == "ARTIST"
        assert db_session.query(Artist).filter_by(email="band@example.com").count() == 1

    def test_register_duplicate_email(self, client, user):
        response = client.post("/api/auth/register", json={
            "name": "Someone",
            "email": user.email,
            "password": "secret123"
        })

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["message"] == "Email is already in use"

    def test_register_requires_password(self, client):
        response = client.post("/api/auth/register", json={"name": "Ana", "email": "ana@example.com"})

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_register_as_admin_forbidden_by_default(self, client):
        response = client.post("/api/auth/register", json={
            "name": "Mallory",
            "email": "mallory@example.com",
            "password": "secret123",
            "role": "ADMIN"
        })

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_register_as_admin_when_enabled(self, client, monkeypatch):
        monkeypatch.setattr(app_config, "ALLOW_ADMIN_REGISTRATION", True)

        response = client.post("/api/auth/register", json={
            "name": "Root",
            "email": "root@example.com",
            "password": "secret123",
            "role": "ADMIN"
        })

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["user"]["role"] == "ADMIN"

    def test_register_validation_errors(self, client):
        response = client.post("/api/auth/register", json={
            "name": "A",
            "email": "not-an-email",
            "password": "123"
        })

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        data = response.json()
        assert data["message"] == "Validation failed"
        assert data["status"] == 400
        assert data["path"] == "/api/auth/register"
        fields = {error["field"] for error in data["errors"]}
        assert fields == {"name", "email", "password"}
        messages = {error["field"]: error["message"] for error in data["errors"]}
        assert messages["email"] == "Email should be valid"


class TestLogin:

    def test_login(self, client, user):
        response = client.post("/api/auth/login", json={"email": user.email, "password": DEFAULT_PASSWORD})

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["user"]["id"] == user.id

    def test_login_wrong_password(self, client, user):
        response = client.post("/api/auth/login", json={"email": user.email, "password": "wrong-password"})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json()["message"] == "Invalid email or password"

    def test_login_unknown_email(self, client):
        response = client.post("/api/auth/login", json={"email": "ghost@example.com", "password": "whatever"})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_login_account_without_password(self, client, db_session):
        db_session.add(Artist(name="No Login", email="nologin@example.com", role="ARTIST"))
        db_session.commit()

        response = client.post("/api/auth/login", json={"email": "nologin@example.com", "password": "anything"})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


class TestBearerToken:

    def test_missing_token(self, client):
        response = client.get("/api/users/me")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_invalid_token(self, client):
        response = client.get("/api/users/me", headers={"Authorization": "Bearer not-a-token"})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_token_for_deleted_user(self, client, db_session, user):
        headers = auth_headers(user)
        db_session.delete(user)
        db_session.commit()

        response = client.get("/api/users/me", headers=headers)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_expired_token(self, client, user, monkeypatch):
        monkeypatch.setattr(app_config, "JWT_EXPIRATION_MINUTES", -1)
        headers = auth_headers(user)

        response = client.get("/api/users/me", headers=headers)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json()["message"] == "Authentication token has expired"
