from datetime import datetime, timedelta, timezone

import httpx
import jwt
import pytest
from bson import ObjectId
from httpx import ASGITransport
from mongomock_motor import AsyncMongoMockClient

from app.security import ALGORITHM

JWT_SECRET = "test-jwt-secret-0123456789abcdef0123"
BASE_TIME = datetime(2025, 1, 1, tzinfo=timezone.utc)


class FakeMongoClient:
    """Stands in for ``AsyncMongoClient`` so the lifespan runs against mongomock."""

    def __init__(self, db):
        self._db = db
        self.database_name = None
        self.closed = False

    def __getitem__(self, name):
        self.database_name = name
        return self._db

    async def close(self):
        self.closed = True


@pytest.fixture
def mock_env(monkeypatch):
    monkeypatch.setenv("MONGODB_CONNECTION_STRING", "mongodb://localhost:27017")
    monkeypatch.setenv("MONGODB_DATABASE", "hotel-booking-test")
    monkeypatch.setenv("STRIPE_API_KEY", "sk_test_123")
    monkeypatch.setenv("JWT_SECRET_KEY", JWT_SECRET)


@pytest.fixture
def db():
    return AsyncMongoMockClient()[f"hotel-booking-test-{ObjectId()}"]


@pytest.fixture
def mongo_client(monkeypatch, db):
    fake = FakeMongoClient(db)
    monkeypatch.setattr("app.main.AsyncMongoClient", lambda *args, **kwargs: fake)
    return fake


@pytest.fixture
async def client(mock_env, mongo_client):
    from app.main import app, lifespan

    async with lifespan(app):
        async with httpx.AsyncClient(
            transport=ASGITransport(app=app),
            base_url="http://test",
        ) as c:
            yield c


@pytest.fixture
def make_token():
    def _factory(user_id: str, role: str = "user", email: str | None = None, secret: str = JWT_SECRET) -> str:
        return jwt.encode(
            {"userId": user_id, "role": role, "email": email},
            secret,
            algorithm=ALGORITHM,
        )

    return _factory


@pytest.fixture
def make_hotel():
    """Factory for hotel documents; ``offset`` spaces out createdAt."""

    def _factory(offset: int = 0, **overrides) -> dict:
        doc = {
            "_id": ObjectId(),
            "userId": "owner-1",
            "name": "Dublin Getaways",
            "city": "Dublin",
            "country": "Ireland",
            "description": "A cosy stay",
            "type": ["Budget"],
            "adultCount": 2,
            "childCount": 1,
            "facilities": ["Free WiFi", "Parking"],
            "pricePerNight": 119,
            "starRating": 3,
            "imageUrls": [],
            "totalBookings": 0,
            "totalRevenue": 0,
            "createdAt": BASE_TIME + timedelta(minutes=offset),
        }
        doc.update(overrides)
        return doc

    return _factory


@pytest.fixture
async def guest(db) -> dict:
    user = {
        "_id": ObjectId(),
        "email": "guest@example.com",
        "firstName": "Ada",
        "lastName": "Guest",
        "role": "user",
        "password": "hashed",
        "totalBookings": 0,
        "totalSpent": 0,
    }
    await db["users"].insert_one(user)
    return user


@pytest.fixture
def auth_headers(guest, make_token) -> dict:
    token = make_token(str(guest["_id"]), email=guest["email"])
    return {"Authorization": f"Bearer {token}"}
