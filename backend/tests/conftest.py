"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules:
test settings with an injected signing secret, a throwaway SQLite database
per test, the auth collaborators wired together, and an HTTP client.
"""

import copy
from datetime import datetime, timedelta, timezone

import jwt  # PyJWT
import pytest
from fastapi.testclient import TestClient

import modules.auth.tables  # noqa: F401
import modules.properties.tables  # noqa: F401
from api.app import create_app
from modules.auth.passwords import PasswordHasher
from modules.auth.repository import UserRepository
from modules.auth.service import AuthService
from modules.auth.tokens import TokenService
from modules.properties.repository import PropertyRepository
from modules.properties.service import PropertyService
from shared.config import Settings
from shared.database import Database


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"

VALID_SIGNUP = {
    "name": "Test User",
    "email": "test@example.com",
    "password": "Test123!@#Strong",
    "phoneNumber": "1234567890",
    "gender": "male",
    "dateOfBirth": "1990-01-01",
    "address": {
        "street": "123 Main St",
        "city": "Ho Chi Minh",
        "state": "HCM",
        "zipCode": "70000",
    },
}

SAMPLE_PROPERTY = {
    "title": "Modern City Apartment",
    "type": "Apartment",
    "description": "Bright, modern apartment in the city center",
    "price": 250000,
    "location": {
        "address": "123 Main Street",
        "city": "Helsinki",
        "state": "Uusimaa",
    },
    "squareFeet": 900,
    "yearBuilt": 2018,
    "bedrooms": 2,
}


def create_test_token(
    user_id: str = "test-user-123",
    email: str = "test@example.com",
    expired: bool = False,
    secret: str = TEST_JWT_SECRET,
) -> str:
    """
    Create a test JWT token outside of TokenService.

    Args:
        user_id: User ID to include in the token
        email: Email to include in the token
        expired: If True, creates an expired token
        secret: Signing secret

    Returns:
        JWT token string
    """
    now = datetime.now(timezone.utc)
    exp = now - timedelta(hours=1) if expired else now + timedelta(hours=1)
    payload = {
        "sub": user_id,
        "email": email,
        "exp": int(exp.timestamp()),
        "iat": int((now - timedelta(hours=2)).timestamp()),
    }
    return jwt.encode(payload, secret, algorithm="HS256")


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Settings pointing at a per-test SQLite file, with cheap bcrypt."""
    return Settings(
        _env_file=None,
        jwt_secret=TEST_JWT_SECRET,
        jwt_expiry_hours=1,
        bcrypt_rounds=4,
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
    )


@pytest.fixture
async def database(settings: Settings):
    """A ready database with all tables created."""
    db = Database(settings.database_url)
    await db.create_all()
    yield db
    await db.dispose()


@pytest.fixture(scope="session")
def hasher() -> PasswordHasher:
    """Password hasher at the minimum bcrypt cost."""
    return PasswordHasher(rounds=4)


@pytest.fixture
def tokens() -> TokenService:
    """Token service signed with the test secret."""
    return TokenService(secret=TEST_JWT_SECRET, expiry=timedelta(hours=1))


@pytest.fixture
def user_repository(database: Database) -> UserRepository:
    return UserRepository(database.session_factory)


@pytest.fixture
def auth_service(user_repository, hasher, tokens) -> AuthService:
    return AuthService(users=user_repository, hasher=hasher, tokens=tokens)


@pytest.fixture
def property_service(database: Database) -> PropertyService:
    return PropertyService(PropertyRepository(database.session_factory))


@pytest.fixture
def signup_payload() -> dict:
    """A fresh copy of a valid signup body."""
    return copy.deepcopy(VALID_SIGNUP)


@pytest.fixture
def property_payload() -> dict:
    """A fresh copy of a valid listing body."""
    return copy.deepcopy(SAMPLE_PROPERTY)


@pytest.fixture
def app(settings: Settings):
    """Create a fresh app for each test."""
    return create_app(settings)


@pytest.fixture
def client(app):
    """Test client with the lifespan (database, container) running."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def auth_token(client, signup_payload) -> str:
    """Sign up the standard user over HTTP and return its token."""
    response = client.post("/api/users/signup", json=signup_payload)
    assert response.status_code == 201
    return response.json()["token"]


@pytest.fixture
def auth_headers(auth_token: str) -> dict[str, str]:
    """Create authorization headers with a valid token."""
    return {"Authorization": f"Bearer {auth_token}"}


@pytest.fixture
def make_token():
    """Factory for tokens signed outside of TokenService."""
    return create_test_token
