"""Pytest configuration and fixtures."""

import os

os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["SECRET_KEY"] = "test-secret-key-that-is-long-enough-for-hs256"
os.environ["ENVIRONMENT"] = "test"
os.environ["RATE_LIMIT_ENABLED"] = "false"

from collections.abc import Callable, Generator  # noqa: E402
from typing import Any  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from vagaflow import models  # noqa: E402, F401
from vagaflow.database import Base, get_db  # noqa: E402
from vagaflow.main import app  # noqa: E402

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite:///:memory:"

# Create test engine
test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

# Create test session factory
TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

AuthHeaders = dict[str, str]


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    # Create all tables
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        # Drop all tables after test
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def client(db_session: Session) -> Generator[TestClient, Any, None]:
    """Create a test client with database session."""

    def override_get_db() -> Generator[Session, None, None]:
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def register_user(client: TestClient) -> Callable[..., AuthHeaders]:
    """Register a user through the API and return bearer headers for it."""

    def _register(
        email: str, role: str, name: str = "Test User", password: str = "secret123"
    ) -> AuthHeaders:
        response = client.post(
            "/api/v1/auth/register",
            json={"email": email, "password": password, "name": name, "role": role},
        )
        assert response.status_code == 201, response.text
        return {"Authorization": f"Bearer {response.json()['access_token']}"}

    return _register


@pytest.fixture
def candidate_headers(client: TestClient, register_user: Callable[..., AuthHeaders]) -> AuthHeaders:
    """Headers of a CANDIDATE user who already has a candidate profile."""
    headers = register_user("candidate@example.com", "CANDIDATE", name="Ana Candidate")
    response = client.post(
        "/api/v1/candidates", json={"resume": "Python developer"}, headers=headers
    )
    assert response.status_code == 201, response.text
    return headers


@pytest.fixture
def company_headers(client: TestClient, register_user: Callable[..., AuthHeaders]) -> AuthHeaders:
    """Headers of a COMPANY user who already has a company profile."""
    headers = register_user("hr@acme.example.com", "COMPANY", name="Acme HR")
    response = client.post(
        "/api/v1/companies",
        json={"company_name": "Acme", "description": "We build things"},
        headers=headers,
    )
    assert response.status_code == 201, response.text
    return headers


@pytest.fixture
def other_company_headers(
    client: TestClient, register_user: Callable[..., AuthHeaders]
) -> AuthHeaders:
    """Headers of a second, unrelated COMPANY user with a profile."""
    headers = register_user("hr@globex.example.com", "COMPANY", name="Globex HR")
    response = client.post("/api/v1/companies", json={"company_name": "Globex"}, headers=headers)
    assert response.status_code == 201, response.text
    return headers


@pytest.fixture
def open_job(client: TestClient, company_headers: AuthHeaders) -> dict[str, Any]:
    """An OPEN job posted by the company of `company_headers`."""
    response = client.post(
        "/api/v1/jobs",
        json={"title": "Backend Engineer", "description": "Build and run our Python APIs."},
        headers=company_headers,
    )
    assert response.status_code == 201, response.text
    return response.json()
