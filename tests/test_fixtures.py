"""
Shared test fixtures and utilities for the Fitness Center test suite.

This module contains payload builders with realistic data, an in-memory
database session fixture, and a test client wired to that same database.
"""

import uuid
from datetime import date, datetime, timedelta
from typing import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from domain.models import Base, build_engine, get_db_session
from main import app


# Helper function to generate unique emails
def unique_email(prefix: str = "test") -> str:
    """Generate unique email address using UUID to avoid conflicts"""
    return f"{prefix}-{uuid.uuid4()}@example.com"


def unique_code(prefix: str) -> str:
    """Generate a unique member/trainer number"""
    return f"{prefix}-{uuid.uuid4().hex[:10].upper()}"


# Realistic default people
REALISTIC_MEMBERS = {
    "default": {"first_name": "Jane", "last_name": "Doe", "email_prefix": "jane.doe"},
    "athlete": {"first_name": "Michael", "last_name": "Chen", "email_prefix": "michael.chen"},
    "casual": {"first_name": "Emma", "last_name": "Johnson", "email_prefix": "emma.johnson"},
}


def member_data(profile_type: str = "default", **overrides) -> dict:
    """
    Build a valid member payload (JSON-friendly values).

    Example:
        >>> data = member_data(height=180.0, weight=81.0)
        >>> data["first_name"]
        'Jane'
    """
    profile = REALISTIC_MEMBERS.get(profile_type, REALISTIC_MEMBERS["default"])
    data = {
        "member_id": unique_code("M"),
        "first_name": profile["first_name"],
        "last_name": profile["last_name"],
        "email": unique_email(profile["email_prefix"]),
        "phone_number": "5551234567",
        "date_of_birth": "1990-05-15",
        "address": "12 Elm Street",
        "city": "Springfield",
    }
    data.update(overrides)
    return data


def trainer_data(**overrides) -> dict:
    """Build a valid trainer payload"""
    data = {
        "trainer_id": unique_code("T"),
        "first_name": "Marcus",
        "last_name": "Reed",
        "email": unique_email("marcus.reed"),
        "phone_number": "+15557654321",
        "date_of_birth": "1985-02-20",
        "address": "48 Oak Avenue",
        "certification": "NASM-CPT",
        "years_experience": 8,
        "specialization": "Strength and conditioning",
        "hourly_rate": "45.00",
    }
    data.update(overrides)
    return data


def plan_data(**overrides) -> dict:
    """Build a valid membership plan payload (flags left to their defaults)"""
    data = {
        "plan_name": f"Basic {uuid.uuid4().hex[:6]}",
        "description": "Gym floor access",
        "duration_months": 1,
        "price": "29.99",
        "plan_type": "BASIC",
    }
    data.update(overrides)
    return data


def payment_data(member_id, **overrides) -> dict:
    data = {
        "member_id": str(member_id),
        "amount": "29.99",
        "payment_method": "CREDIT_CARD",
        "transaction_id": f"TX-{uuid.uuid4().hex[:12]}",
    }
    data.update(overrides)
    return data


def workout_session_data(member_id, trainer_id=None, **overrides) -> dict:
    data = {
        "member_id": str(member_id),
        "trainer_id": str(trainer_id) if trainer_id else None,
        "session_date": (datetime.now() + timedelta(days=1)).replace(microsecond=0).isoformat(),
        "duration_minutes": 60,
        "workout_type": "Strength",
    }
    data.update(overrides)
    return data


def fitness_class_data(trainer_id, **overrides) -> dict:
    data = {
        "trainer_id": str(trainer_id),
        "class_name": "Morning Flow",
        "class_type": "YOGA",
        "start_time": (datetime.now() + timedelta(days=2)).replace(microsecond=0).isoformat(),
        "duration_minutes": 45,
        "max_capacity": 20,
        "room": "Studio A",
    }
    data.update(overrides)
    return data


def yesterday() -> date:
    return date.today() - timedelta(days=1)


# =============================================================================
# DATABASE SESSION FIXTURE FOR INTEGRATION TESTS
# =============================================================================


@pytest.fixture(scope="function")
def db_session() -> Generator[Session, None, None]:
    """
    Create a database session for integration tests.

    Each test gets its own in-memory SQLite database with the full schema,
    so tests never see each other's rows. Foreign keys are enforced.

    Yields:
        Session: SQLAlchemy database session
    """
    engine = build_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(bind=engine, future=True)

    session = TestingSession()
    try:
        yield session
    finally:
        session.rollback()
        session.close()
        engine.dispose()


@pytest.fixture(scope="function")
def client(db_session: Session) -> Generator[TestClient, None, None]:
    """
    TestClient whose requests use the same in-memory database as ``db_session``.

    The app lifespan is not entered, so the configured database is never touched.
    """
    TestingSession = sessionmaker(bind=db_session.get_bind(), future=True)

    def _override_db():
        db = TestingSession()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db_session] = _override_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.pop(get_db_session, None)
