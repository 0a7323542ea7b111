"""Shared fixtures: in-memory database and a test client bound to it."""

import random

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from rentalhaven.api.dependencies import get_rng
from rentalhaven.core.config import settings
from rentalhaven.core.database import Base, get_db
from rentalhaven.main import app
from rentalhaven.models.user import User
from rentalhaven.services.auth import get_password_hash


@pytest.fixture(autouse=True)
def fast_bcrypt(monkeypatch):
    """Use the minimum bcrypt cost so hashing does not dominate test time."""
    monkeypatch.setattr(settings, "BCRYPT_ROUNDS", 4)


@pytest.fixture
def test_db():
    """Create an in-memory test database."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    testing_session_local = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    db = testing_session_local()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client(test_db):
    """Create a test client with database and random source overrides."""

    def override_get_db():
        try:
            yield test_db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_rng] = lambda: random.Random(1234)
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def test_user(test_db):
    """Create a registered user in the database."""
    user = User(
        email="owner@example.com",
        name="Test Owner",
        password=get_password_hash("testpassword123"),
    )
    test_db.add(user)
    test_db.commit()
    test_db.refresh(user)
    return user


@pytest.fixture
def property_payload():
    """Valid body for POST /api/properties."""
    return {
        "title": "Sea View Flat",
        "description": "Two bedrooms near the beach.",
        "pricePerNight": 2500.0,
        "city": "Goa",
        "state": "Goa",
        "type": "apartment",
        "images": "https://example.com/a.jpg,https://example.com/b.jpg",
    }
