"""
Pytest configuration for the LifePulse API tests.

Every test gets its own in-memory database holding the seeded sample profile.
"""

import os

# Settings are read at import time, so required secrets must exist first
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("ENCRYPTION_KEY", "pV8eKXt7MLXIA-_Ez_3YKRAAXwIvCKe1ZC9qjtFwlXA=")
os.environ["SEED_ON_STARTUP"] = "false"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from lifepulse import models
from lifepulse.database import build_engine, get_db
from lifepulse.main import app
from lifepulse.seed import SAMPLE_PASSWORD, SAMPLE_USERNAME, seed_database


@pytest.fixture
def db_session():
    engine = build_engine("sqlite://")
    models.Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSession()
    seed_database(session)
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def client(db_session):
    """An anonymous client bound to the test database."""
    app.dependency_overrides[get_db] = lambda: db_session
    test_client = TestClient(app)
    yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def auth_client(client):
    """A client signed in as the seeded sample user."""
    response = client.post("/api/login", json={"username": SAMPLE_USERNAME, "password": SAMPLE_PASSWORD})
    assert response.status_code == 200
    return client


@pytest.fixture
def sample_user(db_session):
    return db_session.query(models.User).filter(models.User.username == SAMPLE_USERNAME).one()
