"""Pytest configuration and fixtures."""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from submissions import database, models  # noqa: F401
from submissions.config import get_settings
from submissions.database import Base, get_engine
from submissions.dependencies import get_db
from submissions.main import app

# In-memory SQLite shared by every connection in the test session
engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create the schema once at the start of the test session."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(autouse=True)
def reset_settings():
    """Re-read the environment for every test."""
    get_settings.cache_clear()
    get_engine.cache_clear()
    yield
    get_settings.cache_clear()
    get_engine.cache_clear()


@pytest.fixture
def db():
    """Create a fresh database session for each test with cleanup."""
    session = TestingSessionLocal()

    yield session

    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


@pytest.fixture
def client(db):
    """Create a test client with database override."""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def store(monkeypatch):
    """A session double standing in for the real store."""
    session = MagicMock(name="session")
    factory = MagicMock(name="SessionLocal", return_value=session)
    monkeypatch.setattr(database, "SessionLocal", factory)
    session.factory = factory
    return session


@pytest.fixture
def raw_client():
    """Test client that goes through the real get_db dependency."""
    with TestClient(app) as test_client:
        yield test_client
