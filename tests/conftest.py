"""Shared fixtures: an in-memory SQLite store and a seeded dataset."""

from datetime import UTC, datetime

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import webstore.models  # noqa: F401  (registers tables on Base.metadata)
from webstore.core.db.deps import get_db
from webstore.core.db.session import Base
from webstore.core.reporting.sources.sqlalchemy_data_source import SQLAlchemyDataSource
from webstore.main import app
from tests.helpers import seed_store_dataset

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite:///:memory:"

# Evaluation time used by time-windowed report tests
NOW = datetime(2024, 3, 1, 12, 0, 0, tzinfo=UTC)


@pytest.fixture(scope="function")
def test_engine():
    """Create test database engine.

    StaticPool keeps a single connection so every session (and the API's
    worker thread) sees the same in-memory database.
    """
    engine = create_engine(
        TEST_DATABASE_URL,
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def testing_session_local(test_engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture(scope="function")
def db_session(testing_session_local):
    """Create test database session."""
    session = testing_session_local()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def store_dataset(db_session):
    """Seed the reference dataset used across report tests."""
    return seed_store_dataset(db_session)


@pytest.fixture
def data_source(db_session):
    return SQLAlchemyDataSource(db_session)


@pytest.fixture
def now():
    return NOW


@pytest.fixture(scope="function")
def client(db_session):
    """Create a test client with database dependency override."""

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
