"""
Shared test fixtures: SQLite test database, store, ledger, test client.
"""

import os
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

# Point the app at the test database before importing app modules
os.environ["DATABASE_URL"] = "sqlite:///./test.db"

from greenbuild.database import Base
from greenbuild.ledger import MaterialLedger, SyncTracker, get_ledger
from greenbuild.main import app
from greenbuild.store import MaterialStore, StoreError


TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(autouse=True)
def setup_database():
    """Create all tables before each test, drop after."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    """Direct database session for test setup/assertions."""
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def store():
    return MaterialStore(TestingSessionLocal)


@pytest.fixture
def ledger(store):
    """Fresh ledger on the test database, wired into the app."""
    ledger = MaterialLedger(store, SyncTracker(reset_seconds=0))
    app.dependency_overrides[get_ledger] = lambda: ledger
    yield ledger
    app.dependency_overrides.pop(get_ledger, None)


class FailingStore(MaterialStore):
    """Every request fails the way an unreachable database would."""

    def __init__(self):
        super().__init__(session_factory=None)

    def list_all(self):
        raise StoreError("Failed to fetch materials: connection refused")

    def insert(self, material):
        raise StoreError("Failed to save material: connection refused")

    def delete(self, material_id):
        raise StoreError("connection refused")

    def delete_all(self):
        raise StoreError("connection refused")


@pytest.fixture
def failing_store():
    return FailingStore()


@pytest.fixture
def client(ledger):
    """FastAPI test client."""
    return TestClient(app)
