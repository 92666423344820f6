"""Pytest fixtures: a throwaway SQLite database per test."""
import os

# Must be set before request_manager.config is imported anywhere
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from fastapi.testclient import TestClient

from request_manager.database import Base, get_db
from request_manager.main import app

# Import all models so they register with Base.metadata
from request_manager.models.user import User                            # noqa: F401
from request_manager.models.service_request import ServiceRequest       # noqa: F401


@pytest.fixture(scope="function")
def db_engine(tmp_path):
    """Create a fresh SQLite engine for each test."""
    engine = create_engine(f"sqlite:///{tmp_path / 'test.db'}", connect_args={"check_same_thread": False})

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def db(db_engine):
    """Yield a database session for service-level tests."""
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="function")
def client(db_engine):
    """FastAPI TestClient with the database dependency overridden to use the test engine."""
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)

    def _override_get_db():
        session = TestingSession()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Helpers: create records via the API, return the "data" part of the envelope
# ---------------------------------------------------------------------------
@pytest.fixture
def create_user(client):
    def _create(name: str = "Test User", email: str = "test.user@company.com", role: str = "Employee") -> dict:
        resp = client.post("/api/users", json={"name": name, "email": email, "role": role})
        assert resp.status_code == 201, resp.text
        return resp.json()["data"]

    return _create


@pytest.fixture
def create_request(client):
    def _create(
        created_by_user_id: int,
        title: str = "Laptop will not boot",
        description: str = "Black screen after the BIOS logo",
        priority: str = "Medium",
    ) -> dict:
        resp = client.post("/api/servicerequests", json={
            "title": title,
            "description": description,
            "priority": priority,
            "createdByUserId": created_by_user_id,
        })
        assert resp.status_code == 201, resp.text
        return resp.json()["data"]

    return _create
