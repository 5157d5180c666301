"""
Pytest configuration and shared fixtures.
"""

import pytest
from typing import Any, Dict
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.core.database import build_engine, build_session_factory, init_db
from app.main import create_app


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Settings pointing at a private in-memory database."""
    return Settings(
        DATABASE_URL="sqlite://",
        LOG_DIR=str(tmp_path / "logs"),
        ENVIRONMENT="test",
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    """Test client with lifespan (table creation) applied."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def db_session(settings):
    """Session on a fresh database, for repository tests."""
    engine = build_engine(settings)
    init_db(engine)
    session = build_session_factory(engine)()
    yield session
    session.close()
    engine.dispose()


@pytest.fixture
def job_payload() -> Dict[str, Any]:
    """Valid create payload."""
    return {
        "jobTitle": "Backend Engineer",
        "company": "Acme Corp",
        "location": "Berlin",
        "salary": "85000",
        "jobType": "Full-time (On-site)",
        "description": "Build and run our job APIs.",
        "jobQualifications": "Python\nSQL\n\nREST APIs",
    }
