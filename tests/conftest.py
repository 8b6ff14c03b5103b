"""
Pytest Configuration and Fixtures
=================================

Provides shared fixtures for the test suite:
- In-memory MongoDB (mongomock-motor) behind the real Database manager
- Service instances bound to that database
- FastAPI TestClient with dependencies overridden

Every test gets its own uniquely named database.
"""

import uuid

import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from database import Database, get_database
from settings import Settings
from app.dependencies import get_settings
from app.services import AdminService, MenuHistoryService, UserProfileService

ADMIN_SECRET = "letmein"


@pytest.fixture
def database():
    """Database manager whose client is an in-memory mock."""
    return Database(
        "mongodb://localhost:27017",
        f"rasoi_test_{uuid.uuid4().hex}",
        client_factory=lambda url: AsyncMongoMockClient(),
    )


@pytest.fixture
def profiles(database):
    return UserProfileService(database)


@pytest.fixture
def menus(database):
    return MenuHistoryService(database)


@pytest.fixture
def admin(profiles):
    return AdminService(profiles, ADMIN_SECRET)


@pytest.fixture
def app_settings():
    return Settings(ADMIN_SECRET=ADMIN_SECRET, MAX_BODY_BYTES=4096)


@pytest.fixture
def client(database, app_settings):
    """TestClient for a fresh app wired to the mock database."""
    from main import create_app

    app = create_app(app_settings)
    app.dependency_overrides[get_database] = lambda: database
    app.dependency_overrides[get_settings] = lambda: app_settings

    with TestClient(app) as test_client:
        yield test_client
