"""
Shared fixtures.

The API tests run against an in-memory SQLite database seeded with the
sample movies and users. DATABASE_URL must be set before the app is built.
"""

import os

os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient

from cinema_api.api.main import app
from cinema_api.database import get_db_manager, seed_database


@pytest.fixture(scope="session")
def client():
    """TestClient with the app's startup/shutdown hooks running."""
    with TestClient(app) as test_client:
        seed_database(get_db_manager())
        yield test_client
    # Shutdown closed every connection (close_db_manager)


@pytest.fixture(scope="session")
def db_manager(client):
    """The manager the running app uses, for direct parameterized queries."""
    return get_db_manager()
