"""
Shared fixtures: an app wired to a throwaway SQLite database.
"""

import pytest
from fastapi.testclient import TestClient

from config.settings import Settings
from main import create_app

SECRET = "test-jwt-secret-for-unit-tests-only"


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "acquisitions.db"


@pytest.fixture
def settings(db_path):
    return Settings(
        _env_file=None,
        environment="test",
        database_url=f"sqlite+aiosqlite:///{db_path}",
        jwt_secret=SECRET,
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
