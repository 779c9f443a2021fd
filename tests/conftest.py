"""Shared fixtures for API tests."""

import pytest
from fastapi.testclient import TestClient

from user_directory_api.app.main import create_app


@pytest.fixture
def app():
    return create_app()


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)
