"""Pytest fixtures for API tests."""

import pytest
from fastapi.testclient import TestClient

from api.main import app


@pytest.fixture(scope="module")
def client():
    """Create a TestClient for the FastAPI application."""
    with TestClient(app) as c:
        yield c


@pytest.fixture(scope="module")
def report_defaults(client):
    """Default filter state of the report page."""
    response = client.get("/api/filters/report/defaults")
    return response.json()["filters"]
