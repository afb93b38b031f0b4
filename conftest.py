"""
Shared pytest fixtures
The application is pointed at an in-memory SQLite database before any
project module reads its settings.
"""

import os

os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["RDS_HOSTNAME"] = "localhost"
os.environ["DEBUG"] = "False"
os.environ["ENVIRONMENT"] = "test"
os.environ["AUTO_CREATE_TABLES"] = "True"

import pytest
from fastapi.testclient import TestClient


@pytest.fixture
def client():
    """Test client with a fresh, empty database per test"""
    from main import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def make_contact(client):
    """Create a contact through the API and return its JSON"""

    def _make(name="Asha Verma", email="asha@mail.com", phone="9123456789"):
        response = client.post("/contacts", json={"name": name, "email": email, "phone": phone})
        assert response.status_code == 201, response.text
        return response.json()

    return _make
