# tests/conftest.py
import mongomock
import pytest
from fastapi.testclient import TestClient

from database import get_db
from main import app
from security import decode_access_token


@pytest.fixture(scope="function")
def db():
    """In-memory MongoDB database, fresh for every test."""
    return mongomock.MongoClient()["devconnector_test"]


@pytest.fixture(scope="function")
def client(db):
    """TestClient wired to the in-memory database."""
    app.dependency_overrides[get_db] = lambda: db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(client):
    """
    Registers a user through the API and returns a small record with its id,
    token and ready-to-use auth headers.
    """
    def _make(name="Alice", email="alice@example.com", password="secret123"):
        response = client.post("/api/users", json={"name": name, "email": email, "password": password})
        assert response.status_code == 200, response.text
        token = response.json()["token"]
        return {
            "id": decode_access_token(token),
            "token": token,
            "headers": {"Authorization": f"Bearer {token}"},
        }

    return _make


@pytest.fixture
def alice(make_user):
    return make_user()


@pytest.fixture
def bob(make_user):
    return make_user(name="Bob", email="bob@example.com")
