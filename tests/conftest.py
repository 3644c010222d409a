import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

import database
from main import app
from services.form_schema_service import form_schema_store


@pytest.fixture
def mongo_db():
    """In-memory Motor-compatible database wired into the app's globals."""
    mock_client = AsyncMongoMockClient()
    database.client = mock_client
    database.db = mock_client["crm_test"]
    form_schema_store.invalidate()
    yield database.db
    form_schema_store.invalidate()
    database.client = None
    database.db = None


@pytest.fixture
def client(mongo_db):
    # Not used as a context manager, so the startup hook never dials a real MongoDB.
    return TestClient(app)


@pytest.fixture
def lead_payload():
    return {
        "name": "Asha Verma",
        "email": "asha@example.com",
        "phone": "9876543210",
        "address": "12 MG Road",
        "state": "Karnataka",
        "source": "Walk In",
    }


@pytest.fixture
def auth_headers(client):
    client.post("/api/register", json={
        "username": "owner",
        "email": "owner@example.com",
        "password": "s3cret-pass",
    })
    response = client.post("/api/login", json={"email": "owner@example.com", "password": "s3cret-pass"})
    return {"Authorization": f"Bearer {response.json()['access_token']}"}
