"""
Shared fixtures: an application over a throwaway data directory,
a started TestClient, and helpers for logging in and registering patients.
"""
import pytest
from fastapi.testclient import TestClient

from nrc.config import Settings
from nrc.main import create_app


def make_settings(tmp_path, **overrides) -> Settings:
    values = {
        "data_dir": str(tmp_path / "data"),
        "storage_backend": "csv",
        "environment": "test",
        "jwt_secret_key": "test-secret",
        "auth_required": False,
        "seed_sample_data": True,
        "log_level": "WARNING",
    }
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def settings(tmp_path):
    return make_settings(tmp_path)


@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as test_client:
        yield test_client


@pytest.fixture
def store(client):
    return client.app.state.store


def login(client, username, password, employee_id):
    response = client.post(
        "/api/auth/login",
        json={"username": username, "password": password, "employee_id": employee_id},
    )
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['token']}"}


@pytest.fixture
def admin_headers(client):
    return login(client, "admin", "admin123", "ADMIN001")


@pytest.fixture
def worker_headers(client):
    return login(client, "priya.sharma", "worker123", "EMP001")


@pytest.fixture
def supervisor_headers(client):
    return login(client, "supervisor1", "super123", "SUP001")


PATIENT_PAYLOAD = {
    "name": "Asha Kumari",
    "age": 3,
    "type": "child",
    "contactNumber": "+91 9000000001",
    "address": "Ward 4, Meerut",
    "weight": 9.5,
    "height": 85,
    "nutritionStatus": "malnourished",
    "riskScore": 40,
    "symptoms": ["fatigue", "low appetite"],
}


@pytest.fixture
def make_patient(client):
    def _make(**overrides):
        payload = {**PATIENT_PAYLOAD, **overrides}
        response = client.post("/api/patients", json=payload)
        assert response.status_code == 201, response.text
        return response.json()["id"]

    return _make
