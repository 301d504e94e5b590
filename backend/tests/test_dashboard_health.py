"""
Tests for dashboard statistics, the health endpoint, error rendering and
request logging, plus a smoke run of the API on the SQLite backend.
"""
import pytest
from fastapi.testclient import TestClient

from nrc.main import create_app
from nrc.models import BEDS

from conftest import PATIENT_PAYLOAD, make_settings


class TestDashboard:
    def test_stats_on_seeded_store(self, client):
        stats = client.get("/api/dashboard/stats").json()
        assert stats["patients"]["total"] == 0
        assert stats["beds"] == {"total": 6, "available": 4, "occupied": 1, "maintenance": 1}
        assert stats["bedRequests"]["pending"] == 0
        assert "notifications" not in stats

    def test_stats_count_patients_and_alerts(self, client, make_patient):
        make_patient(riskScore=90)
        make_patient(type="pregnant", nutritionStatus="normal")

        stats = client.get("/api/dashboard/stats?role=supervisor").json()
        assert stats["patients"]["total"] == 2
        assert stats["patients"]["byType"] == {"child": 1, "pregnant": 1}
        assert stats["patients"]["byNutritionStatus"]["malnourished"] == 1
        assert stats["patients"]["highRisk"] == 1
        assert stats["notifications"]["unread"] == 1


class TestHealth:
    def test_health_reports_backend_and_counts(self, client, settings):
        body = client.get("/api/health").json()
        assert body["status"] == "OK"
        assert body["version"] == settings.version
        assert body["database"] == "CSV File Storage"
        assert body["environment"] == "test"
        assert body["statistics"]["users"] == 4
        assert body["statistics"]["patients"] == 0
        assert body["statistics"]["dataDirectory"].endswith("data")

    def test_no_cache_and_request_id_headers(self, client):
        response = client.get("/api/health", headers={"X-Request-ID": "req-123"})
        assert response.headers["X-Request-ID"] == "req-123"
        assert "no-store" in response.headers["Cache-Control"]

    def test_request_id_generated_when_missing(self, client):
        assert client.get("/api/health").headers["X-Request-ID"]

    def test_seeding_can_be_disabled(self, tmp_path):
        with TestClient(create_app(make_settings(tmp_path, seed_sample_data=False))) as empty_client:
            assert empty_client.get("/api/health").json()["statistics"]["users"] == 0


class TestErrors:
    def test_unexpected_error_renders_generic_500(self, tmp_path):
        app = create_app(make_settings(tmp_path))

        @app.get("/api/boom")
        def boom():
            raise RuntimeError("kaboom")

        with TestClient(app, raise_server_exceptions=False) as boom_client:
            response = boom_client.get("/api/boom")
        assert response.status_code == 500
        assert response.json() == {"error": "Something went wrong!", "message": "Internal server error"}

    def test_development_shows_detail(self, tmp_path):
        app = create_app(make_settings(tmp_path, environment="development"))

        @app.get("/api/boom")
        def boom():
            raise RuntimeError("kaboom")

        with TestClient(app, raise_server_exceptions=False) as boom_client:
            assert boom_client.get("/api/boom").json()["message"] == "kaboom"

    def test_unknown_route(self, client):
        response = client.get("/api/nothing-here")
        assert response.status_code == 404
        assert response.json() == {"error": "Not Found"}


@pytest.fixture
def sqlite_client(tmp_path):
    with TestClient(create_app(make_settings(tmp_path, storage_backend="sqlite"))) as test_client:
        yield test_client


class TestSqliteBackend:
    def test_health_names_backend(self, sqlite_client):
        body = sqlite_client.get("/api/health").json()
        assert body["database"] == "SQLite"
        assert body["statistics"]["users"] == 4

    def test_admission_flow(self, sqlite_client):
        """Register, request a bed, approve and discharge on the SQLite store."""
        patient_id = sqlite_client.post("/api/patients", json=PATIENT_PAYLOAD).json()["id"]
        request_id = sqlite_client.post("/api/bed-requests", json={
            "patientId": patient_id, "requestedBy": "EMP001", "medicalJustification": "x",
            "currentCondition": "y", "estimatedStayDuration": 7,
        }).json()["id"]
        bed = sqlite_client.post(f"/api/bed-requests/{request_id}/approve", json={}).json()
        assert bed["ward"] == "Pediatric"
        assert sqlite_client.get(f"/api/patients/{patient_id}").json()["bedId"] == bed["bedId"]

        tracker_id = sqlite_client.post("/api/treatments", json={
            "patientId": patient_id, "hospitalId": "HOSP001",
        }).json()["id"]
        sqlite_client.post(f"/api/treatments/{tracker_id}/discharge", json={})

        store = sqlite_client.app.state.store
        assert store.find_by_id(BEDS, bed["bedId"])["status"] == "available"

    def test_unknown_backend_rejected(self, tmp_path):
        with pytest.raises(ValueError):
            with TestClient(create_app(make_settings(tmp_path, storage_backend="mongo"))):
                pass
