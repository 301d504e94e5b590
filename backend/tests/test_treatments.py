"""
Tests for inpatient treatment trackers: progress entries and discharge.
"""
import pytest

from nrc.clock import today
from nrc.models import BEDS, PATIENTS


@pytest.fixture
def admitted(client, store, make_patient):
    """A patient occupying bed 101 with an open treatment tracker."""
    patient_id = make_patient()
    bed = store.find_one(BEDS, {"number": "101"})
    client.put(f"/api/beds/{bed['id']}", json={"status": "occupied", "patientId": patient_id})
    response = client.post("/api/treatments", json={
        "patientId": patient_id,
        "hospitalId": "HOSP001",
        "treatmentPlan": ["F-75 starter diet", "Antibiotics"],
        "medicineSchedule": [{"medicine": "Amoxicillin", "dosage": "250 mg", "frequency": "TID"}],
    })
    assert response.status_code == 201, response.text
    return {"patient_id": patient_id, "bed_id": bed["id"], "tracker_id": response.json()["id"]}


class TestTreatments:
    def test_create_defaults(self, client, admitted):
        tracker = client.get(f"/api/treatments/{admitted['tracker_id']}").json()
        assert tracker["admissionDate"] == today()
        assert tracker["isActive"] is True
        assert tracker["patientName"] == "Asha Kumari"
        assert tracker["medicineSchedule"][0]["medicine"] == "Amoxicillin"
        assert tracker["dailyProgress"] == []

    def test_unknown_patient(self, client):
        response = client.post("/api/treatments", json={"patientId": "missing", "hospitalId": "HOSP001"})
        assert response.status_code == 404

    def test_progress_appends_and_updates_weight(self, client, store, admitted):
        url = f"/api/treatments/{admitted['tracker_id']}/progress"
        client.post(url, json={"date": "2024-05-01", "weight": 9.7, "appetite": "poor"})
        response = client.post(url, json={"weight": 9.9, "appetite": "good", "notes": "Eating well"})
        assert response.status_code == 200

        progress = response.json()["dailyProgress"]
        assert [entry["weight"] for entry in progress] == [9.7, 9.9]
        assert progress[0]["date"] == "2024-05-01"
        assert progress[1]["date"] == today()
        assert store.find_by_id(PATIENTS, admitted["patient_id"])["weight"] == "9.9"

    def test_discharge_frees_bed(self, client, store, admitted):
        response = client.post(f"/api/treatments/{admitted['tracker_id']}/discharge", json={"dischargeDate": "2024-05-20"})
        assert response.status_code == 200
        assert response.json()["dischargeDate"] == "2024-05-20"
        assert response.json()["isActive"] is False

        bed = store.find_by_id(BEDS, admitted["bed_id"])
        assert bed["status"] == "available"
        assert bed["patient_id"] == ""
        assert store.find_by_id(PATIENTS, admitted["patient_id"])["bed_id"] == ""

    def test_discharged_tracker_is_closed(self, client, admitted):
        base = f"/api/treatments/{admitted['tracker_id']}"
        client.post(f"{base}/discharge", json={})
        assert client.post(f"{base}/discharge", json={}).status_code == 409
        assert client.post(f"{base}/progress", json={"weight": 10}).status_code == 409

    def test_active_filter(self, client, admitted, make_patient):
        other = client.post("/api/treatments", json={"patientId": make_patient(name="Other"), "hospitalId": "HOSP001"})
        client.post(f"/api/treatments/{admitted['tracker_id']}/discharge", json={})

        active = client.get("/api/treatments?active=true").json()
        discharged = client.get("/api/treatments?active=false").json()
        assert [t["id"] for t in active] == [other.json()["id"]]
        assert [t["id"] for t in discharged] == [admitted["tracker_id"]]
        assert len(client.get("/api/treatments").json()) == 2

    def test_deleted_patient(self, client, store, admitted):
        """Progress is refused once the patient is deleted; discharge still closes the tracker."""
        client.delete(f"/api/patients/{admitted['patient_id']}")
        base = f"/api/treatments/{admitted['tracker_id']}"

        assert client.post(f"{base}/progress", json={"weight": 10}).status_code == 404
        assert store.find_by_id(PATIENTS, admitted["patient_id"])["weight"] == "9.5"

        response = client.post(f"{base}/discharge", json={})
        assert response.status_code == 200
        assert response.json()["isActive"] is False
        assert store.find_by_id(BEDS, admitted["bed_id"])["status"] == "available"
