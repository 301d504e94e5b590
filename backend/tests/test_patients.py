"""
Tests for patient registration, listing, updates and soft delete.
"""
from nrc.clock import days_from_today

from nrc.models import BEDS, NOTIFICATIONS, PATIENTS


class TestRegistration:
    def test_create_returns_registration_number(self, client, store):
        response = client.post("/api/patients", json={
            "name": "Meena",
            "age": 24,
            "type": "pregnant",
            "pregnancyWeek": 28,
            "contactNumber": "+91 9000000002",
            "address": "Village Road",
            "weight": 48,
            "height": 152,
            "nutritionStatus": "normal",
        })
        assert response.status_code == 201
        body = response.json()
        assert body["registrationNumber"].startswith("NRC")
        assert body["registrationNumber"][3:].isdigit()

        row = store.find_by_id(PATIENTS, body["id"])
        assert row["emergency_contact"] == "+91 9000000002"
        assert row["registered_by"] == "SYSTEM"
        assert row["next_visit_date"] == days_from_today(7)
        assert row["is_active"] == "true"

    def test_registered_by_comes_from_token(self, client, store, worker_headers):
        response = client.post("/api/patients", json={
            "name": "Gita", "age": 2, "type": "child", "contactNumber": "1", "address": "a",
            "weight": 8, "height": 70, "nutritionStatus": "normal",
        }, headers=worker_headers)
        assert store.find_by_id(PATIENTS, response.json()["id"])["registered_by"] == "EMP001"

    def test_validation_errors(self, client):
        """Negative age and weight are rejected field by field."""
        response = client.post("/api/patients", json={
            "name": "X", "age": -1, "type": "child", "contactNumber": "1", "address": "a",
            "weight": -2, "height": 70, "nutritionStatus": "normal",
        })
        assert response.status_code == 400
        fields = {e["field"] for e in response.json()["errors"]}
        assert fields == {"age", "weight"}

    def test_unknown_type_rejected(self, client):
        response = client.post("/api/patients", json={
            "name": "X", "age": 1, "type": "adult", "contactNumber": "1", "address": "a",
            "weight": 2, "height": 70, "nutritionStatus": "normal",
        })
        assert response.status_code == 400


class TestHighRiskAlert:
    def _alerts(self, store):
        return [n for n in store.read_all(NOTIFICATIONS) if n["type"] == "high_risk_alert"]

    def test_high_risk_score_alerts_supervisors(self, store, make_patient):
        make_patient(riskScore=85)
        alerts = self._alerts(store)
        assert len(alerts) == 1
        assert alerts[0]["user_role"] == "supervisor"
        assert alerts[0]["priority"] == "high"
        assert alerts[0]["action_required"] == "true"
        assert "Asha Kumari" in alerts[0]["message"]

    def test_severe_malnutrition_alerts_supervisors(self, store, make_patient):
        make_patient(riskScore=10, nutritionStatus="severely_malnourished")
        assert len(self._alerts(store)) == 1

    def test_threshold_is_exclusive(self, store, make_patient):
        """A score of exactly 80 does not raise an alert."""
        make_patient(riskScore=80)
        assert self._alerts(store) == []


class TestQueries:
    def test_list_shapes_rows(self, client, make_patient):
        make_patient()
        patients = client.get("/api/patients").json()
        assert len(patients) == 1
        patient = patients[0]
        assert patient["symptoms"] == ["fatigue", "low appetite"]
        assert patient["weight"] == 9.5
        assert patient["riskScore"] == 40
        assert patient["admissionDate"] == patient["registrationDate"]
        assert patient["nextVisit"] == days_from_today(7)
        assert patient["bedId"] is None

    def test_filters(self, client, make_patient):
        make_patient(name="Ravi")
        make_patient(name="Sunita", type="pregnant", nutritionStatus="normal")
        assert [p["name"] for p in client.get("/api/patients?type=pregnant").json()] == ["Sunita"]
        assert [p["name"] for p in client.get("/api/patients?nutrition_status=malnourished").json()] == ["Ravi"]
        assert [p["name"] for p in client.get("/api/patients?search=rav").json()] == ["Ravi"]

    def test_search_by_registration_number(self, client, make_patient):
        patient_id = make_patient()
        registration_number = client.get(f"/api/patients/{patient_id}").json()["registrationNumber"]
        results = client.get(f"/api/patients?search={registration_number}").json()
        assert [p["id"] for p in results] == [patient_id]

    def test_get_unknown_patient(self, client):
        response = client.get("/api/patients/missing")
        assert response.status_code == 404
        assert response.json() == {"error": "Patient not found"}


class TestUpdateAndDelete:
    def test_partial_update(self, client, store, make_patient):
        patient_id = make_patient()
        response = client.put(f"/api/patients/{patient_id}", json={"weight": 10.2, "symptoms": ["cough"]})
        assert response.status_code == 200
        row = store.find_by_id(PATIENTS, patient_id)
        assert row["weight"] == "10.2"
        assert row["symptoms"] == '["cough"]'
        assert row["name"] == "Asha Kumari"

    def test_null_fields_leave_values_unchanged(self, client, store, make_patient):
        """An explicit null in an update is ignored instead of blanking the column."""
        patient_id = make_patient()
        response = client.put(f"/api/patients/{patient_id}", json={"name": None, "type": None, "weight": 10.4})
        assert response.status_code == 200
        row = store.find_by_id(PATIENTS, patient_id)
        assert row["name"] == "Asha Kumari"
        assert row["type"] == "child"
        assert row["weight"] == "10.4"

    def test_update_unknown_patient(self, client):
        assert client.put("/api/patients/missing", json={"weight": 1}).status_code == 404

    def test_soft_delete_hides_patient_and_frees_bed(self, client, store, make_patient):
        patient_id = make_patient()
        bed = store.find_one(BEDS, {"number": "101"})
        client.put(f"/api/beds/{bed['id']}", json={"status": "occupied", "patientId": patient_id})

        assert client.delete(f"/api/patients/{patient_id}").status_code == 200
        assert client.get(f"/api/patients/{patient_id}").status_code == 404
        assert client.get("/api/patients").json() == []

        row = store.find_by_id(PATIENTS, patient_id)
        assert row["is_active"] == "false"
        assert row["bed_id"] == ""
        freed = store.find_by_id(BEDS, bed["id"])
        assert freed["status"] == "available"
        assert freed["patient_id"] == ""
