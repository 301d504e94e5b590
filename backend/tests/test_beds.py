"""
Tests for bed listing, creation, hospitals and the paired bed/patient update.
"""
from nrc.models import BEDS, HOSPITALS, PATIENTS


def _bed(store, number):
    return store.find_one(BEDS, {"number": number})


class TestListing:
    def test_seeded_beds_join_hospital_by_code(self, client):
        """Seeded beds reference the hospital by code and still resolve its name."""
        beds = client.get("/api/beds").json()
        assert len(beds) == 6
        assert all(b["hospitalName"] == "District Hospital Meerut" for b in beds)

    def test_filters(self, client):
        available = client.get("/api/beds?status=available").json()
        assert {b["number"] for b in available} == {"101", "102", "201", "203"}
        maternity = client.get("/api/beds?ward=maternity").json()
        assert {b["number"] for b in maternity} == {"201", "202", "203"}

    def test_occupied_bed_shows_patient(self, client, store, make_patient):
        patient_id = make_patient()
        bed = _bed(store, "102")
        client.put(f"/api/beds/{bed['id']}", json={"status": "occupied", "patientId": patient_id})
        listed = next(b for b in client.get("/api/beds").json() if b["id"] == bed["id"])
        assert listed["patientName"] == "Asha Kumari"
        assert listed["patientType"] == "child"
        assert listed["nutritionStatus"] == "malnourished"


class TestCreate:
    def test_create_bed(self, client, store):
        response = client.post("/api/beds", json={"hospitalId": "HOSP001", "number": "301", "ward": "Pediatric"})
        assert response.status_code == 201
        assert store.find_by_id(BEDS, response.json()["id"])["status"] == "available"

    def test_duplicate_bed_rejected(self, client):
        response = client.post("/api/beds", json={"hospitalId": "HOSP001", "number": "101", "ward": "Pediatric"})
        assert response.status_code == 400
        assert "already exists" in response.json()["error"]

    def test_same_number_in_another_ward_is_allowed(self, client):
        response = client.post("/api/beds", json={"hospitalId": "HOSP001", "number": "101", "ward": "Maternity"})
        assert response.status_code == 201


class TestPairedUpdate:
    def test_assign_sets_both_sides(self, client, store, make_patient):
        patient_id = make_patient()
        bed = _bed(store, "101")
        response = client.put(
            f"/api/beds/{bed['id']}",
            json={"status": "occupied", "patientId": patient_id, "admissionDate": "2024-03-01"},
        )
        assert response.status_code == 200
        updated = store.find_by_id(BEDS, bed["id"])
        assert updated["status"] == "occupied"
        assert updated["patient_id"] == patient_id
        assert updated["admission_date"] == "2024-03-01"
        assert store.find_by_id(PATIENTS, patient_id)["bed_id"] == bed["id"]

    def test_moving_patient_frees_previous_bed(self, client, store, make_patient):
        patient_id = make_patient()
        first, second = _bed(store, "101"), _bed(store, "102")
        client.put(f"/api/beds/{first['id']}", json={"status": "occupied", "patientId": patient_id})
        client.put(f"/api/beds/{second['id']}", json={"status": "occupied", "patientId": patient_id})

        assert store.find_by_id(BEDS, first["id"])["status"] == "available"
        assert store.find_by_id(BEDS, first["id"])["patient_id"] == ""
        assert store.find_by_id(PATIENTS, patient_id)["bed_id"] == second["id"]

    def test_release_clears_patient(self, client, store, make_patient):
        patient_id = make_patient()
        bed = _bed(store, "101")
        client.put(f"/api/beds/{bed['id']}", json={"status": "occupied", "patientId": patient_id})
        response = client.put(f"/api/beds/{bed['id']}", json={"status": "available"})
        assert response.status_code == 200
        assert store.find_by_id(PATIENTS, patient_id)["bed_id"] == ""
        released = store.find_by_id(BEDS, bed["id"])
        assert released["patient_id"] == ""
        assert released["admission_date"] == ""

    def test_maintenance_without_patient_also_clears(self, client, store, make_patient):
        patient_id = make_patient()
        bed = _bed(store, "101")
        client.put(f"/api/beds/{bed['id']}", json={"status": "occupied", "patientId": patient_id})
        client.put(f"/api/beds/{bed['id']}", json={"status": "maintenance"})
        assert store.find_by_id(PATIENTS, patient_id)["bed_id"] == ""

    def test_bed_held_by_another_patient(self, client, store, make_patient):
        first, second = make_patient(name="First"), make_patient(name="Second")
        bed = _bed(store, "101")
        client.put(f"/api/beds/{bed['id']}", json={"status": "occupied", "patientId": first})
        response = client.put(f"/api/beds/{bed['id']}", json={"status": "occupied", "patientId": second})
        assert response.status_code == 400
        assert response.json() == {"error": "Bed already occupied"}
        assert store.find_by_id(PATIENTS, second)["bed_id"] == ""

    def test_unknown_bed_or_patient(self, client, store):
        assert client.put("/api/beds/missing", json={"status": "available"}).status_code == 404
        bed = _bed(store, "101")
        response = client.put(f"/api/beds/{bed['id']}", json={"status": "occupied", "patientId": "missing"})
        assert response.status_code == 404
        assert store.find_by_id(BEDS, bed["id"])["status"] == "available"

    def test_deleted_patient_cannot_take_a_bed(self, client, store, make_patient):
        patient_id = make_patient()
        client.delete(f"/api/patients/{patient_id}")
        bed = _bed(store, "101")
        response = client.put(f"/api/beds/{bed['id']}", json={"status": "occupied", "patientId": patient_id})
        assert response.status_code == 404
        assert store.find_by_id(BEDS, bed["id"])["status"] == "available"
        assert store.find_by_id(PATIENTS, patient_id)["bed_id"] == ""

    def test_invalid_status(self, client, store):
        bed = _bed(store, "101")
        assert client.put(f"/api/beds/{bed['id']}", json={"status": "broken"}).status_code == 400


class TestHospitals:
    def test_list_and_create(self, client, store):
        hospitals = client.get("/api/hospitals").json()
        assert [h["code"] for h in hospitals] == ["HOSP001"]
        assert hospitals[0]["nrcEquipped"] is True
        assert hospitals[0]["totalBeds"] == 20

        response = client.post("/api/hospitals", json={"name": "CHC Sardhana", "code": "CHC002", "totalBeds": 8})
        assert response.status_code == 201
        assert store.find_by_id(HOSPITALS, response.json()["id"])["nrc_equipped"] == "false"

    def test_duplicate_code(self, client):
        response = client.post("/api/hospitals", json={"name": "Again", "code": "HOSP001"})
        assert response.status_code == 400
        assert response.json() == {"error": "Hospital code already exists"}
