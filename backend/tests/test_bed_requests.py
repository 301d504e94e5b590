"""
Tests for bed requests: submission, supervisor approval with bed
allocation, and decline with referral.
"""
import pytest

from nrc.models import BED_REQUESTS, BEDS, NOTIFICATIONS, PATIENTS


@pytest.fixture
def submit_request(client):
    def _submit(patient_id, **overrides):
        payload = {
            "patientId": patient_id,
            "requestedBy": "EMP001",
            "urgencyLevel": "high",
            "medicalJustification": "MUAC below 11.5 cm with oedema",
            "currentCondition": "Severe wasting, poor appetite",
            "estimatedStayDuration": 14,
            **overrides,
        }
        response = client.post("/api/bed-requests", json=payload)
        assert response.status_code == 201, response.text
        return response.json()["id"]

    return _submit


class TestSubmit:
    def test_request_is_pending_and_supervisors_notified(self, client, store, make_patient, submit_request):
        request_id = submit_request(make_patient())
        request = client.get(f"/api/bed-requests/{request_id}").json()
        assert request["status"] == "pending"
        assert request["patientName"] == "Asha Kumari"
        assert request["estimatedStayDuration"] == 14

        alerts = [n for n in store.read_all(NOTIFICATIONS) if n["type"] == "bed_request"]
        assert len(alerts) == 1
        assert alerts[0]["user_role"] == "supervisor"
        assert alerts[0]["priority"] == "high"

    def test_unknown_patient(self, client):
        response = client.post("/api/bed-requests", json={
            "patientId": "missing", "requestedBy": "EMP001", "medicalJustification": "x",
            "currentCondition": "y", "estimatedStayDuration": 3,
        })
        assert response.status_code == 404

    def test_list_filter_by_status(self, client, make_patient, submit_request):
        request_id = submit_request(make_patient())
        assert [r["id"] for r in client.get("/api/bed-requests?status=pending").json()] == [request_id]
        assert client.get("/api/bed-requests?status=approved").json() == []


class TestApprove:
    def test_child_gets_pediatric_bed(self, client, store, make_patient, submit_request):
        patient_id = make_patient()
        request_id = submit_request(patient_id)

        response = client.post(f"/api/bed-requests/{request_id}/approve", json={})
        assert response.status_code == 200
        body = response.json()
        assert body["ward"] == "Pediatric"
        assert body["bedNumber"] == "101"

        bed = store.find_by_id(BEDS, body["bedId"])
        assert bed["status"] == "occupied"
        assert bed["patient_id"] == patient_id
        assert store.find_by_id(PATIENTS, patient_id)["bed_id"] == bed["id"]

        request = store.find_by_id(BED_REQUESTS, request_id)
        assert request["status"] == "approved"
        assert request["review_comments"] == "Approved for 14 days. Bed 101 assigned."
        assert request["reviewed_by"] == "SYSTEM"

        assigned = [n for n in store.read_all(NOTIFICATIONS) if n["type"] == "bed_assigned"]
        assert len(assigned) == 1
        assert assigned[0]["user_role"] == "hospital"

    def test_pregnant_woman_gets_maternity_bed(self, client, make_patient, submit_request):
        request_id = submit_request(make_patient(type="pregnant", age=22))
        body = client.post(f"/api/bed-requests/{request_id}/approve", json={}).json()
        assert body["ward"] == "Maternity"
        assert body["bedNumber"] == "201"

    def test_no_free_bed(self, client, store, make_patient, submit_request):
        for bed in store.find_by_field(BEDS, "ward", "Pediatric"):
            store.update(BEDS, bed["id"], {"status": "maintenance"})
        request_id = submit_request(make_patient())

        response = client.post(f"/api/bed-requests/{request_id}/approve", json={})
        assert response.status_code == 409
        assert response.json() == {"error": "No available beds in Pediatric ward"}
        assert store.find_by_id(BED_REQUESTS, request_id)["status"] == "pending"

    def test_cannot_approve_twice(self, client, make_patient, submit_request):
        request_id = submit_request(make_patient())
        client.post(f"/api/bed-requests/{request_id}/approve", json={})
        response = client.post(f"/api/bed-requests/{request_id}/approve", json={})
        assert response.status_code == 409

    def test_only_supervisors_review(self, client, worker_headers, make_patient, submit_request):
        request_id = submit_request(make_patient())
        response = client.post(f"/api/bed-requests/{request_id}/approve", json={}, headers=worker_headers)
        assert response.status_code == 403

    def test_reviewer_recorded_from_token(self, client, store, supervisor_headers, make_patient, submit_request):
        request_id = submit_request(make_patient())
        client.post(f"/api/bed-requests/{request_id}/approve", json={}, headers=supervisor_headers)
        assert store.find_by_id(BED_REQUESTS, request_id)["reviewed_by"] == "SUP001"


class TestDecline:
    def test_decline_with_referral(self, client, store, make_patient, submit_request):
        request_id = submit_request(make_patient())
        response = client.post(f"/api/bed-requests/{request_id}/decline", json={
            "reviewComments": "NRC full",
            "hospitalReferral": {
                "hospitalName": "District Hospital Baghpat",
                "referralReason": "Bed capacity",
                "urgencyLevel": "urgent",
            },
        })
        assert response.status_code == 200

        request = client.get(f"/api/bed-requests/{request_id}").json()
        assert request["status"] == "declined"
        assert request["reviewComments"] == "NRC full"
        assert request["hospitalReferral"]["hospitalName"] == "District Hospital Baghpat"
        assert request["hospitalReferral"]["referralDate"]

        declined = [n for n in store.read_all(NOTIFICATIONS) if n["type"] == "bed_request_declined"]
        assert len(declined) == 1
        assert declined[0]["user_role"] == "anganwadi_worker"
        assert "District Hospital Baghpat" in declined[0]["message"]

    def test_comments_required(self, client, make_patient, submit_request):
        request_id = submit_request(make_patient())
        response = client.post(f"/api/bed-requests/{request_id}/decline", json={})
        assert response.status_code == 400

    def test_cannot_decline_approved_request(self, client, make_patient, submit_request):
        request_id = submit_request(make_patient())
        client.post(f"/api/bed-requests/{request_id}/approve", json={})
        response = client.post(f"/api/bed-requests/{request_id}/decline", json={"reviewComments": "late"})
        assert response.status_code == 409
        assert response.json() == {"error": "Bed request is already approved"}
