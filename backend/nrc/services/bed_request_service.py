"""
Bed requests raised by anganwadi workers and reviewed by supervisors.

Approval allocates the first free bed in the ward matching the patient type
through the bed service, so the bed and patient rows change together.
"""

import logging
import uuid
from nrc.clock import now_iso, today
from nrc.exceptions import InvalidState, RecordNotFound
from nrc.models import BED_REQUESTS
from nrc.models.bed import WARD_FOR_PATIENT_TYPE
from nrc.schemas.bed_request import BedRequestApprove, BedRequestCreate, BedRequestDecline
from nrc.services.bed_service import bed_service
from nrc.services.notification_service import notification_service
from nrc.services.patient_service import patient_service
from nrc.storage import Store

logger = logging.getLogger(__name__)


class BedRequestService:
    def list_requests(self, store: Store, status: str = "") -> list[dict]:
        requests = store.read_all(BED_REQUESTS)
        if status:
            requests = [r for r in requests if r["status"] == status]
        return requests

    def get(self, store: Store, request_id: str) -> dict:
        request = store.find_by_id(BED_REQUESTS, request_id)
        if not request:
            raise RecordNotFound("Bed request not found")
        return request

    def _get_pending(self, store: Store, request_id: str) -> dict:
        request = self.get(store, request_id)
        if request["status"] != "pending":
            raise InvalidState(f"Bed request is already {request['status']}")
        return request

    def create(self, store: Store, data: BedRequestCreate) -> dict:
        patient = patient_service.get(store, data.patient_id)

        timestamp = now_iso()
        request = store.append(BED_REQUESTS, {
            **data.model_dump(),
            "id": str(uuid.uuid4()),
            "request_date": today(),
            "status": "pending",
            "reviewed_by": "",
            "review_date": "",
            "review_comments": "",
            "hospital_referral": "",
            "created_at": timestamp,
            "updated_at": timestamp,
        })

        notification_service.create(
            store,
            user_role="supervisor",
            type="bed_request",
            title="New Bed Request",
            message=(
                f"Bed requested for {patient['name']} by {data.requested_by} "
                f"({data.urgency_level} urgency): {data.current_condition}"
            ),
            priority=data.urgency_level,
            action_required=True,
        )
        logger.info("Bed request %s created for patient %s", request["id"], patient["id"])
        return request

    def approve(self, store: Store, request_id: str, data: BedRequestApprove, reviewer: str) -> tuple[dict, dict]:
        with store.lock:
            request = self._get_pending(store, request_id)
            patient = patient_service.get(store, request["patient_id"])

            ward = WARD_FOR_PATIENT_TYPE.get(patient["type"], "Pediatric")
            bed = bed_service.find_available_bed(store, ward)
            if not bed:
                raise InvalidState(f"No available beds in {ward} ward")

            bed = bed_service.update_bed(store, bed["id"], "occupied", patient["id"], today())
            comments = data.review_comments or (
                f"Approved for {request['estimated_stay_duration']} days. Bed {bed['number']} assigned."
            )
            request = store.update(BED_REQUESTS, request_id, {
                "status": "approved",
                "reviewed_by": data.reviewed_by or reviewer,
                "review_date": today(),
                "review_comments": comments,
            })

        notification_service.create(
            store,
            user_role="hospital",
            type="bed_assigned",
            title="Bed Assigned",
            message=f"Bed {bed['number']} ({ward} ward) assigned to {patient['name']}.",
            priority="high" if request["urgency_level"] in ("high", "critical") else "medium",
            action_required=True,
        )
        logger.info("Bed request %s approved with bed %s", request_id, bed["id"])
        return request, bed

    def decline(self, store: Store, request_id: str, data: BedRequestDecline, reviewer: str) -> dict:
        referral = ""
        if data.hospital_referral:
            referral = data.hospital_referral.model_dump(mode="json")
            referral["referral_date"] = referral["referral_date"] or today()

        with store.lock:
            self._get_pending(store, request_id)
            request = store.update(BED_REQUESTS, request_id, {
                "status": "declined",
                "reviewed_by": data.reviewed_by or reviewer,
                "review_date": today(),
                "review_comments": data.review_comments,
                "hospital_referral": referral,
            })

        destination = f" Referred to {data.hospital_referral.hospital_name}." if data.hospital_referral else ""
        notification_service.create(
            store,
            user_role="anganwadi_worker",
            type="bed_request_declined",
            title="Bed Request Declined",
            message=f"Bed request {request_id} was declined: {data.review_comments}.{destination}",
            priority="medium",
            action_required=bool(data.hospital_referral),
        )
        logger.info("Bed request %s declined", request_id)
        return request


bed_request_service = BedRequestService()
