import logging
import uuid
from typing import Optional
from nrc.clock import as_date_str, now_iso, today
from nrc.exceptions import InvalidState, RecordNotFound
from nrc.models import PATIENTS, TREATMENT_TRACKERS
from nrc.models.base import json_cell
from nrc.schemas.treatment import ProgressEntry, TreatmentCreate
from nrc.services.bed_service import bed_service
from nrc.services.patient_service import patient_service
from nrc.storage import Store

logger = logging.getLogger(__name__)


class TreatmentService:
    def list_trackers(self, store: Store, active: Optional[bool] = None) -> list[dict]:
        trackers = store.read_all(TREATMENT_TRACKERS)
        if active is not None:
            trackers = [t for t in trackers if (not t["discharge_date"]) == active]
        return trackers

    def get(self, store: Store, tracker_id: str) -> dict:
        tracker = store.find_by_id(TREATMENT_TRACKERS, tracker_id)
        if not tracker:
            raise RecordNotFound("Treatment tracker not found")
        return tracker

    def create(self, store: Store, data: TreatmentCreate) -> dict:
        patient = patient_service.get(store, data.patient_id)

        progress = [self._progress_entry(entry) for entry in data.daily_progress]
        timestamp = now_iso()
        tracker = store.append(TREATMENT_TRACKERS, {
            "id": str(uuid.uuid4()),
            "patient_id": patient["id"],
            "hospital_id": data.hospital_id,
            "admission_date": as_date_str(data.admission_date) or today(),
            "discharge_date": "",
            "treatment_plan": data.treatment_plan,
            "medicine_schedule": [dose.model_dump(mode="json") for dose in data.medicine_schedule],
            "doctor_remarks": data.doctor_remarks,
            "daily_progress": progress,
            "lab_reports": data.lab_reports,
            "created_at": timestamp,
            "updated_at": timestamp,
        })
        logger.info("Treatment tracker %s opened for patient %s", tracker["id"], patient["id"])
        return tracker

    @staticmethod
    def _progress_entry(entry: ProgressEntry) -> dict:
        record = entry.model_dump(mode="json")
        record["date"] = record["date"] or today()
        return record

    def add_progress(self, store: Store, tracker_id: str, entry: ProgressEntry) -> dict:
        with store.lock:
            tracker = self.get(store, tracker_id)
            if tracker["discharge_date"]:
                raise InvalidState("Patient has already been discharged")
            patient_service.get(store, tracker["patient_id"])

            progress = json_cell(tracker["daily_progress"])
            progress.append(self._progress_entry(entry))
            updated = store.update(TREATMENT_TRACKERS, tracker_id, {"daily_progress": progress})
            store.update(PATIENTS, tracker["patient_id"], {"weight": entry.weight})
        return updated

    def discharge(self, store: Store, tracker_id: str, discharge_date=None) -> dict:
        with store.lock:
            tracker = self.get(store, tracker_id)
            if tracker["discharge_date"]:
                raise InvalidState("Patient has already been discharged")

            updated = store.update(TREATMENT_TRACKERS, tracker_id, {
                "discharge_date": as_date_str(discharge_date) or today(),
            })
            # A soft-deleted patient already gave up their bed; the tracker still closes
            patient = store.find_by_id(PATIENTS, tracker["patient_id"])
            if patient and patient["is_active"] == "true":
                bed_service.release_patient_bed(store, patient)
        logger.info("Patient %s discharged (tracker %s)", tracker["patient_id"], tracker_id)
        return updated


treatment_service = TreatmentService()
