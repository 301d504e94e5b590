import logging
import uuid
from nrc.clock import as_date_str, now_iso, today
from nrc.exceptions import RecordNotFound
from nrc.models import MEDICAL_RECORDS, PATIENTS
from nrc.schemas.medical_record import MedicalRecordCreate
from nrc.services.patient_service import patient_service
from nrc.storage import Store

logger = logging.getLogger(__name__)

# Measurements copied onto the patient row when a record carries them
TRACKED_MEASUREMENTS = ("weight", "height", "hemoglobin")


class MedicalRecordService:
    def list_records(self, store: Store, patient_id: str = "") -> list[dict]:
        if patient_id:
            records = store.find_by_field(MEDICAL_RECORDS, "patient_id", patient_id)
        else:
            records = store.read_all(MEDICAL_RECORDS)
        return sorted(records, key=lambda r: r["visit_date"], reverse=True)

    def get(self, store: Store, record_id: str) -> dict:
        record = store.find_by_id(MEDICAL_RECORDS, record_id)
        if not record:
            raise RecordNotFound("Medical record not found")
        return record

    def create(self, store: Store, data: MedicalRecordCreate) -> dict:
        patient = patient_service.get(store, data.patient_id)

        timestamp = now_iso()
        record = data.model_dump()
        record.update({
            "id": str(uuid.uuid4()),
            "visit_date": as_date_str(data.visit_date) or today(),
            "next_visit_date": as_date_str(data.next_visit_date),
            "created_at": timestamp,
            "updated_at": timestamp,
        })
        record = store.append(MEDICAL_RECORDS, record)

        patient_changes = {"last_visit_date": record["visit_date"]}
        if record["next_visit_date"]:
            patient_changes["next_visit_date"] = record["next_visit_date"]
        for measurement in TRACKED_MEASUREMENTS:
            if record[measurement]:
                patient_changes[measurement] = record[measurement]
        store.update(PATIENTS, patient["id"], patient_changes)

        logger.info("Medical record %s added for patient %s", record["id"], patient["id"])
        return record


medical_record_service = MedicalRecordService()
