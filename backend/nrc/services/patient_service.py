import logging
import uuid
from nrc.clock import as_date_str, days_from_today, epoch_millis, now_iso, today
from nrc.exceptions import RecordNotFound
from nrc.models import PATIENTS
from nrc.schemas.patient import PatientCreate, PatientUpdate
from nrc.services.bed_service import bed_service
from nrc.services.notification_service import notification_service
from nrc.storage import Store

logger = logging.getLogger(__name__)


def is_high_risk(patient: dict, threshold: int) -> bool:
    try:
        risk_score = int(patient.get("risk_score") or 0)
    except ValueError:
        risk_score = 0
    return risk_score > threshold or patient.get("nutrition_status") == "severely_malnourished"


class PatientService:
    def list_active(
        self,
        store: Store,
        search: str = "",
        patient_type: str = "",
        nutrition_status: str = "",
    ) -> list[dict]:
        patients = [p for p in store.read_all(PATIENTS) if p["is_active"] == "true"]

        if search:
            needle = search.lower()
            patients = [
                p for p in patients
                if needle in p["name"].lower() or needle in p["registration_number"].lower()
            ]
        if patient_type:
            patients = [p for p in patients if p["type"] == patient_type]
        if nutrition_status:
            patients = [p for p in patients if p["nutrition_status"] == nutrition_status]
        return patients

    def get(self, store: Store, patient_id: str) -> dict:
        patient = store.find_by_id(PATIENTS, patient_id)
        if not patient or patient["is_active"] != "true":
            raise RecordNotFound("Patient not found")
        return patient

    def create(self, store: Store, data: PatientCreate, registered_by: str, high_risk_threshold: int) -> dict:
        timestamp = now_iso()
        record = data.model_dump(exclude={"next_visit", "registered_by"})
        record.update({
            "id": str(uuid.uuid4()),
            "registration_number": f"NRC{epoch_millis()}",
            "emergency_contact": data.emergency_contact or data.contact_number,
            "bed_id": "",
            "last_visit_date": "",
            "next_visit_date": as_date_str(data.next_visit) or days_from_today(7),
            "registered_by": data.registered_by or registered_by,
            "registration_date": today(),
            "is_active": True,
            "created_at": timestamp,
            "updated_at": timestamp,
        })

        patient = store.append(PATIENTS, record)
        logger.info("Patient %s registered as %s", patient["id"], patient["registration_number"])

        if is_high_risk(patient, high_risk_threshold):
            logger.info("Creating high-risk alert for patient %s", patient["id"])
            notification_service.create(
                store,
                user_role="supervisor",
                type="high_risk_alert",
                title="High Risk Patient Registered",
                message=(
                    f"New high-risk patient {patient['name']} has been registered "
                    f"with {patient['nutrition_status']} status."
                ),
                priority="high",
                action_required=True,
            )
        return patient

    def update(self, store: Store, patient_id: str, data: PatientUpdate) -> dict:
        changes = data.model_dump(exclude_none=True)
        for key in ("last_visit_date", "next_visit_date"):
            if key in changes:
                changes[key] = as_date_str(changes[key])

        updated = store.update(PATIENTS, patient_id, changes)
        if not updated:
            raise RecordNotFound("Patient not found")
        return updated

    def deactivate(self, store: Store, patient_id: str) -> dict:
        patient = self.get(store, patient_id)
        bed_service.release_patient_bed(store, patient)
        return store.update(PATIENTS, patient_id, {"is_active": False})


patient_service = PatientService()
