import logging
import uuid
from nrc.clock import as_date_str, now_iso, today
from nrc.exceptions import RecordNotFound
from nrc.models import PATIENTS, VISITS
from nrc.schemas.visit import VisitCreate, VisitUpdate
from nrc.services.notification_service import notification_service
from nrc.services.patient_service import patient_service
from nrc.storage import Store

logger = logging.getLogger(__name__)


class VisitService:
    def list_visits(self, store: Store, patient_id: str = "", status: str = "", scheduled_date: str = "") -> list[dict]:
        visits = store.read_all(VISITS)
        if patient_id:
            visits = [v for v in visits if v["patient_id"] == patient_id]
        if status:
            visits = [v for v in visits if v["status"] == status]
        if scheduled_date:
            visits = [v for v in visits if v["scheduled_date"] == scheduled_date]
        return sorted(visits, key=lambda v: v["scheduled_date"])

    def get(self, store: Store, visit_id: str) -> dict:
        visit = store.find_by_id(VISITS, visit_id)
        if not visit:
            raise RecordNotFound("Visit not found")
        return visit

    def schedule(self, store: Store, data: VisitCreate) -> dict:
        patient = patient_service.get(store, data.patient_id)
        scheduled_date = as_date_str(data.scheduled_date)

        timestamp = now_iso()
        visit = store.append(VISITS, {
            "id": str(uuid.uuid4()),
            "patient_id": patient["id"],
            "health_worker_id": data.health_worker_id,
            "scheduled_date": scheduled_date,
            "actual_date": "",
            "status": "scheduled",
            "notes": data.notes or "",
            "created_at": timestamp,
            "updated_at": timestamp,
        })
        store.update(PATIENTS, patient["id"], {"next_visit_date": scheduled_date})
        logger.info("Visit %s scheduled for patient %s on %s", visit["id"], patient["id"], scheduled_date)
        return visit

    def update(self, store: Store, visit_id: str, data: VisitUpdate) -> dict:
        visit = self.get(store, visit_id)
        changes = data.model_dump(exclude_none=True)
        for key in ("scheduled_date", "actual_date"):
            if key in changes:
                changes[key] = as_date_str(changes[key])

        status = changes.get("status")
        if status == "completed" and not changes.get("actual_date"):
            changes["actual_date"] = today()

        updated = store.update(VISITS, visit_id, changes)
        patient = store.find_by_id(PATIENTS, visit["patient_id"])
        if not patient:
            return updated

        if status == "completed":
            store.update(PATIENTS, patient["id"], {"last_visit_date": updated["actual_date"]})
        elif status == "missed":
            notification_service.create(
                store,
                user_role="supervisor",
                type="missed_visit",
                title="Missed Visit",
                message=(
                    f"Scheduled visit for {patient['name']} on {updated['scheduled_date']} "
                    f"was missed by health worker {updated['health_worker_id']}."
                ),
                priority="medium",
                action_required=True,
            )
        elif status == "rescheduled" and "scheduled_date" in changes:
            store.update(PATIENTS, patient["id"], {"next_visit_date": updated["scheduled_date"]})

        return updated


visit_service = VisitService()
