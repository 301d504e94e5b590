from nrc.clock import today
from nrc.models import BED_REQUESTS, BEDS, NOTIFICATIONS, TREATMENT_TRACKERS, VISITS
from nrc.models.bed import BED_STATUSES
from nrc.models.patient import NUTRITION_STATUSES, PATIENT_TYPES
from nrc.services.patient_service import is_high_risk, patient_service
from nrc.storage import Store


class DashboardService:
    def get_stats(self, store: Store, role: str = "", high_risk_threshold: int = 80) -> dict:
        patients = patient_service.list_active(store)
        beds = store.read_all(BEDS)
        visits = store.read_all(VISITS)
        current_day = today()

        by_nutrition = dict.fromkeys(NUTRITION_STATUSES, 0)
        by_type = dict.fromkeys(PATIENT_TYPES, 0)
        for p in patients:
            if p["nutrition_status"] in by_nutrition:
                by_nutrition[p["nutrition_status"]] += 1
            if p["type"] in by_type:
                by_type[p["type"]] += 1

        bed_counts = dict.fromkeys(BED_STATUSES, 0)
        for bed in beds:
            bed_counts[bed["status"]] = bed_counts.get(bed["status"], 0) + 1

        stats = {
            "patients": {
                "total": len(patients),
                "byNutritionStatus": by_nutrition,
                "byType": by_type,
                "highRisk": sum(1 for p in patients if is_high_risk(p, high_risk_threshold)),
                "admitted": sum(1 for p in patients if p["bed_id"]),
            },
            "beds": {"total": len(beds), **bed_counts},
            "bedRequests": {
                "pending": len(store.find_by_field(BED_REQUESTS, "status", "pending")),
            },
            "visits": {
                "scheduledToday": sum(
                    1 for v in visits if v["scheduled_date"] == current_day and v["status"] == "scheduled"
                ),
                "missed": sum(1 for v in visits if v["status"] == "missed"),
            },
            "treatments": {
                "active": sum(1 for t in store.read_all(TREATMENT_TRACKERS) if not t["discharge_date"]),
            },
        }

        if role:
            stats["notifications"] = {
                "unread": sum(
                    1 for n in store.find_by_field(NOTIFICATIONS, "user_role", role)
                    if n["read_status"] != "true"
                ),
            }
        return stats


dashboard_service = DashboardService()
