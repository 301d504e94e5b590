from nrc.models.base import Table

VISIT_STATUSES = ("scheduled", "completed", "missed", "rescheduled")

VISITS = Table(
    name="visits",
    columns=(
        "id", "patient_id", "health_worker_id", "scheduled_date", "actual_date",
        "status", "notes", "created_at", "updated_at",
    ),
)
