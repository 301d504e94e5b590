from nrc.models.base import Table

APPETITE_LEVELS = ("poor", "moderate", "good")

TREATMENT_TRACKERS = Table(
    name="treatment_trackers",
    columns=(
        "id", "patient_id", "hospital_id", "admission_date", "discharge_date",
        "treatment_plan", "medicine_schedule", "doctor_remarks", "daily_progress",
        "lab_reports", "created_at", "updated_at",
    ),
    json_columns=frozenset({
        "treatment_plan", "medicine_schedule", "doctor_remarks", "daily_progress", "lab_reports",
    }),
)
