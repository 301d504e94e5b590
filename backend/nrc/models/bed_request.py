from nrc.models.base import Table

REQUEST_STATUSES = ("pending", "approved", "declined")
URGENCY_LEVELS = ("low", "medium", "high", "critical")

BED_REQUESTS = Table(
    name="bed_requests",
    columns=(
        "id", "patient_id", "requested_by", "request_date", "urgency_level",
        "medical_justification", "current_condition", "estimated_stay_duration",
        "special_requirements", "status", "reviewed_by", "review_date",
        "review_comments", "hospital_referral", "created_at", "updated_at",
    ),
    json_columns=frozenset({"hospital_referral"}),
)
