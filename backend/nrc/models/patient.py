from nrc.models.base import Table

PATIENT_TYPES = ("child", "pregnant")
NUTRITION_STATUSES = ("normal", "malnourished", "severely_malnourished")

PATIENTS = Table(
    name="patients",
    columns=(
        "id", "registration_number", "aadhaar_number", "name", "age", "type",
        "pregnancy_week", "contact_number", "emergency_contact", "address",
        "weight", "height", "blood_pressure", "temperature", "hemoglobin",
        "nutrition_status", "medical_history", "symptoms", "documents", "photos",
        "remarks", "risk_score", "nutritional_deficiency", "bed_id",
        "last_visit_date", "next_visit_date", "registered_by", "registration_date",
        "is_active", "created_at", "updated_at",
    ),
    json_columns=frozenset({
        "medical_history", "symptoms", "documents", "photos", "nutritional_deficiency",
    }),
)
