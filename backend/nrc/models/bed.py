from nrc.models.base import Table

BED_STATUSES = ("available", "occupied", "maintenance")

# Ward a patient type is admitted to
WARD_FOR_PATIENT_TYPE = {
    "child": "Pediatric",
    "pregnant": "Maternity",
}

BEDS = Table(
    name="beds",
    columns=(
        "id", "hospital_id", "number", "ward", "status", "patient_id",
        "admission_date", "created_at", "updated_at",
    ),
)
