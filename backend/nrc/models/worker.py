from nrc.models.base import Table

WORKERS = Table(
    name="workers",
    columns=(
        "id", "employee_id", "name", "role", "anganwadi_id", "contact_number",
        "address", "assigned_areas", "qualifications", "working_hours_start",
        "working_hours_end", "emergency_contact_name", "emergency_contact_relation",
        "emergency_contact_number", "join_date", "is_active", "created_at", "updated_at",
    ),
    json_columns=frozenset({"assigned_areas", "qualifications"}),
)
