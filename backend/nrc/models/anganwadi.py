from nrc.models.base import Table

ANGANWADI_CENTERS = Table(
    name="anganwadi_centers",
    columns=(
        "id", "name", "code", "location_area", "location_district",
        "location_state", "location_pincode", "latitude", "longitude",
        "supervisor_name", "supervisor_contact", "supervisor_employee_id",
        "capacity_pregnant_women", "capacity_children", "facilities",
        "coverage_areas", "established_date", "is_active", "created_at", "updated_at",
    ),
    json_columns=frozenset({"facilities", "coverage_areas"}),
)
