from nrc.models.base import Table

ROLES = ("anganwadi_worker", "supervisor", "hospital", "admin")

USERS = Table(
    name="users",
    columns=(
        "id", "employee_id", "username", "password_hash", "name", "role",
        "contact_number", "email", "is_active", "created_by", "created_at", "updated_at",
    ),
)
