from nrc.models.base import Table

PRIORITIES = ("low", "medium", "high", "critical")

NOTIFICATIONS = Table(
    name="notifications",
    columns=(
        "id", "user_role", "type", "title", "message", "priority",
        "action_required", "read_status", "date", "created_at",
    ),
)
