from nrc.models.base import Table

HOSPITALS = Table(
    name="hospitals",
    columns=(
        "id", "name", "code", "address", "contact_number", "total_beds",
        "nrc_equipped", "created_at",
    ),
)
