from pydantic import Field
from datetime import date
from typing import Literal, Optional
from nrc.models.base import str_cell
from nrc.schemas.base import CamelModel

VisitStatus = Literal["scheduled", "completed", "missed", "rescheduled"]


class VisitCreate(CamelModel):
    patient_id: str = Field(min_length=1)
    health_worker_id: str = Field(min_length=1)
    scheduled_date: date
    notes: Optional[str] = None


class VisitUpdate(CamelModel):
    status: Optional[VisitStatus] = None
    scheduled_date: Optional[date] = None
    actual_date: Optional[date] = None
    notes: Optional[str] = None


class VisitResponse(CamelModel):
    id: str
    patient_id: str
    patient_name: Optional[str] = None
    health_worker_id: str
    scheduled_date: str
    actual_date: Optional[str] = None
    status: str
    notes: Optional[str] = None

    @classmethod
    def from_row(cls, row: dict, patient: dict = None) -> "VisitResponse":
        return cls(
            id=row["id"],
            patient_id=row["patient_id"],
            patient_name=(patient or {}).get("name"),
            health_worker_id=row["health_worker_id"],
            scheduled_date=row["scheduled_date"],
            actual_date=str_cell(row["actual_date"]),
            status=row["status"],
            notes=str_cell(row["notes"]),
        )
