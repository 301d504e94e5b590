import datetime
from pydantic import Field
from typing import Literal, Optional
from nrc.models.base import json_cell, str_cell
from nrc.schemas.base import CamelModel

Appetite = Literal["poor", "moderate", "good"]


class MedicineDose(CamelModel):
    medicine: str = Field(min_length=1)
    dosage: str = ""
    frequency: str = ""
    start_date: Optional[datetime.date] = None
    end_date: Optional[str] = None


class ProgressEntry(CamelModel):
    date: Optional[datetime.date] = None
    weight: float = Field(ge=0)
    appetite: Appetite = "moderate"
    notes: str = ""


class TreatmentCreate(CamelModel):
    patient_id: str = Field(min_length=1)
    hospital_id: str = Field(min_length=1)
    admission_date: Optional[datetime.date] = None
    treatment_plan: list[str] = []
    medicine_schedule: list[MedicineDose] = []
    doctor_remarks: list[str] = []
    daily_progress: list[ProgressEntry] = []
    lab_reports: list[dict] = []


class DischargeRequest(CamelModel):
    discharge_date: Optional[datetime.date] = None


class TreatmentResponse(CamelModel):
    id: str
    patient_id: str
    patient_name: Optional[str] = None
    hospital_id: str
    admission_date: str
    discharge_date: Optional[str] = None
    treatment_plan: list[str] = []
    medicine_schedule: list[MedicineDose] = []
    doctor_remarks: list[str] = []
    daily_progress: list[ProgressEntry] = []
    lab_reports: list[dict] = []
    is_active: bool = True

    @classmethod
    def from_row(cls, row: dict, patient: dict = None) -> "TreatmentResponse":
        return cls(
            id=row["id"],
            patient_id=row["patient_id"],
            patient_name=(patient or {}).get("name"),
            hospital_id=row["hospital_id"],
            admission_date=row["admission_date"],
            discharge_date=str_cell(row["discharge_date"]),
            treatment_plan=json_cell(row["treatment_plan"]),
            medicine_schedule=[MedicineDose(**dose) for dose in json_cell(row["medicine_schedule"])],
            doctor_remarks=json_cell(row["doctor_remarks"]),
            daily_progress=[ProgressEntry(**entry) for entry in json_cell(row["daily_progress"])],
            lab_reports=json_cell(row["lab_reports"]),
            is_active=not row["discharge_date"],
        )
