from pydantic import Field
from datetime import date
from typing import Literal, Optional
from nrc.models.base import bool_cell, float_cell, int_cell, json_cell, str_cell
from nrc.schemas.base import CamelModel


class MedicalRecordCreate(CamelModel):
    patient_id: str = Field(min_length=1)
    visit_date: Optional[date] = None
    visit_type: str = "routine"
    health_worker_id: str = Field(min_length=1)
    weight: Optional[float] = Field(default=None, ge=0)
    height: Optional[float] = Field(default=None, ge=0)
    temperature: Optional[float] = None
    blood_pressure: Optional[str] = None
    pulse: Optional[int] = Field(default=None, ge=0)
    respiratory_rate: Optional[int] = Field(default=None, ge=0)
    oxygen_saturation: Optional[float] = Field(default=None, ge=0, le=100)
    symptoms: list[str] = []
    diagnosis: Optional[str] = None
    treatment: Optional[str] = None
    medications: list[str] = []
    appetite: Optional[Literal["poor", "moderate", "good"]] = None
    food_intake: Optional[str] = None
    supplements: list[str] = []
    diet_plan: Optional[str] = None
    hemoglobin: Optional[float] = None
    blood_sugar: Optional[float] = None
    protein_level: Optional[float] = None
    notes: Optional[str] = None
    next_visit_date: Optional[date] = None
    follow_up_required: bool = False


class MedicalRecordResponse(CamelModel):
    id: str
    patient_id: str
    visit_date: str
    visit_type: str
    health_worker_id: str
    weight: Optional[float] = None
    height: Optional[float] = None
    temperature: Optional[float] = None
    blood_pressure: Optional[str] = None
    pulse: Optional[int] = None
    respiratory_rate: Optional[int] = None
    oxygen_saturation: Optional[float] = None
    symptoms: list[str] = []
    diagnosis: Optional[str] = None
    treatment: Optional[str] = None
    medications: list[str] = []
    appetite: Optional[str] = None
    food_intake: Optional[str] = None
    supplements: list[str] = []
    diet_plan: Optional[str] = None
    hemoglobin: Optional[float] = None
    blood_sugar: Optional[float] = None
    protein_level: Optional[float] = None
    notes: Optional[str] = None
    next_visit_date: Optional[str] = None
    follow_up_required: bool = False

    @classmethod
    def from_row(cls, row: dict) -> "MedicalRecordResponse":
        return cls(
            id=row["id"],
            patient_id=row["patient_id"],
            visit_date=row["visit_date"],
            visit_type=row["visit_type"],
            health_worker_id=row["health_worker_id"],
            weight=float_cell(row["weight"]),
            height=float_cell(row["height"]),
            temperature=float_cell(row["temperature"]),
            blood_pressure=str_cell(row["blood_pressure"]),
            pulse=int_cell(row["pulse"]),
            respiratory_rate=int_cell(row["respiratory_rate"]),
            oxygen_saturation=float_cell(row["oxygen_saturation"]),
            symptoms=json_cell(row["symptoms"]),
            diagnosis=str_cell(row["diagnosis"]),
            treatment=str_cell(row["treatment"]),
            medications=json_cell(row["medications"]),
            appetite=str_cell(row["appetite"]),
            food_intake=str_cell(row["food_intake"]),
            supplements=json_cell(row["supplements"]),
            diet_plan=str_cell(row["diet_plan"]),
            hemoglobin=float_cell(row["hemoglobin"]),
            blood_sugar=float_cell(row["blood_sugar"]),
            protein_level=float_cell(row["protein_level"]),
            notes=str_cell(row["notes"]),
            next_visit_date=str_cell(row["next_visit_date"]),
            follow_up_required=bool_cell(row["follow_up_required"]),
        )
