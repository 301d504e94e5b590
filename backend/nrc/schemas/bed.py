from pydantic import Field
from datetime import date
from typing import Literal, Optional
from nrc.models.base import bool_cell, int_cell, str_cell
from nrc.schemas.base import CamelModel

BedStatus = Literal["available", "occupied", "maintenance"]


class BedCreate(CamelModel):
    hospital_id: str = Field(min_length=1)
    number: str = Field(min_length=1)
    ward: str = Field(min_length=1)
    status: BedStatus = "available"


class BedUpdate(CamelModel):
    status: BedStatus
    patient_id: Optional[str] = None
    admission_date: Optional[date] = None


class BedResponse(CamelModel):
    id: str
    hospital_id: str
    number: str
    ward: str
    status: str
    patient_id: Optional[str] = None
    admission_date: Optional[str] = None
    patient_name: Optional[str] = None
    patient_type: Optional[str] = None
    nutrition_status: Optional[str] = None
    hospital_name: Optional[str] = None

    @classmethod
    def from_row(cls, row: dict, patient: dict = None, hospital: dict = None) -> "BedResponse":
        patient = patient or {}
        hospital = hospital or {}
        return cls(
            id=row["id"],
            hospital_id=row["hospital_id"],
            number=row["number"],
            ward=row["ward"],
            status=row["status"],
            patient_id=str_cell(row["patient_id"]),
            admission_date=str_cell(row["admission_date"]),
            patient_name=patient.get("name"),
            patient_type=patient.get("type"),
            nutrition_status=patient.get("nutrition_status"),
            hospital_name=hospital.get("name"),
        )


class HospitalCreate(CamelModel):
    name: str = Field(min_length=1)
    code: str = Field(min_length=1)
    address: Optional[str] = None
    contact_number: Optional[str] = None
    total_beds: int = Field(default=0, ge=0)
    nrc_equipped: bool = False


class HospitalResponse(CamelModel):
    id: str
    name: str
    code: str
    address: Optional[str] = None
    contact_number: Optional[str] = None
    total_beds: int = 0
    nrc_equipped: bool = False
    created_at: str

    @classmethod
    def from_row(cls, row: dict) -> "HospitalResponse":
        return cls(
            id=row["id"],
            name=row["name"],
            code=row["code"],
            address=str_cell(row["address"]),
            contact_number=str_cell(row["contact_number"]),
            total_beds=int_cell(row["total_beds"]) or 0,
            nrc_equipped=bool_cell(row["nrc_equipped"]),
            created_at=row["created_at"],
        )
