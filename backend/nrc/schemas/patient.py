from pydantic import Field
from datetime import date
from typing import Literal, Optional
from nrc.clock import days_from_today
from nrc.models.base import float_cell, int_cell, json_cell, str_cell
from nrc.schemas.base import CamelModel

PatientType = Literal["child", "pregnant"]
NutritionStatus = Literal["normal", "malnourished", "severely_malnourished"]


class PatientCreate(CamelModel):
    name: str = Field(min_length=1)
    age: int = Field(ge=0)
    type: PatientType
    pregnancy_week: Optional[int] = Field(default=None, ge=0, le=45)
    aadhaar_number: Optional[str] = None
    contact_number: str = Field(min_length=1)
    emergency_contact: Optional[str] = None
    address: str = Field(min_length=1)
    weight: float = Field(ge=0)
    height: float = Field(ge=0)
    blood_pressure: Optional[str] = None
    temperature: Optional[float] = None
    hemoglobin: Optional[float] = None
    nutrition_status: NutritionStatus
    medical_history: list[str] = []
    symptoms: list[str] = []
    documents: list[str] = []
    photos: list[str] = []
    remarks: Optional[str] = None
    risk_score: int = Field(default=0, ge=0, le=100)
    nutritional_deficiency: list[str] = []
    next_visit: Optional[date] = None
    registered_by: Optional[str] = None


class PatientUpdate(CamelModel):
    name: Optional[str] = Field(default=None, min_length=1)
    age: Optional[int] = Field(default=None, ge=0)
    type: Optional[PatientType] = None
    pregnancy_week: Optional[int] = Field(default=None, ge=0, le=45)
    aadhaar_number: Optional[str] = None
    contact_number: Optional[str] = None
    emergency_contact: Optional[str] = None
    address: Optional[str] = None
    weight: Optional[float] = Field(default=None, ge=0)
    height: Optional[float] = Field(default=None, ge=0)
    blood_pressure: Optional[str] = None
    temperature: Optional[float] = None
    hemoglobin: Optional[float] = None
    nutrition_status: Optional[NutritionStatus] = None
    medical_history: Optional[list[str]] = None
    symptoms: Optional[list[str]] = None
    documents: Optional[list[str]] = None
    photos: Optional[list[str]] = None
    remarks: Optional[str] = None
    risk_score: Optional[int] = Field(default=None, ge=0, le=100)
    nutritional_deficiency: Optional[list[str]] = None
    last_visit_date: Optional[date] = None
    next_visit_date: Optional[date] = None


class PatientResponse(CamelModel):
    id: str
    registration_number: str
    aadhaar_number: Optional[str] = None
    name: str
    age: Optional[int] = None
    type: str
    pregnancy_week: Optional[int] = None
    contact_number: str
    emergency_contact: Optional[str] = None
    address: str
    weight: Optional[float] = None
    height: Optional[float] = None
    blood_pressure: Optional[str] = None
    temperature: Optional[float] = None
    hemoglobin: Optional[float] = None
    nutrition_status: str
    medical_history: list[str] = []
    symptoms: list[str] = []
    documents: list[str] = []
    photos: list[str] = []
    remarks: Optional[str] = None
    risk_score: int = 0
    nutritional_deficiency: list[str] = []
    bed_id: Optional[str] = None
    last_visit_date: Optional[str] = None
    next_visit_date: Optional[str] = None
    registered_by: Optional[str] = None
    registration_date: str
    admission_date: str
    next_visit: str

    @classmethod
    def from_row(cls, row: dict) -> "PatientResponse":
        return cls(
            id=row["id"],
            registration_number=row["registration_number"],
            aadhaar_number=str_cell(row["aadhaar_number"]),
            name=row["name"],
            age=int_cell(row["age"]),
            type=row["type"],
            pregnancy_week=int_cell(row["pregnancy_week"]),
            contact_number=row["contact_number"],
            emergency_contact=str_cell(row["emergency_contact"]),
            address=row["address"],
            weight=float_cell(row["weight"]),
            height=float_cell(row["height"]),
            blood_pressure=str_cell(row["blood_pressure"]),
            temperature=float_cell(row["temperature"]),
            hemoglobin=float_cell(row["hemoglobin"]),
            nutrition_status=row["nutrition_status"],
            medical_history=json_cell(row["medical_history"]),
            symptoms=json_cell(row["symptoms"]),
            documents=json_cell(row["documents"]),
            photos=json_cell(row["photos"]),
            remarks=str_cell(row["remarks"]),
            risk_score=int_cell(row["risk_score"]) or 0,
            nutritional_deficiency=json_cell(row["nutritional_deficiency"]),
            bed_id=str_cell(row["bed_id"]),
            last_visit_date=str_cell(row["last_visit_date"]),
            next_visit_date=str_cell(row["next_visit_date"]),
            registered_by=str_cell(row["registered_by"]),
            registration_date=row["registration_date"],
            admission_date=row["registration_date"],
            next_visit=row["next_visit_date"] or days_from_today(7),
        )
