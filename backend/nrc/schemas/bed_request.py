from pydantic import Field
from datetime import date
from typing import Literal, Optional
from nrc.models.base import int_cell, json_cell, str_cell
from nrc.schemas.base import CamelModel

UrgencyLevel = Literal["low", "medium", "high", "critical"]


class HospitalReferral(CamelModel):
    hospital_name: str = Field(min_length=1)
    contact_number: Optional[str] = None
    referral_reason: str = Field(min_length=1)
    referral_date: Optional[date] = None
    urgency_level: Literal["routine", "urgent", "emergency"] = "urgent"


class BedRequestCreate(CamelModel):
    patient_id: str = Field(min_length=1)
    requested_by: str = Field(min_length=1)
    urgency_level: UrgencyLevel = "medium"
    medical_justification: str = Field(min_length=1)
    current_condition: str = Field(min_length=1)
    estimated_stay_duration: int = Field(ge=1)
    special_requirements: Optional[str] = None


class BedRequestApprove(CamelModel):
    reviewed_by: Optional[str] = None
    review_comments: Optional[str] = None


class BedRequestDecline(CamelModel):
    review_comments: str = Field(min_length=1)
    reviewed_by: Optional[str] = None
    hospital_referral: Optional[HospitalReferral] = None


class BedRequestResponse(CamelModel):
    id: str
    patient_id: str
    patient_name: Optional[str] = None
    requested_by: str
    request_date: str
    urgency_level: str
    medical_justification: str
    current_condition: str
    estimated_stay_duration: Optional[int] = None
    special_requirements: Optional[str] = None
    status: str
    reviewed_by: Optional[str] = None
    review_date: Optional[str] = None
    review_comments: Optional[str] = None
    hospital_referral: Optional[HospitalReferral] = None

    @classmethod
    def from_row(cls, row: dict, patient: dict = None) -> "BedRequestResponse":
        referral = json_cell(row["hospital_referral"], default={})
        return cls(
            id=row["id"],
            patient_id=row["patient_id"],
            patient_name=(patient or {}).get("name"),
            requested_by=row["requested_by"],
            request_date=row["request_date"],
            urgency_level=row["urgency_level"],
            medical_justification=row["medical_justification"],
            current_condition=row["current_condition"],
            estimated_stay_duration=int_cell(row["estimated_stay_duration"]),
            special_requirements=str_cell(row["special_requirements"]),
            status=row["status"],
            reviewed_by=str_cell(row["reviewed_by"]),
            review_date=str_cell(row["review_date"]),
            review_comments=str_cell(row["review_comments"]),
            hospital_referral=HospitalReferral(**referral) if referral else None,
        )
