from pydantic import Field
from datetime import date
from typing import Optional
from nrc.models.base import bool_cell, float_cell, int_cell, json_cell, str_cell
from nrc.schemas.base import CamelModel


class CenterCreate(CamelModel):
    name: str = Field(min_length=1)
    code: str = Field(min_length=1)
    location_area: str = Field(min_length=1)
    location_district: str = Field(min_length=1)
    location_state: str = Field(min_length=1)
    location_pincode: Optional[str] = None
    latitude: Optional[float] = Field(default=None, ge=-90, le=90)
    longitude: Optional[float] = Field(default=None, ge=-180, le=180)
    supervisor_name: Optional[str] = None
    supervisor_contact: Optional[str] = None
    supervisor_employee_id: Optional[str] = None
    capacity_pregnant_women: int = Field(default=0, ge=0)
    capacity_children: int = Field(default=0, ge=0)
    facilities: list[str] = []
    coverage_areas: list[str] = []
    established_date: Optional[date] = None


class CenterUpdate(CamelModel):
    name: Optional[str] = Field(default=None, min_length=1)
    location_area: Optional[str] = None
    location_district: Optional[str] = None
    location_state: Optional[str] = None
    location_pincode: Optional[str] = None
    latitude: Optional[float] = Field(default=None, ge=-90, le=90)
    longitude: Optional[float] = Field(default=None, ge=-180, le=180)
    supervisor_name: Optional[str] = None
    supervisor_contact: Optional[str] = None
    supervisor_employee_id: Optional[str] = None
    capacity_pregnant_women: Optional[int] = Field(default=None, ge=0)
    capacity_children: Optional[int] = Field(default=None, ge=0)
    facilities: Optional[list[str]] = None
    coverage_areas: Optional[list[str]] = None
    is_active: Optional[bool] = None


class CenterResponse(CamelModel):
    id: str
    name: str
    code: str
    location_area: str
    location_district: str
    location_state: str
    location_pincode: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    supervisor_name: Optional[str] = None
    supervisor_contact: Optional[str] = None
    supervisor_employee_id: Optional[str] = None
    capacity_pregnant_women: int = 0
    capacity_children: int = 0
    facilities: list[str] = []
    coverage_areas: list[str] = []
    established_date: Optional[str] = None
    is_active: bool = True
    worker_count: int = 0

    @classmethod
    def from_row(cls, row: dict, worker_count: int = 0) -> "CenterResponse":
        return cls(
            id=row["id"],
            name=row["name"],
            code=row["code"],
            location_area=row["location_area"],
            location_district=row["location_district"],
            location_state=row["location_state"],
            location_pincode=str_cell(row["location_pincode"]),
            latitude=float_cell(row["latitude"]),
            longitude=float_cell(row["longitude"]),
            supervisor_name=str_cell(row["supervisor_name"]),
            supervisor_contact=str_cell(row["supervisor_contact"]),
            supervisor_employee_id=str_cell(row["supervisor_employee_id"]),
            capacity_pregnant_women=int_cell(row["capacity_pregnant_women"]) or 0,
            capacity_children=int_cell(row["capacity_children"]) or 0,
            facilities=json_cell(row["facilities"]),
            coverage_areas=json_cell(row["coverage_areas"]),
            established_date=str_cell(row["established_date"]),
            is_active=bool_cell(row["is_active"]),
            worker_count=worker_count,
        )


class WorkerCreate(CamelModel):
    employee_id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    role: str = "anganwadi_worker"
    anganwadi_id: Optional[str] = None
    contact_number: str = Field(min_length=1)
    address: Optional[str] = None
    assigned_areas: list[str] = []
    qualifications: list[str] = []
    working_hours_start: Optional[str] = None
    working_hours_end: Optional[str] = None
    emergency_contact_name: Optional[str] = None
    emergency_contact_relation: Optional[str] = None
    emergency_contact_number: Optional[str] = None
    join_date: Optional[date] = None


class WorkerUpdate(CamelModel):
    name: Optional[str] = Field(default=None, min_length=1)
    role: Optional[str] = None
    anganwadi_id: Optional[str] = None
    contact_number: Optional[str] = None
    address: Optional[str] = None
    assigned_areas: Optional[list[str]] = None
    qualifications: Optional[list[str]] = None
    working_hours_start: Optional[str] = None
    working_hours_end: Optional[str] = None
    emergency_contact_name: Optional[str] = None
    emergency_contact_relation: Optional[str] = None
    emergency_contact_number: Optional[str] = None
    is_active: Optional[bool] = None


class WorkerResponse(CamelModel):
    id: str
    employee_id: str
    name: str
    role: str
    anganwadi_id: Optional[str] = None
    contact_number: str
    address: Optional[str] = None
    assigned_areas: list[str] = []
    qualifications: list[str] = []
    working_hours_start: Optional[str] = None
    working_hours_end: Optional[str] = None
    emergency_contact_name: Optional[str] = None
    emergency_contact_relation: Optional[str] = None
    emergency_contact_number: Optional[str] = None
    join_date: Optional[str] = None
    is_active: bool = True

    @classmethod
    def from_row(cls, row: dict) -> "WorkerResponse":
        return cls(
            id=row["id"],
            employee_id=row["employee_id"],
            name=row["name"],
            role=row["role"],
            anganwadi_id=str_cell(row["anganwadi_id"]),
            contact_number=row["contact_number"],
            address=str_cell(row["address"]),
            assigned_areas=json_cell(row["assigned_areas"]),
            qualifications=json_cell(row["qualifications"]),
            working_hours_start=str_cell(row["working_hours_start"]),
            working_hours_end=str_cell(row["working_hours_end"]),
            emergency_contact_name=str_cell(row["emergency_contact_name"]),
            emergency_contact_relation=str_cell(row["emergency_contact_relation"]),
            emergency_contact_number=str_cell(row["emergency_contact_number"]),
            join_date=str_cell(row["join_date"]),
            is_active=bool_cell(row["is_active"]),
        )
