from pydantic import BaseModel, Field
from typing import Literal, Optional
from nrc.models.base import bool_cell
from nrc.schemas.base import CamelModel

Role = Literal["anganwadi_worker", "supervisor", "hospital", "admin"]


class LoginRequest(CamelModel):
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)
    employee_id: str = Field(min_length=1)


class LoginUser(BaseModel):
    id: str
    employee_id: str
    name: str
    role: str
    contact_number: str = ""
    email: str = ""


class LoginResponse(BaseModel):
    token: str
    user: LoginUser


class UserCreate(CamelModel):
    employee_id: str = Field(min_length=1)
    username: str = Field(min_length=1)
    password: str = Field(min_length=6)
    name: str = Field(min_length=1)
    role: Role
    contact_number: Optional[str] = None
    email: Optional[str] = None
    created_by: Optional[str] = None


class UserUpdate(CamelModel):
    name: Optional[str] = Field(default=None, min_length=1)
    role: Optional[Role] = None
    contact_number: Optional[str] = None
    email: Optional[str] = None
    is_active: Optional[bool] = None
    password: Optional[str] = Field(default=None, min_length=6)


class UserResponse(BaseModel):
    id: str
    employee_id: str
    username: str
    name: str
    role: str
    contact_number: str
    email: str
    is_active: bool
    created_at: str

    @classmethod
    def from_row(cls, row: dict) -> "UserResponse":
        return cls(
            id=row["id"],
            employee_id=row["employee_id"],
            username=row["username"],
            name=row["name"],
            role=row["role"],
            contact_number=row["contact_number"],
            email=row["email"],
            is_active=bool_cell(row["is_active"]),
            created_at=row["created_at"],
        )
