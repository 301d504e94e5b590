from pydantic import Field
import datetime
from typing import Literal, Optional
from nrc.models.base import bool_cell
from nrc.schemas.base import CamelModel

Priority = Literal["low", "medium", "high", "critical"]


class NotificationCreate(CamelModel):
    user_role: str = Field(min_length=1)
    type: str = Field(min_length=1)
    title: str = Field(min_length=1)
    message: str = Field(min_length=1)
    priority: Priority = "medium"
    action_required: bool = False
    date: Optional[datetime.date] = None


class NotificationResponse(CamelModel):
    id: str
    user_role: str
    type: str
    title: str
    message: str
    priority: str
    action_required: bool
    read: bool
    date: str

    @classmethod
    def from_row(cls, row: dict) -> "NotificationResponse":
        return cls(
            id=row["id"],
            user_role=row["user_role"],
            type=row["type"],
            title=row["title"],
            message=row["message"],
            priority=row["priority"],
            action_required=bool_cell(row["action_required"]),
            read=bool_cell(row["read_status"]),
            date=row["date"],
        )
