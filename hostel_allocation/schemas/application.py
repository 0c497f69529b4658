"""
Room application schemas.

`ApplicationCreate` is the student's form; `Application` is the stored
record the allocation workflow mutates.
"""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from hostel_allocation.schemas.common.base import BaseSchema, TimestampMixin
from hostel_allocation.schemas.common.enums import ApplicationStatus, Block, RoomType

__all__ = [
    "ApplicationCreate",
    "Application",
    "ApprovalRequest",
]


class ApplicationCreate(BaseSchema):
    """Form data a student submits to apply for a room."""

    name: str = Field(..., min_length=1, max_length=100, description="Student display name")
    student_id: str = Field(..., min_length=1, max_length=50, description="Student ID as typed on the form")
    department_name: str = Field(..., min_length=1, max_length=100)
    year: str = Field(..., min_length=1, max_length=20, examples=["1st", "3rd"])
    cgpa: float = Field(..., ge=0, le=4, description="Cumulative GPA on a 4-point scale")
    room_type: RoomType
    preferred_block: Block


class Application(BaseSchema, TimestampMixin):
    """A student's request for a hostel room."""

    id: str
    student_id: str = Field(..., description="Identifier of the submitting user")
    student_name: str
    room_type: RoomType
    preferred_block: Block
    cgpa: float = Field(..., ge=0, le=4)
    department_name: str
    year: str
    status: ApplicationStatus = ApplicationStatus.PENDING
    room_number: Optional[str] = None


class ApprovalRequest(BaseSchema):
    """Administrator decision to approve an application into a room."""

    room_number: str = Field(..., min_length=1, max_length=50)
