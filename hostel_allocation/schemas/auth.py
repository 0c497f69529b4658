"""
Demo authentication schemas.
"""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from hostel_allocation.schemas.common.base import BaseSchema
from hostel_allocation.schemas.common.enums import UserRole

__all__ = [
    "User",
    "LoginRequest",
    "RegisterRequest",
    "TokenResponse",
]


class User(BaseSchema):
    id: str
    name: str
    email: str
    role: UserRole
    student_id: Optional[str] = None

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN


class LoginRequest(BaseSchema):
    email: str = Field(..., min_length=3, max_length=255)
    password: str = Field(..., min_length=1)


class RegisterRequest(BaseSchema):
    name: str = Field(..., min_length=1, max_length=100)
    email: str = Field(..., min_length=3, max_length=255)
    password: str = Field(..., min_length=1)
    role: UserRole = UserRole.STUDENT
    student_id: Optional[str] = None


class TokenResponse(BaseSchema):
    access_token: str
    token_type: str = "bearer"
    user: User
