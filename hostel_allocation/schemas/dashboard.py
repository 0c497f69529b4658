from __future__ import annotations

from pydantic import Field

from hostel_allocation.schemas.common.base import BaseSchema

__all__ = ["DashboardStats"]


class DashboardStats(BaseSchema):
    """Application and room counts shown on the admin dashboard."""

    total_applications: int = Field(0, ge=0)
    pending_applications: int = Field(0, ge=0)
    approved_applications: int = Field(0, ge=0)
    rejected_applications: int = Field(0, ge=0)
    total_rooms: int = Field(0, ge=0)
    available_rooms: int = Field(0, ge=0)
    occupied_rooms: int = Field(0, ge=0)
    maintenance_rooms: int = Field(0, ge=0)
