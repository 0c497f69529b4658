"""
Room schemas with capacity/occupancy validation.
"""

from __future__ import annotations

from typing import Optional

from pydantic import Field, model_validator

from hostel_allocation.schemas.common.base import BaseSchema
from hostel_allocation.schemas.common.enums import ROOM_TYPE_CAPACITY, Block, RoomStatus, RoomType

__all__ = [
    "RoomCreate",
    "Room",
    "RoomStatusUpdate",
    "AvailabilitySummary",
]


class RoomCreate(BaseSchema):
    """
    Administrator input for a new room.

    Capacity defaults to the bound of the room type and may not exceed
    it; occupancy may not exceed capacity.
    """

    number: str = Field(..., min_length=1, max_length=50, examples=["A-101"])
    block: Block
    type: RoomType
    capacity: Optional[int] = Field(default=None, ge=1)
    occupancy: int = Field(default=0, ge=0)
    status: RoomStatus = RoomStatus.AVAILABLE

    @model_validator(mode="after")
    def check_capacity(self) -> "RoomCreate":
        bound = ROOM_TYPE_CAPACITY[self.type]
        if self.capacity is None:
            # Direct __dict__ write skips validate_assignment recursion
            self.__dict__["capacity"] = bound
        elif self.capacity > bound:
            raise ValueError(f"capacity of a {self.type.value} room cannot exceed {bound}")
        if self.occupancy > self.capacity:
            raise ValueError("occupancy cannot exceed capacity")
        return self


class Room(BaseSchema):
    """A physical hostel room in the inventory."""

    id: str
    number: str
    block: Block
    type: RoomType
    capacity: int = Field(..., ge=1)
    occupancy: int = Field(default=0, ge=0)
    status: RoomStatus = RoomStatus.AVAILABLE

    @model_validator(mode="after")
    def check_occupancy(self) -> "Room":
        if self.occupancy > self.capacity:
            raise ValueError("occupancy cannot exceed capacity")
        return self


class RoomStatusUpdate(BaseSchema):
    status: RoomStatus


class AvailabilitySummary(BaseSchema):
    """Total vs. available room count for one (block, type) pair."""

    block: Block
    room_type: RoomType
    total: int = Field(..., ge=0)
    available: int = Field(..., ge=0)
