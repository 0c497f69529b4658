from hostel_allocation.schemas.common.base import BaseSchema, TimestampMixin
from hostel_allocation.schemas.common.enums import (
    ROOM_TYPE_CAPACITY,
    ApplicationStatus,
    Block,
    RoomStatus,
    RoomType,
    UserRole,
)

__all__ = [
    "BaseSchema",
    "TimestampMixin",
    "ROOM_TYPE_CAPACITY",
    "ApplicationStatus",
    "Block",
    "RoomStatus",
    "RoomType",
    "UserRole",
]
