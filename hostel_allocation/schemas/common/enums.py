"""
All enumeration types used across the application.

These enums are the closed sets of the allocation domain: room types,
blocks, and the application / room status values.
"""

from enum import Enum
from typing import Dict

__all__ = [
    "UserRole",
    "RoomType",
    "Block",
    "ApplicationStatus",
    "RoomStatus",
    "ROOM_TYPE_CAPACITY",
]


class UserRole(str, Enum):
    """User role enumeration."""

    STUDENT = "student"
    ADMIN = "admin"


class RoomType(str, Enum):
    """Room type enumeration."""

    SINGLE = "Single"
    DOUBLE = "Double"
    TRIPLE = "Triple"
    QUAD = "Quad"

    @property
    def max_capacity(self) -> int:
        return ROOM_TYPE_CAPACITY[self]


class Block(str, Enum):
    """Hostel block enumeration."""

    A = "Block A"
    B = "Block B"
    C = "Block C"
    D = "Block D"


class ApplicationStatus(str, Enum):
    """Room application status enumeration."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class RoomStatus(str, Enum):
    """Room status enumeration."""

    AVAILABLE = "available"
    OCCUPIED = "occupied"
    MAINTENANCE = "maintenance"


ROOM_TYPE_CAPACITY: Dict[RoomType, int] = {
    RoomType.SINGLE: 1,
    RoomType.DOUBLE: 2,
    RoomType.TRIPLE: 3,
    RoomType.QUAD: 4,
}
