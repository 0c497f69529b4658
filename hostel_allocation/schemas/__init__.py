from hostel_allocation.schemas.application import Application, ApplicationCreate, ApprovalRequest
from hostel_allocation.schemas.auth import LoginRequest, RegisterRequest, TokenResponse, User
from hostel_allocation.schemas.common import (
    ROOM_TYPE_CAPACITY,
    ApplicationStatus,
    Block,
    RoomStatus,
    RoomType,
    UserRole,
)
from hostel_allocation.schemas.dashboard import DashboardStats
from hostel_allocation.schemas.room import AvailabilitySummary, Room, RoomCreate, RoomStatusUpdate

__all__ = [
    "Application",
    "ApplicationCreate",
    "ApprovalRequest",
    "LoginRequest",
    "RegisterRequest",
    "TokenResponse",
    "User",
    "ROOM_TYPE_CAPACITY",
    "ApplicationStatus",
    "Block",
    "RoomStatus",
    "RoomType",
    "UserRole",
    "DashboardStats",
    "AvailabilitySummary",
    "Room",
    "RoomCreate",
    "RoomStatusUpdate",
]
