"""
Demo inventory, applications and users.

Loaded into empty stores at startup when SEED_DEMO_DATA is enabled, so a
fresh instance has something to browse and allocate.
"""

import uuid
from datetime import datetime, timezone
from typing import List, Tuple

from hostel_allocation.config.logging import get_logger
from hostel_allocation.repositories.base import ApplicationStore, RoomStore
from hostel_allocation.schemas.application import Application
from hostel_allocation.schemas.auth import User
from hostel_allocation.schemas.common.enums import (
    ApplicationStatus,
    Block,
    RoomStatus,
    RoomType,
    UserRole,
)
from hostel_allocation.schemas.room import Room

logger = get_logger(__name__)

# (number, block, type, occupancy, status); capacity follows the type
DEMO_ROOMS: List[Tuple[str, Block, RoomType, int, RoomStatus]] = [
    ("A-101", Block.A, RoomType.SINGLE, 1, RoomStatus.OCCUPIED),
    ("A-102", Block.A, RoomType.SINGLE, 0, RoomStatus.AVAILABLE),
    ("A-103", Block.A, RoomType.SINGLE, 0, RoomStatus.AVAILABLE),
    ("A-104", Block.A, RoomType.SINGLE, 1, RoomStatus.OCCUPIED),
    ("A-105", Block.A, RoomType.SINGLE, 0, RoomStatus.MAINTENANCE),
    ("A-201", Block.A, RoomType.DOUBLE, 1, RoomStatus.AVAILABLE),
    ("A-202", Block.A, RoomType.DOUBLE, 2, RoomStatus.OCCUPIED),
    ("A-203", Block.A, RoomType.DOUBLE, 0, RoomStatus.AVAILABLE),
    ("B-101", Block.B, RoomType.SINGLE, 0, RoomStatus.AVAILABLE),
    ("B-102", Block.B, RoomType.SINGLE, 1, RoomStatus.OCCUPIED),
    ("B-201", Block.B, RoomType.DOUBLE, 1, RoomStatus.AVAILABLE),
    ("B-202", Block.B, RoomType.DOUBLE, 0, RoomStatus.AVAILABLE),
    ("C-101", Block.C, RoomType.TRIPLE, 2, RoomStatus.AVAILABLE),
    ("C-102", Block.C, RoomType.TRIPLE, 3, RoomStatus.OCCUPIED),
    ("D-101", Block.D, RoomType.QUAD, 2, RoomStatus.AVAILABLE),
    ("D-102", Block.D, RoomType.QUAD, 4, RoomStatus.OCCUPIED),
]

DEMO_USERS: List[User] = [
    User(id="1", name="Admin User", email="admin@example.com", role=UserRole.ADMIN),
    User(id="2", name="Student User", email="student@example.com", role=UserRole.STUDENT, student_id="STU001"),
]


def demo_rooms() -> List[Room]:
    return [
        Room(
            id=str(uuid.uuid4()),
            number=number,
            block=block,
            type=room_type,
            capacity=room_type.max_capacity,
            occupancy=occupancy,
            status=status,
        )
        for number, block, room_type, occupancy, status in DEMO_ROOMS
    ]


def demo_applications() -> List[Application]:
    common = dict(
        student_id="2",
        student_name="Student User",
        cgpa=3.5,
        department_name="Computer Science",
        year="3rd",
    )
    return [
        Application(
            id=str(uuid.uuid4()),
            room_type=RoomType.SINGLE,
            preferred_block=Block.A,
            status=ApplicationStatus.APPROVED,
            room_number="A-101",
            created_at=datetime(2023, 1, 10, tzinfo=timezone.utc),
            updated_at=datetime(2023, 1, 15, tzinfo=timezone.utc),
            **common,
        ),
        Application(
            id=str(uuid.uuid4()),
            room_type=RoomType.DOUBLE,
            preferred_block=Block.B,
            status=ApplicationStatus.PENDING,
            created_at=datetime(2023, 2, 20, tzinfo=timezone.utc),
            updated_at=datetime(2023, 2, 20, tzinfo=timezone.utc),
            **common,
        ),
    ]


def seed_demo_data(application_store: ApplicationStore, room_store: RoomStore) -> None:
    """Fill empty stores with the demo records; non-empty stores are left alone."""
    if not room_store.list():
        for room in demo_rooms():
            room_store.add(room)
        logger.info(f"Seeded {len(DEMO_ROOMS)} demo rooms")
    if not application_store.list():
        for application in demo_applications():
            application_store.add(application)
        logger.info("Seeded demo applications")
