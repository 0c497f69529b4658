from hostel_allocation.services.allocation_service import (
    AllocationService,
    MatchingRooms,
    has_vacancy,
    is_allocatable,
)
from hostel_allocation.services.auth_service import AuthService, InMemorySessionStore, SessionStore

__all__ = [
    "AllocationService",
    "MatchingRooms",
    "has_vacancy",
    "is_allocatable",
    "AuthService",
    "InMemorySessionStore",
    "SessionStore",
]
