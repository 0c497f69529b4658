from hostel_allocation.repositories.base import ApplicationStore, RoomStore
from hostel_allocation.repositories.memory import InMemoryApplicationStore, InMemoryRoomStore
from hostel_allocation.repositories.sql_repository import SqlApplicationStore, SqlRoomStore

__all__ = [
    "ApplicationStore",
    "RoomStore",
    "InMemoryApplicationStore",
    "InMemoryRoomStore",
    "SqlApplicationStore",
    "SqlRoomStore",
]
