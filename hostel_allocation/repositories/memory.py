"""
In-memory store implementations.

Records live in insertion-ordered dicts for the lifetime of the process.
"""

from typing import Dict, List, Optional

from hostel_allocation.core.exceptions import (
    ApplicationNotFoundError,
    DuplicateRoomNumberError,
    RoomNotFoundError,
)
from hostel_allocation.repositories.base import ApplicationStore, RoomStore
from hostel_allocation.schemas.application import Application
from hostel_allocation.schemas.room import Room


class InMemoryApplicationStore(ApplicationStore):

    def __init__(self) -> None:
        self._items: Dict[str, Application] = {}

    def add(self, application: Application) -> Application:
        self._items[application.id] = application.model_copy(deep=True)
        return application.model_copy(deep=True)

    def get(self, application_id: str) -> Optional[Application]:
        application = self._items.get(application_id)
        return application.model_copy(deep=True) if application else None

    def save(self, application: Application) -> Application:
        if application.id not in self._items:
            raise ApplicationNotFoundError(application.id)
        self._items[application.id] = application.model_copy(deep=True)
        return application.model_copy(deep=True)

    def list(self) -> List[Application]:
        return [application.model_copy(deep=True) for application in self._items.values()]

    def __len__(self) -> int:
        return len(self._items)


class InMemoryRoomStore(RoomStore):

    def __init__(self) -> None:
        self._items: Dict[str, Room] = {}

    def add(self, room: Room) -> Room:
        if self.get_by_number(room.number) is not None:
            raise DuplicateRoomNumberError(room.number)
        self._items[room.id] = room.model_copy(deep=True)
        return room.model_copy(deep=True)

    def get(self, room_id: str) -> Optional[Room]:
        room = self._items.get(room_id)
        return room.model_copy(deep=True) if room else None

    def get_by_number(self, number: str) -> Optional[Room]:
        for room in self._items.values():
            if room.number == number:
                return room.model_copy(deep=True)
        return None

    def save(self, room: Room) -> Room:
        if room.id not in self._items:
            raise RoomNotFoundError(room.id)
        self._items[room.id] = room.model_copy(deep=True)
        return room.model_copy(deep=True)

    def delete(self, room_id: str) -> None:
        if room_id not in self._items:
            raise RoomNotFoundError(room_id)
        del self._items[room_id]

    def list(self) -> List[Room]:
        return [room.model_copy(deep=True) for room in self._items.values()]

    def __len__(self) -> int:
        return len(self._items)
