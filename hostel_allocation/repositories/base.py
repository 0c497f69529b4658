"""
Store interfaces for the allocation workflow.

The workflow engine depends only on these contracts; the in-memory and
SQLAlchemy backends implement them. Every method returns detached copies,
so callers never mutate stored state by accident.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from hostel_allocation.schemas.application import Application
from hostel_allocation.schemas.room import Room


class ApplicationStore(ABC):
    """Persistence contract for room applications."""

    @abstractmethod
    def add(self, application: Application) -> Application:
        """Insert a new application and return the stored copy."""

    @abstractmethod
    def get(self, application_id: str) -> Optional[Application]:
        """Return the application with this id, or None."""

    @abstractmethod
    def save(self, application: Application) -> Application:
        """
        Overwrite an existing application.

        Raises:
            ApplicationNotFoundError: no application has this id
        """

    @abstractmethod
    def list(self) -> List[Application]:
        """Return every application in submission order."""


class RoomStore(ABC):
    """Persistence contract for the room inventory."""

    @abstractmethod
    def add(self, room: Room) -> Room:
        """
        Insert a new room and return the stored copy.

        Raises:
            DuplicateRoomNumberError: the room number is already taken
        """

    @abstractmethod
    def get(self, room_id: str) -> Optional[Room]:
        """Return the room with this id, or None."""

    @abstractmethod
    def get_by_number(self, number: str) -> Optional[Room]:
        """Return the room with this number, or None."""

    @abstractmethod
    def save(self, room: Room) -> Room:
        """
        Overwrite an existing room.

        Raises:
            RoomNotFoundError: no room has this id
        """

    @abstractmethod
    def delete(self, room_id: str) -> None:
        """
        Remove a room.

        Raises:
            RoomNotFoundError: no room has this id
        """

    @abstractmethod
    def list(self) -> List[Room]:
        """Return every room in insertion order."""
