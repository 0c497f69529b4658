"""
Allocation workflow service.

Applies status transitions to room applications and rooms:
- Application submission with form validation
- Matching-room lookup by requested type and block
- Approval into a matching available room, and rejection
- Room inventory management (add, status overwrite, delete)
- Availability summary and dashboard statistics

Two room availability rules coexist and are kept apart on purpose:
`is_allocatable` (status is available) decides which rooms an application
may be approved into, while `has_vacancy` (available, or occupied with a
free bed) feeds the availability summary. A room can count towards the
summary without being offered for approval.
"""

import threading
import uuid
from collections import defaultdict
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Union

from pydantic import ValidationError as PydanticValidationError

from hostel_allocation.config.logging import get_logger
from hostel_allocation.config.settings import Settings, settings as default_settings
from hostel_allocation.core.exceptions import (
    ApplicationNotFoundError,
    DuplicateRoomNumberError,
    NoMatchingRoomError,
    RoomNotFoundError,
    ValidationError,
)
from hostel_allocation.repositories.base import ApplicationStore, RoomStore
from hostel_allocation.schemas.application import Application, ApplicationCreate
from hostel_allocation.schemas.common.enums import ApplicationStatus, Block, RoomStatus, RoomType
from hostel_allocation.schemas.dashboard import DashboardStats
from hostel_allocation.schemas.room import AvailabilitySummary, Room, RoomCreate

logger = get_logger(__name__)


def is_allocatable(room: Room) -> bool:
    """Strict rule: only rooms marked available can receive an application."""
    return room.status == RoomStatus.AVAILABLE


def has_vacancy(room: Room) -> bool:
    """Summary rule: available rooms, plus occupied rooms with a free bed."""
    return room.status == RoomStatus.AVAILABLE or (
        room.status == RoomStatus.OCCUPIED and room.occupancy < room.capacity
    )


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _field_errors(exc: PydanticValidationError) -> Dict[str, List[str]]:
    errors: Dict[str, List[str]] = defaultdict(list)
    for error in exc.errors():
        field = ".".join(str(part) for part in error["loc"]) or "__root__"
        errors[field].append(error["msg"])
    return dict(errors)


class MatchingRooms:
    """
    Rooms an application may be approved into.

    Iterating re-reads the room store, so the sequence is lazy, finite
    and can be iterated again to see the current inventory.
    """

    def __init__(self, room_store: RoomStore, room_type: RoomType, block: Block):
        self._room_store = room_store
        self.room_type = room_type
        self.block = block

    def __iter__(self) -> Iterator[Room]:
        return (
            room
            for room in self._room_store.list()
            if is_allocatable(room) and room.type == self.room_type and room.block == self.block
        )

    def numbers(self) -> List[str]:
        return [room.number for room in self]

    def __repr__(self) -> str:
        return f"MatchingRooms(room_type={self.room_type.value!r}, block={self.block.value!r})"


class AllocationService:
    """
    Room allocation workflow engine.

    All mutations run under one re-entrant lock so that approvals,
    rejections and room changes never interleave within a process.
    """

    def __init__(
        self,
        application_store: ApplicationStore,
        room_store: RoomStore,
        settings: Optional[Settings] = None,
    ):
        self.applications = application_store
        self.rooms = room_store
        self.settings = settings or default_settings
        self._lock = threading.RLock()
        self._logger = get_logger(f"{__name__}.{self.__class__.__name__}")

    # -------------------------------------------------------------------------
    # Applications
    # -------------------------------------------------------------------------

    def submit_application(
        self,
        form_data: Union[ApplicationCreate, Mapping[str, Any]],
        student_id: str,
    ) -> Application:
        """
        Create a pending application for the submitting student.

        Args:
            form_data: The application form, as a schema or a mapping
            student_id: Identifier of the submitting user

        Raises:
            ValidationError: a field is empty or out of range
        """
        if not isinstance(form_data, ApplicationCreate):
            try:
                form_data = ApplicationCreate.model_validate(dict(form_data))
            except PydanticValidationError as e:
                raise ValidationError(
                    "Invalid application form", field_errors=_field_errors(e)
                ) from e

        if not student_id or not str(student_id).strip():
            raise ValidationError(
                "Invalid application form",
                field_errors={"student_id": ["Student ID is required"]},
            )

        now = _utcnow()
        application = Application(
            id=str(uuid.uuid4()),
            student_id=str(student_id).strip(),
            student_name=form_data.name,
            room_type=form_data.room_type,
            preferred_block=form_data.preferred_block,
            cgpa=form_data.cgpa,
            department_name=form_data.department_name,
            year=form_data.year,
            status=ApplicationStatus.PENDING,
            created_at=now,
            updated_at=now,
        )

        with self._lock:
            stored = self.applications.add(application)

        self._logger.info(
            f"Application {stored.id} submitted",
            extra={"application_id": stored.id, "status": stored.status.value},
        )
        return stored

    def get_application(self, application_id: str) -> Application:
        application = self.applications.get(application_id)
        if application is None:
            raise ApplicationNotFoundError(application_id)
        return application

    def list_applications(
        self,
        status: Optional[ApplicationStatus] = None,
        room_type: Optional[RoomType] = None,
        block: Optional[Block] = None,
        search: Optional[str] = None,
    ) -> List[Application]:
        """
        Filter applications the way the admin review screen does.

        `search` matches student name or student id, case-insensitively.
        Results are newest first.
        """
        needle = search.strip().lower() if search else None
        results = []
        for application in self.applications.list():
            if status is not None and application.status != status:
                continue
            if room_type is not None and application.room_type != room_type:
                continue
            if block is not None and application.preferred_block != block:
                continue
            if needle and not (
                needle in application.student_name.lower()
                or needle in application.student_id.lower()
            ):
                continue
            results.append(application)
        # Stable sort keeps submission order among equal timestamps
        return sorted(results, key=lambda a: a.created_at.timestamp(), reverse=True)

    def list_student_applications(self, student_id: str) -> List[Application]:
        return [a for a in self.applications.list() if a.student_id == student_id]

    def list_available_rooms_for(self, application: Union[Application, str]) -> MatchingRooms:
        """Rooms with status available matching the application's type and block."""
        if not isinstance(application, Application):
            application = self.get_application(application)
        return MatchingRooms(self.rooms, application.room_type, application.preferred_block)

    def approve_application(self, application_id: str, room_number: str) -> Application:
        """
        Approve an application into one of its matching available rooms.

        The room itself is left untouched unless
        ALLOCATION_OCCUPY_ON_APPROVAL is enabled, in which case its
        occupancy is incremented and it turns occupied once full. An
        application that is already approved gives its bed back first, so
        re-approval never holds two beds; a refused re-approval keeps the
        original bed.

        Raises:
            ApplicationNotFoundError: unknown application id
            NoMatchingRoomError: no candidate room, or room_number is not one
        """
        occupy = self.settings.ALLOCATION_OCCUPY_ON_APPROVAL
        with self._lock:
            application = self.get_application(application_id)
            held = self._release_bed(application) if occupy else None
            try:
                chosen = self._claim_room(application, room_number, occupy)
            except NoMatchingRoomError:
                if held is not None:
                    self.rooms.save(held)
                raise

            application = application.model_copy(update={
                "status": ApplicationStatus.APPROVED,
                "room_number": chosen.number,
                "updated_at": _utcnow(),
            })
            application = self.applications.save(application)

        self._logger.info(
            f"Application {application_id} approved into room {chosen.number}",
            extra={
                "application_id": application_id,
                "room_number": chosen.number,
                "status": application.status.value,
            },
        )
        return application

    def _claim_room(self, application: Application, room_number: str, occupy: bool) -> Room:
        application_id = application.id
        candidates = list(self.list_available_rooms_for(application))
        chosen = next((room for room in candidates if room.number == room_number), None)

        if chosen is None:
            self._logger.warning(
                f"Approval of {application_id} refused: room {room_number} not available",
                extra={"application_id": application_id, "room_number": room_number},
            )
            raise NoMatchingRoomError(
                application_id,
                room_number=room_number,
                candidates=[room.number for room in candidates],
            )

        if not occupy:
            return chosen
        if chosen.occupancy >= chosen.capacity:
            raise NoMatchingRoomError(
                application_id,
                room_number=room_number,
                candidates=[room.number for room in candidates],
                message=f"Room '{room_number}' has no free bed",
            )
        return self._occupy(chosen)

    def reject_application(self, application_id: str) -> Application:
        """
        Mark an application rejected; any recorded room number is kept.

        With ALLOCATION_OCCUPY_ON_APPROVAL enabled, rejecting an approved
        application frees the bed it held.
        """
        with self._lock:
            application = self.get_application(application_id)
            if self.settings.ALLOCATION_OCCUPY_ON_APPROVAL:
                self._release_bed(application)
            application = application.model_copy(update={
                "status": ApplicationStatus.REJECTED,
                "updated_at": _utcnow(),
            })
            application = self.applications.save(application)

        self._logger.info(
            f"Application {application_id} rejected",
            extra={"application_id": application_id, "status": application.status.value},
        )
        return application

    def _occupy(self, room: Room) -> Room:
        occupancy = room.occupancy + 1
        status = RoomStatus.OCCUPIED if occupancy >= room.capacity else room.status
        return self.rooms.save(room.model_copy(update={"occupancy": occupancy, "status": status}))

    def _release_bed(self, application: Application) -> Optional[Room]:
        """
        Give back the bed an approved application holds.

        Returns the room as it was before the release, or None when the
        application holds no bed or its room is gone.
        """
        if application.status != ApplicationStatus.APPROVED or not application.room_number:
            return None
        room = self.rooms.get_by_number(application.room_number)
        if room is None:
            return None

        occupancy = max(room.occupancy - 1, 0)
        status = room.status
        # Maintenance is an administrator decision and is left alone
        if status == RoomStatus.OCCUPIED and occupancy < room.capacity:
            status = RoomStatus.AVAILABLE
        self.rooms.save(room.model_copy(update={"occupancy": occupancy, "status": status}))

        self._logger.info(
            f"Bed in room {room.number} released by application {application.id}",
            extra={"application_id": application.id, "room_id": room.id, "room_number": room.number},
        )
        return room

    # -------------------------------------------------------------------------
    # Rooms
    # -------------------------------------------------------------------------

    def add_room(self, room_data: Union[RoomCreate, Mapping[str, Any]]) -> Room:
        """
        Add a room to the inventory under a fresh id.

        Raises:
            ValidationError: empty number, capacity above the type bound,
                or occupancy above capacity
            DuplicateRoomNumberError: the number is already in use
        """
        if not isinstance(room_data, RoomCreate):
            try:
                room_data = RoomCreate.model_validate(dict(room_data))
            except PydanticValidationError as e:
                raise ValidationError("Invalid room", field_errors=_field_errors(e)) from e

        room = Room(id=str(uuid.uuid4()), **room_data.model_dump())

        with self._lock:
            if self.rooms.get_by_number(room.number) is not None:
                raise DuplicateRoomNumberError(room.number)
            stored = self.rooms.add(room)

        self._logger.info(
            f"Room {stored.number} added",
            extra={"room_id": stored.id, "room_number": stored.number, "status": stored.status.value},
        )
        return stored

    def get_room(self, room_id: str) -> Room:
        room = self.rooms.get(room_id)
        if room is None:
            raise RoomNotFoundError(room_id)
        return room

    def list_rooms(
        self,
        status: Optional[RoomStatus] = None,
        room_type: Optional[RoomType] = None,
        block: Optional[Block] = None,
        search: Optional[str] = None,
    ) -> List[Room]:
        needle = search.strip().lower() if search else None
        return [
            room
            for room in self.rooms.list()
            if (status is None or room.status == status)
            and (room_type is None or room.type == room_type)
            and (block is None or room.block == block)
            and (not needle or needle in room.number.lower())
        ]

    def get_rooms_by_block_and_type(self, block: Block, room_type: RoomType) -> List[Room]:
        return [r for r in self.rooms.list() if r.block == block and r.type == room_type]

    def update_room_status(self, room_id: str, new_status: RoomStatus) -> Room:
        """
        Overwrite a room's status; occupancy is not consulted.

        Raises:
            ValidationError: the status is not a known room status
            RoomNotFoundError: unknown room id
        """
        try:
            new_status = RoomStatus(new_status)
        except ValueError as e:
            allowed = ", ".join(status.value for status in RoomStatus)
            raise ValidationError(
                "Invalid room status",
                field_errors={"status": [f"Must be one of: {allowed}"]},
            ) from e
        with self._lock:
            room = self.get_room(room_id)
            previous = room.status
            room = self.rooms.save(room.model_copy(update={"status": new_status}))

        self._logger.info(
            f"Room {room.number} status {previous.value} -> {new_status.value}",
            extra={"room_id": room_id, "room_number": room.number, "status": new_status.value},
        )
        return room

    def delete_room(self, room_id: str) -> None:
        """
        Remove a room from the inventory.

        Approved applications that name this room keep their room number.

        Raises:
            RoomNotFoundError: unknown room id
        """
        with self._lock:
            room = self.get_room(room_id)
            self.rooms.delete(room_id)

        self._logger.info(
            f"Room {room.number} deleted",
            extra={"room_id": room_id, "room_number": room.number},
        )

    # -------------------------------------------------------------------------
    # Reporting
    # -------------------------------------------------------------------------

    def compute_availability_summary(
        self, rooms: Optional[Iterable[Room]] = None
    ) -> List[AvailabilitySummary]:
        """
        Count total and vacant rooms per (block, type) pair.

        Blocks come in the order first seen in the inventory and, within a
        block, types in the order first seen overall. Pairs with no rooms
        are omitted.
        """
        rooms = list(self.rooms.list() if rooms is None else rooms)

        blocks: List[Block] = list(dict.fromkeys(room.block for room in rooms))
        room_types: List[RoomType] = list(dict.fromkeys(room.type for room in rooms))

        totals: Dict[tuple, int] = defaultdict(int)
        vacant: Dict[tuple, int] = defaultdict(int)
        for room in rooms:
            key = (room.block, room.type)
            totals[key] += 1
            if has_vacancy(room):
                vacant[key] += 1

        return [
            AvailabilitySummary(
                block=block,
                room_type=room_type,
                total=totals[(block, room_type)],
                available=vacant[(block, room_type)],
            )
            for block in blocks
            for room_type in room_types
            if totals[(block, room_type)] > 0
        ]

    def compute_dashboard_stats(self) -> DashboardStats:
        applications = self.applications.list()
        rooms = self.rooms.list()

        def count(items, status) -> int:
            return sum(1 for item in items if item.status == status)

        return DashboardStats(
            total_applications=len(applications),
            pending_applications=count(applications, ApplicationStatus.PENDING),
            approved_applications=count(applications, ApplicationStatus.APPROVED),
            rejected_applications=count(applications, ApplicationStatus.REJECTED),
            total_rooms=len(rooms),
            available_rooms=count(rooms, RoomStatus.AVAILABLE),
            occupied_rooms=count(rooms, RoomStatus.OCCUPIED),
            maintenance_rooms=count(rooms, RoomStatus.MAINTENANCE),
        )
