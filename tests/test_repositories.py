import uuid
from datetime import datetime, timezone

import pytest

from hostel_allocation.core.exceptions import (
    ApplicationNotFoundError,
    DuplicateRoomNumberError,
    RoomNotFoundError,
)
from hostel_allocation.repositories.seed import DEMO_ROOMS, seed_demo_data
from hostel_allocation.schemas.application import Application
from hostel_allocation.schemas.common.enums import ApplicationStatus, Block, RoomStatus, RoomType
from hostel_allocation.schemas.room import Room
from hostel_allocation.services.allocation_service import AllocationService


@pytest.fixture(params=["memory", "sql"])
def stores(request):
    if request.param == "memory":
        return request.getfixturevalue("application_store"), request.getfixturevalue("room_store")
    return request.getfixturevalue("sql_application_store"), request.getfixturevalue("sql_room_store")


def make_room(number, **overrides):
    data = dict(
        id=str(uuid.uuid4()),
        number=number,
        block=Block.A,
        type=RoomType.DOUBLE,
        capacity=2,
        occupancy=0,
        status=RoomStatus.AVAILABLE,
    )
    data.update(overrides)
    return Room(**data)


def make_application(**overrides):
    now = datetime(2024, 7, 1, 9, 30, tzinfo=timezone.utc)
    data = dict(
        id=str(uuid.uuid4()),
        student_id="user-1",
        student_name="Asha Rao",
        room_type=RoomType.SINGLE,
        preferred_block=Block.A,
        cgpa=3.1,
        department_name="Mathematics",
        year="2nd",
        created_at=now,
        updated_at=now,
    )
    data.update(overrides)
    return Application(**data)


def test_room_store_keeps_insertion_order(stores):
    _, rooms = stores
    for number in ["C-9", "A-1", "B-5"]:
        rooms.add(make_room(number))

    assert [room.number for room in rooms.list()] == ["C-9", "A-1", "B-5"]


def test_room_store_round_trip_and_lookup(stores):
    _, rooms = stores
    room = rooms.add(make_room("A-201", occupancy=1))

    assert rooms.get(room.id) == room
    assert rooms.get_by_number("A-201") == room
    assert rooms.get("missing") is None
    assert rooms.get_by_number("Z-1") is None


def test_room_store_rejects_duplicate_numbers(stores):
    _, rooms = stores
    rooms.add(make_room("A-201"))

    with pytest.raises(DuplicateRoomNumberError):
        rooms.add(make_room("A-201"))

    assert len(rooms.list()) == 1


def test_room_store_save_and_delete(stores):
    _, rooms = stores
    room = rooms.add(make_room("A-201"))

    saved = rooms.save(room.model_copy(update={"status": RoomStatus.MAINTENANCE}))
    assert saved.status == RoomStatus.MAINTENANCE
    assert rooms.get(room.id).status == RoomStatus.MAINTENANCE

    rooms.delete(room.id)
    assert rooms.list() == []


def test_room_store_missing_ids(stores):
    _, rooms = stores

    with pytest.raises(RoomNotFoundError):
        rooms.save(make_room("A-201"))
    with pytest.raises(RoomNotFoundError):
        rooms.delete("missing")


def test_returned_rooms_are_detached(stores):
    _, rooms = stores
    room = rooms.add(make_room("A-201"))

    fetched = rooms.get(room.id)
    fetched.status = RoomStatus.MAINTENANCE

    assert rooms.get(room.id).status == RoomStatus.AVAILABLE


def test_application_store_round_trip(stores):
    applications, _ = stores
    first = applications.add(make_application())
    second = applications.add(make_application(student_name="Meera Iyer"))

    assert [a.id for a in applications.list()] == [first.id, second.id]
    fetched = applications.get(first.id)
    assert fetched.student_name == "Asha Rao"
    assert fetched.status == ApplicationStatus.PENDING
    assert fetched.room_number is None


def test_application_store_save(stores):
    applications, _ = stores
    application = applications.add(make_application())

    applications.save(application.model_copy(update={
        "status": ApplicationStatus.APPROVED,
        "room_number": "A-102",
    }))

    stored = applications.get(application.id)
    assert stored.status == ApplicationStatus.APPROVED
    assert stored.room_number == "A-102"


def test_application_store_save_unknown(stores):
    applications, _ = stores

    with pytest.raises(ApplicationNotFoundError):
        applications.save(make_application())


def test_seed_fills_empty_stores_once(stores):
    applications, rooms = stores

    seed_demo_data(applications, rooms)
    seed_demo_data(applications, rooms)

    assert len(rooms.list()) == len(DEMO_ROOMS)
    assert len(applications.list()) == 2


def test_workflow_on_sql_stores(sql_application_store, sql_room_store, settings, form):
    service = AllocationService(sql_application_store, sql_room_store, settings)
    service.add_room({"number": "A-102", "block": "Block A", "type": "Single"})
    application = service.submit_application(form, "user-7")

    assert service.list_available_rooms_for(application).numbers() == ["A-102"]

    approved = service.approve_application(application.id, "A-102")
    assert approved.status == ApplicationStatus.APPROVED
    assert sql_application_store.get(application.id).room_number == "A-102"
