"""
Room inventory endpoints.
"""
from typing import List, Optional

from fastapi import APIRouter, Response, status

from hostel_allocation.dependencies import AdminUser, AllocationServiceDep
from hostel_allocation.schemas.common.enums import Block, RoomStatus, RoomType
from hostel_allocation.schemas.room import AvailabilitySummary, Room, RoomCreate, RoomStatusUpdate

router = APIRouter(prefix="/rooms")


@router.get("", response_model=List[Room])
def list_rooms(
    service: AllocationServiceDep,
    status: Optional[RoomStatus] = None,
    room_type: Optional[RoomType] = None,
    block: Optional[Block] = None,
    search: Optional[str] = None,
):
    return service.list_rooms(status=status, room_type=room_type, block=block, search=search)


@router.get("/availability", response_model=List[AvailabilitySummary])
def availability_summary(service: AllocationServiceDep):
    return service.compute_availability_summary()


@router.post("", response_model=Room, status_code=status.HTTP_201_CREATED)
def add_room(payload: RoomCreate, _: AdminUser, service: AllocationServiceDep):
    return service.add_room(payload)


@router.get("/{room_id}", response_model=Room)
def get_room(room_id: str, service: AllocationServiceDep):
    return service.get_room(room_id)


@router.patch("/{room_id}/status", response_model=Room)
def update_room_status(
    room_id: str, payload: RoomStatusUpdate, _: AdminUser, service: AllocationServiceDep
):
    return service.update_room_status(room_id, payload.status)


@router.delete("/{room_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_room(room_id: str, _: AdminUser, service: AllocationServiceDep):
    service.delete_room(room_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
