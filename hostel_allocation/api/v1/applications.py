"""
Room application endpoints: submission, review and decisions.
"""
from typing import List, Optional

from fastapi import APIRouter, status

from hostel_allocation.dependencies import AdminUser, AllocationServiceDep, CurrentUser
from hostel_allocation.core.exceptions import AuthorizationError
from hostel_allocation.schemas.application import Application, ApplicationCreate, ApprovalRequest
from hostel_allocation.schemas.common.enums import ApplicationStatus, Block, RoomType
from hostel_allocation.schemas.room import Room

router = APIRouter(prefix="/applications")


@router.post("", response_model=Application, status_code=status.HTTP_201_CREATED)
def submit_application(payload: ApplicationCreate, user: CurrentUser, service: AllocationServiceDep):
    return service.submit_application(payload, user.id)


@router.get("", response_model=List[Application])
def list_applications(
    _: AdminUser,
    service: AllocationServiceDep,
    status: Optional[ApplicationStatus] = None,
    room_type: Optional[RoomType] = None,
    block: Optional[Block] = None,
    search: Optional[str] = None,
):
    return service.list_applications(status=status, room_type=room_type, block=block, search=search)


@router.get("/me", response_model=List[Application])
def list_my_applications(user: CurrentUser, service: AllocationServiceDep):
    return service.list_student_applications(user.id)


@router.get("/{application_id}", response_model=Application)
def get_application(application_id: str, user: CurrentUser, service: AllocationServiceDep):
    application = service.get_application(application_id)
    if not user.is_admin and application.student_id != user.id:
        raise AuthorizationError("You can only view your own applications")
    return application


@router.get("/{application_id}/available-rooms", response_model=List[Room])
def list_available_rooms(application_id: str, _: AdminUser, service: AllocationServiceDep):
    return list(service.list_available_rooms_for(application_id))


@router.post("/{application_id}/approve", response_model=Application)
def approve_application(
    application_id: str, payload: ApprovalRequest, _: AdminUser, service: AllocationServiceDep
):
    return service.approve_application(application_id, payload.room_number)


@router.post("/{application_id}/reject", response_model=Application)
def reject_application(application_id: str, _: AdminUser, service: AllocationServiceDep):
    return service.reject_application(application_id)
