from fastapi import APIRouter

from hostel_allocation.dependencies import AdminUser, AllocationServiceDep
from hostel_allocation.schemas.dashboard import DashboardStats

router = APIRouter(prefix="/dashboard")


@router.get("/stats", response_model=DashboardStats)
def dashboard_stats(_: AdminUser, service: AllocationServiceDep):
    return service.compute_dashboard_stats()
