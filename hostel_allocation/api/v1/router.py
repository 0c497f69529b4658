"""
API v1 Router - Main Entry Point
Aggregates all v1 API endpoints for the hostel allocation service
"""
from fastapi import APIRouter

from hostel_allocation.api.v1 import applications, auth, dashboard, rooms

router = APIRouter(
    responses={
        401: {"description": "Unauthorized"},
        403: {"description": "Forbidden"},
        404: {"description": "Not Found"},
        409: {"description": "Conflict"},
        422: {"description": "Validation Error"},
    }
)

router.include_router(auth.router, tags=["Authentication"])
router.include_router(applications.router, tags=["Room Applications"])
router.include_router(rooms.router, tags=["Room Management"])
router.include_router(dashboard.router, tags=["Dashboard"])


@router.get("/health", tags=["Health"])
def health() -> dict:
    return {"status": "ok"}
