# hostel_allocation/dependencies.py
from __future__ import annotations

from typing import Annotated, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from hostel_allocation.core.exceptions import AuthenticationError, AuthorizationError
from hostel_allocation.schemas.auth import User
from hostel_allocation.schemas.common.enums import UserRole
from hostel_allocation.services.allocation_service import AllocationService
from hostel_allocation.services.auth_service import AuthService

# Bearer tokens issued by /auth/login
bearer_scheme = HTTPBearer(auto_error=False)


# ------------------------------------------------------------------ #
# Services (built once in create_app and held on app.state)
# ------------------------------------------------------------------ #
def get_allocation_service(request: Request) -> AllocationService:
    return request.app.state.allocation_service


def get_auth_service(request: Request) -> AuthService:
    return request.app.state.auth_service


# ------------------------------------------------------------------ #
# Current user / roles
# ------------------------------------------------------------------ #
def get_token(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(bearer_scheme)],
) -> Optional[str]:
    return credentials.credentials if credentials else None


def get_current_user(
    token: Annotated[Optional[str], Depends(get_token)],
    auth: Annotated[AuthService, Depends(get_auth_service)],
) -> User:
    """Resolve the logged-in user or raise 401."""
    user = auth.get_current_user(token)
    if user is None:
        raise AuthenticationError("Not authenticated")
    return user


def require_admin(user: Annotated[User, Depends(get_current_user)]) -> User:
    if user.role != UserRole.ADMIN:
        raise AuthorizationError("Administrator access required", required_role=UserRole.ADMIN.value)
    return user


AllocationServiceDep = Annotated[AllocationService, Depends(get_allocation_service)]
AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
CurrentUser = Annotated[User, Depends(get_current_user)]
AdminUser = Annotated[User, Depends(require_admin)]
TokenDep = Annotated[Optional[str], Depends(get_token)]
