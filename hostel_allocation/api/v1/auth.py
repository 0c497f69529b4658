"""
Demo authentication endpoints.
"""
from fastapi import APIRouter, Response, status

from hostel_allocation.dependencies import AuthServiceDep, CurrentUser, TokenDep
from hostel_allocation.schemas.auth import LoginRequest, RegisterRequest, TokenResponse, User

router = APIRouter(prefix="/auth")


@router.post("/login", response_model=TokenResponse)
def login(payload: LoginRequest, auth: AuthServiceDep):
    token, user = auth.login(payload)
    return TokenResponse(access_token=token, user=user)


@router.post("/register", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
def register(payload: RegisterRequest, auth: AuthServiceDep):
    token, user = auth.register(payload)
    return TokenResponse(access_token=token, user=user)


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
def logout(_: CurrentUser, token: TokenDep, auth: AuthServiceDep):
    auth.logout(token)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/me", response_model=User)
def me(user: CurrentUser):
    return user
