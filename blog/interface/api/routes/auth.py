"""Authentication routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials
from pydantic import BaseModel, Field

from blog.application.usecase.auth import (
    AuthResponse,
    ChangePasswordRequest,
    ChangePasswordUseCase,
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginUseCase,
    RegisterRequest,
    RegisterUseCase,
)
from blog.application.usecase.user import UserInfo
from blog.domain.error import DomainError
from blog.domain.service import JWTService
from blog.interface.api.auth import bearer_scheme, require_user_id
from blog.interface.error import to_http_exception
from blog.util.jwt import JWTError

router = APIRouter(prefix="/auth", tags=["auth"], route_class=DishkaRoute)


@router.post(
    "/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED
)
async def register(
    request: RegisterRequest,
    register_use_case: FromDishka[RegisterUseCase],
) -> AuthResponse:
    """Create an account and return a bearer token.

    Raises:
        HTTPException: 400 if the email is already registered
    """
    try:
        return await register_use_case.execute(request)
    except DomainError as e:
        logfire.warn("Registration failed", error=str(e))
        raise to_http_exception(e)


@router.post("/login", response_model=AuthResponse)
async def login(
    request: LoginRequest,
    login_use_case: FromDishka[LoginUseCase],
) -> AuthResponse:
    """Exchange email and password for a bearer token.

    Raises:
        HTTPException: 401 if the credentials do not match
    """
    try:
        return await login_use_case.execute(request)
    except DomainError as e:
        raise to_http_exception(e)


@router.get("/me", response_model=UserInfo)
async def get_current_user(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> UserInfo:
    """Get the authenticated user.

    Raises:
        HTTPException: 401 if the token is missing or invalid, 404 if the
            user no longer exists
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        return await get_current_user_use_case.execute(
            GetCurrentUserRequest(token=credentials.credentials)
        )
    except JWTError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
            headers={"WWW-Authenticate": "Bearer"},
        )
    except DomainError as e:
        raise to_http_exception(e)


class ChangePasswordAPIRequest(BaseModel):
    """API request for changing the caller's password."""

    current_password: str
    new_password: str = Field(min_length=6)


@router.patch("/password", response_model=AuthResponse)
async def change_password(
    request: ChangePasswordAPIRequest,
    change_password_use_case: FromDishka[ChangePasswordUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> AuthResponse:
    """Change the caller's password and return a fresh token.

    Raises:
        HTTPException: 401 if not authenticated or the current password is
            wrong, 400 if the new password equals the current one
    """
    user_id = require_user_id(jwt_service, credentials, "change password")

    try:
        return await change_password_use_case.execute(
            ChangePasswordRequest(
                user_id=user_id,
                current_password=request.current_password,
                new_password=request.new_password,
            )
        )
    except DomainError as e:
        raise to_http_exception(e)
