"""User management routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends
from fastapi.security import HTTPAuthorizationCredentials
from pydantic import BaseModel, EmailStr, Field

from blog.application.usecase.user import (
    DeleteUserRequest,
    DeleteUserResponse,
    DeleteUserUseCase,
    ListUsersResponse,
    ListUsersUseCase,
    UpdateUserRequest,
    UpdateUserUseCase,
    UserInfo,
)
from blog.domain.error import DomainError
from blog.domain.service import JWTService
from blog.interface.api.auth import bearer_scheme, require_user_id
from blog.interface.error import to_http_exception

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


@router.get("", response_model=ListUsersResponse)
async def list_users(
    list_users_use_case: FromDishka[ListUsersUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> ListUsersResponse:
    """List every registered user.

    Requires authentication.
    """
    require_user_id(jwt_service, credentials, "list users")
    return await list_users_use_case.execute()


class UpdateUserAPIRequest(BaseModel):
    """API request for an admin editing a user."""

    name: str | None = Field(default=None, min_length=3, max_length=50)
    email: EmailStr | None = None
    is_admin: bool | None = None


@router.put("/{user_id}", response_model=UserInfo)
async def update_user(
    user_id: UUID,
    request: UpdateUserAPIRequest,
    update_user_use_case: FromDishka[UpdateUserUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> UserInfo:
    """Update a user's name, email or admin flag.

    Admin only.

    Raises:
        HTTPException: 401 if not authenticated, 403 if not an admin,
            404 if the user does not exist
    """
    actor_id = require_user_id(jwt_service, credentials, "update users")

    try:
        return await update_user_use_case.execute(
            UpdateUserRequest(
                actor_id=actor_id,
                user_id=str(user_id),
                name=request.name,
                email=request.email,
                is_admin=request.is_admin,
            )
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.delete("/{user_id}", response_model=DeleteUserResponse)
async def delete_user(
    user_id: UUID,
    delete_user_use_case: FromDishka[DeleteUserUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> DeleteUserResponse:
    """Delete a user account.

    Admin only.

    Raises:
        HTTPException: 401 if not authenticated, 403 if not an admin,
            404 if the user does not exist
    """
    actor_id = require_user_id(jwt_service, credentials, "delete users")

    try:
        return await delete_user_use_case.execute(
            DeleteUserRequest(actor_id=actor_id, user_id=str(user_id))
        )
    except DomainError as e:
        raise to_http_exception(e)
