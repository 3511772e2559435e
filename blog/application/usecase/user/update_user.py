"""Update user (admin) use case."""

from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel, EmailStr, Field

from blog.domain.error import BusinessRuleViolationError, NotAuthorizedError
from blog.domain.service import UserService
from blog.domain.value import UserId, UserName

from .common import UserInfo


class UpdateUserRequest(BaseModel):
    """Update user request.

    Fields left as None are not changed.
    """

    actor_id: str  # Current user ID (must be admin)
    user_id: str  # User being updated
    name: str | None = Field(default=None, min_length=3, max_length=50)
    email: EmailStr | None = None
    is_admin: bool | None = None


class UpdateUserUseCase:
    """Use case for an admin editing another account."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize update user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: UpdateUserRequest) -> UserInfo:
        """Execute update user flow.

        Args:
            request: Update user request

        Returns:
            Updated user

        Raises:
            NotAuthorizedError: If the actor is not an admin
            NotFoundError: If either user does not exist
            BusinessRuleViolationError: If the new email is already taken
        """
        with logfire.span(
            "update_user.execute", actor_id=request.actor_id, user_id=request.user_id
        ):
            actor = await self.user_service.get_by_id(UserId(UUID(request.actor_id)))
            if not actor.is_admin:
                raise NotAuthorizedError("user", request.user_id, request.actor_id)

            user = await self.user_service.get_by_id(UserId(UUID(request.user_id)))

            updates: dict[str, object] = {}
            if request.name is not None:
                updates["name"] = UserName(request.name)
            if request.email is not None:
                email = request.email.lower()
                if email != user.email:
                    other = await self.user_service.get_user_by_email(email)
                    if other is not None:
                        raise BusinessRuleViolationError("Email already exists")
                updates["email"] = email
            if request.is_admin is not None:
                updates["is_admin"] = request.is_admin

            if updates:
                updates["updated_at"] = datetime.now()
                user = await self.user_service.save_user(user.model_copy(update=updates))
                logfire.info(
                    "User updated", user_id=request.user_id, fields=sorted(updates)
                )

            return UserInfo.from_user(user)
