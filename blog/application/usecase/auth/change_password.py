"""Change password use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from blog.application.usecase.user.common import UserInfo
from blog.domain.service import JWTService, UserService
from blog.domain.value import UserId

from .register import AuthResponse


class ChangePasswordRequest(BaseModel):
    """Change password request."""

    user_id: str  # Current user ID
    current_password: str
    new_password: str = Field(min_length=6)


class ChangePasswordUseCase:
    """Use case for a user replacing their own password."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize change password use case.

        Args:
            user_service: User domain service
            jwt_service: JWT token domain service
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: ChangePasswordRequest) -> AuthResponse:
        """Execute change password flow.

        Returns:
            The user and a fresh token

        Raises:
            AuthenticationError: If the current password is wrong
            BusinessRuleViolationError: If the new password equals the current
        """
        user = await self.user_service.change_password(
            UserId(UUID(request.user_id)),
            request.current_password,
            request.new_password,
        )
        token = self.jwt_service.create_token(str(user.id))
        return AuthResponse(token=token, user=UserInfo.from_user(user))
