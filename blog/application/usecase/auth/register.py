"""Register use case."""

import logfire
from pydantic import BaseModel, EmailStr, Field

from blog.application.usecase.user.common import UserInfo
from blog.domain.service import JWTService, UserService


class RegisterRequest(BaseModel):
    """Register request."""

    name: str = Field(min_length=3, max_length=50)
    email: EmailStr
    password: str = Field(min_length=6)


class AuthResponse(BaseModel):
    """Authenticated user plus a fresh bearer token."""

    token: str
    user: UserInfo


class RegisterUseCase:
    """Use case for creating an account and signing it in."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize register use case.

        Args:
            user_service: User domain service
            jwt_service: JWT token domain service
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: RegisterRequest) -> AuthResponse:
        """Execute register flow.

        Raises:
            BusinessRuleViolationError: If the email is already registered
        """
        with logfire.span("register.execute"):
            user = await self.user_service.register(
                name=request.name,
                email=request.email,
                password=request.password,
            )
            token = self.jwt_service.create_token(str(user.id))
            return AuthResponse(token=token, user=UserInfo.from_user(user))
