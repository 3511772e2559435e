"""Login use case."""

from pydantic import BaseModel, EmailStr

from blog.application.usecase.user.common import UserInfo
from blog.domain.service import JWTService, UserService

from .register import AuthResponse


class LoginRequest(BaseModel):
    """Login request."""

    email: EmailStr
    password: str


class LoginUseCase:
    """Use case for exchanging email and password for a token."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize login use case.

        Args:
            user_service: User domain service
            jwt_service: JWT token domain service
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> AuthResponse:
        """Execute login flow.

        Raises:
            AuthenticationError: If the credentials do not match
        """
        user = await self.user_service.authenticate(request.email, request.password)
        token = self.jwt_service.create_token(str(user.id))
        return AuthResponse(token=token, user=UserInfo.from_user(user))
