"""List users use case."""

from pydantic import BaseModel

from blog.domain.service import UserService

from .common import UserInfo


class ListUsersResponse(BaseModel):
    """List users response."""

    users: list[UserInfo]
    total: int


class ListUsersUseCase:
    """Use case for listing every registered user."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize list users use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self) -> ListUsersResponse:
        """Execute list users flow."""
        users = await self.user_service.list_users()
        return ListUsersResponse(
            users=[UserInfo.from_user(user) for user in users],
            total=len(users),
        )
