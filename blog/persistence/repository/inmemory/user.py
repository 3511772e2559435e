"""In-memory user repository for testing."""

from typing import Optional

from blog.domain.model.user import User
from blog.domain.repository.user import UserRepository
from blog.domain.value import UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self.users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self.users.get(user_id)

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email."""
        for user in self.users.values():
            if user.email == email.lower():
                return user
        return None

    async def find_by_ids(self, user_ids: list[UserId]) -> list[User]:
        """Find multiple users by ID."""
        return [self.users[uid] for uid in user_ids if uid in self.users]

    async def find_all(self) -> list[User]:
        """Find every user, oldest first."""
        return sorted(self.users.values(), key=lambda u: u.created_at)

    async def save(self, user: User) -> User:
        """Save a user."""
        self.users[user.id] = user
        return user

    async def delete(self, user_id: UserId) -> bool:
        """Delete a user."""
        return self.users.pop(user_id, None) is not None
