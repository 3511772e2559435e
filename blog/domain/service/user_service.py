"""User domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from blog.domain.error import (
    AuthenticationError,
    BusinessRuleViolationError,
    NotFoundError,
)
from blog.domain.model import User
from blog.domain.repository import UserRepository
from blog.domain.value import UserId, UserName
from blog.util.password import hash_password, verify_password

from .base import Service


class UserService(Service):
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def get_user_by_email(self, email: str) -> User | None:
        """Get user by email address (case-insensitive)."""
        with logfire.span("user_service.get_user_by_email"):
            return await self.user_repository.find_by_email(email.lower())

    async def get_users_by_ids(self, user_ids: list[UserId]) -> dict[UserId, User]:
        """Get users by IDs in a single query.

        Args:
            user_ids: User IDs, duplicates allowed

        Returns:
            Mapping of user ID to user; unknown IDs are absent
        """
        unique_ids = list(dict.fromkeys(user_ids))
        if not unique_ids:
            return {}
        with logfire.span("user_service.get_users_by_ids", count=len(unique_ids)):
            users = await self.user_repository.find_by_ids(unique_ids)
            return {user.id: user for user in users}

    async def list_users(self) -> list[User]:
        """Get every registered user."""
        with logfire.span("user_service.list_users"):
            users = await self.user_repository.find_all()
            logfire.info("Users listed", count=len(users))
            return users

    async def register(self, name: str, email: str, password: str) -> User:
        """Create a new account.

        Args:
            name: Display name
            email: Email address, stored lower-cased
            password: Plain-text password

        Returns:
            Created user

        Raises:
            BusinessRuleViolationError: If the email is already registered
        """
        email = email.lower()
        with logfire.span("user_service.register", email=email):
            if await self.user_repository.find_by_email(email):
                logfire.warn("Registration with existing email", email=email)
                raise BusinessRuleViolationError("Email already exists")

            now = datetime.now()
            user = User(
                id=UserId(uuid4()),
                name=UserName(name),
                email=email,
                password_hash=hash_password(password),
                created_at=now,
                updated_at=now,
            )
            saved = await self.user_repository.save(user)
            logfire.info("User registered", user_id=str(saved.id))
            return saved

    async def authenticate(self, email: str, password: str) -> User:
        """Check an email/password pair.

        Raises:
            AuthenticationError: If the email is unknown or the password wrong
        """
        email = email.lower()
        with logfire.span("user_service.authenticate", email=email):
            user = await self.user_repository.find_by_email(email)
            if not user or not verify_password(password, user.password_hash):
                logfire.warn("Failed login attempt", email=email)
                raise AuthenticationError("Invalid credentials")
            logfire.info("User authenticated", user_id=str(user.id))
            return user

    async def change_password(
        self, user_id: UserId, current_password: str, new_password: str
    ) -> User:
        """Replace a user's password after checking the current one.

        Raises:
            NotFoundError: If the user does not exist
            AuthenticationError: If the current password is wrong
            BusinessRuleViolationError: If the new password equals the current
        """
        with logfire.span("user_service.change_password", user_id=str(user_id)):
            user = await self.get_by_id(user_id)
            if not verify_password(current_password, user.password_hash):
                logfire.warn("Wrong current password", user_id=str(user_id))
                raise AuthenticationError("Current password is incorrect")
            if current_password == new_password:
                raise BusinessRuleViolationError(
                    "New password must differ from the current password"
                )

            updated = user.model_copy(
                update={
                    "password_hash": hash_password(new_password),
                    "updated_at": datetime.now(),
                }
            )
            saved = await self.user_repository.save(updated)
            logfire.info("Password changed", user_id=str(user_id))
            return saved

    async def save_user(self, user: User) -> User:
        """Persist changes to an existing user."""
        with logfire.span("user_service.save_user", user_id=str(user.id)):
            return await self.user_repository.save(user)

    async def delete_user(self, user_id: UserId) -> bool:
        """Delete a user account.

        Returns:
            True if the user was deleted
        """
        with logfire.span("user_service.delete_user", user_id=str(user_id)):
            deleted = await self.user_repository.delete(user_id)
            logfire.info("User deleted", user_id=str(user_id), deleted=deleted)
            return deleted
