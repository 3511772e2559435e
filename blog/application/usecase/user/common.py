"""Shared user response models."""

from datetime import datetime

from pydantic import BaseModel

from blog.domain.model import User


class UserInfo(BaseModel):
    """Public view of a user; never includes the password hash."""

    user_id: str
    name: str
    email: str
    is_admin: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserInfo":
        return cls(
            user_id=str(user.id),
            name=user.name.root,
            email=user.email,
            is_admin=user.is_admin,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
