"""User aggregate root.

Users register with an email and password and authenticate with a bearer
token. Admins may manage other accounts.
"""

from datetime import datetime

from pydantic import EmailStr, Field

from blog.domain.model.common import DomainModel
from blog.domain.value import UserId
from blog.domain.value.types import UserName


class User(DomainModel):
    """User aggregate root.

    The password is never stored in clear; only its bcrypt hash.
    """

    id: UserId
    name: UserName
    email: EmailStr
    password_hash: str = Field(repr=False)
    is_admin: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
