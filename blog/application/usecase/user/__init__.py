"""User use cases."""

from .common import UserInfo
from .delete_user import DeleteUserRequest, DeleteUserResponse, DeleteUserUseCase
from .list_users import ListUsersResponse, ListUsersUseCase
from .update_user import UpdateUserRequest, UpdateUserUseCase

__all__ = [
    "DeleteUserRequest",
    "DeleteUserResponse",
    "DeleteUserUseCase",
    "ListUsersResponse",
    "ListUsersUseCase",
    "UpdateUserRequest",
    "UpdateUserUseCase",
    "UserInfo",
]
