"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .jwt_service import JWTService
from .post_service import PostService
from .user_service import UserService
from .vote_service import (
    CastResult,
    RetractResult,
    VoteService,
    parse_vote_text,
    parse_vote_value,
)

__all__ = [
    "CastResult",
    "CommentService",
    "JWTService",
    "PostService",
    "RetractResult",
    "Service",
    "UserService",
    "VoteService",
    "parse_vote_text",
    "parse_vote_value",
]
