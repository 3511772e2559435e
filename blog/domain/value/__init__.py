"""Domain value objects for the blog."""

from blog.domain.value.identifiers import CommentId, PostId, UserId, VoteId
from blog.domain.value.types import (
    CastStatus,
    RetractStatus,
    UserName,
    VotableType,
    VoteValue,
)

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "CommentId",
    "VoteId",
    # Types
    "CastStatus",
    "RetractStatus",
    "UserName",
    "VotableType",
    "VoteValue",
]
