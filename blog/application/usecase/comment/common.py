"""Shared comment response models."""

from datetime import datetime

from pydantic import BaseModel

from blog.domain.error import NotFoundError
from blog.domain.model import Comment, User
from blog.domain.service import CommentService
from blog.domain.value import CommentId, PostId, UserId


class CommentInfo(BaseModel):
    """Comment as returned by the API, with its author and the viewer's vote."""

    comment_id: str
    post_id: str
    author_id: str
    author_name: str | None
    author_email: str | None
    text: str
    total_votes: int
    user_vote: int | None  # Viewer's vote value, None if not voted or anonymous
    created_at: datetime
    updated_at: datetime


def to_comment_info(
    comment: Comment, author: User | None, user_vote: int | None = None
) -> CommentInfo:
    """Build the API view of a comment."""
    return CommentInfo(
        comment_id=str(comment.id),
        post_id=str(comment.post_id),
        author_id=str(comment.author_id),
        author_name=author.name.root if author else None,
        author_email=author.email if author else None,
        text=comment.text,
        total_votes=comment.total_votes,
        user_vote=user_vote,
        created_at=comment.created_at,
        updated_at=comment.updated_at,
    )


async def get_owned_comment(
    comment_service: CommentService,
    post_id: PostId,
    comment_id: CommentId,
    user_id: UserId,
) -> Comment:
    """Load a comment that belongs to both the given post and the given user.

    Raises:
        NotFoundError: If no such comment exists
    """
    comment = await comment_service.get_comment_by_id(comment_id)
    if comment is None or comment.post_id != post_id or comment.author_id != user_id:
        raise NotFoundError("Comment", str(comment_id))
    return comment
