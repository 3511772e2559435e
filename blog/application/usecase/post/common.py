"""Shared post response models."""

from datetime import datetime

from pydantic import BaseModel

from blog.domain.model import Post, User


class PostInfo(BaseModel):
    """Post as returned by the API, with its author and the viewer's vote."""

    post_id: str
    title: str
    content: str
    avatar: str
    images: list[str]
    author_id: str
    author_name: str | None
    author_email: str | None
    total_votes: int
    user_vote: int | None  # Viewer's vote value, None if not voted or anonymous
    created_at: datetime
    updated_at: datetime



def to_post_info(
    post: Post, author: User | None, user_vote: int | None = None
) -> PostInfo:
    """Build the API view of a post."""
    return PostInfo(
        post_id=str(post.id),
        title=post.title,
        content=post.content,
        avatar=post.avatar,
        images=list(post.images),
        author_id=str(post.author_id),
        author_name=author.name.root if author else None,
        author_email=author.email if author else None,
        total_votes=post.total_votes,
        user_vote=user_vote,
        created_at=post.created_at,
        updated_at=post.updated_at,
    )
