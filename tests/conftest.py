"""Test configuration and fixtures."""

from uuid import uuid4

from blog.domain.model import Comment, Post, User
from blog.domain.value import CommentId, PostId, UserId, UserName
from blog.util.password import hash_password


def make_user(
    name: str = "Test User",
    email: str | None = None,
    password: str = "secret123",
    is_admin: bool = False,
) -> User:
    """Build a user with a real bcrypt hash of ``password``."""
    user_id = UserId(uuid4())
    return User(
        id=user_id,
        name=UserName(name),
        email=email or f"user-{user_id.hex[:8]}@example.com",
        password_hash=hash_password(password),
        is_admin=is_admin,
    )


def make_post(
    author_id: UserId | None = None,
    title: str = "Test Post",
    content: str = "Test content",
    total_votes: int = 0,
) -> Post:
    """Build a post owned by ``author_id`` (a random user by default)."""
    return Post(
        id=PostId(uuid4()),
        title=title,
        content=content,
        author_id=author_id or UserId(uuid4()),
        total_votes=total_votes,
    )


def make_comment(
    post_id: PostId,
    author_id: UserId | None = None,
    text: str = "Test comment",
    total_votes: int = 0,
) -> Comment:
    """Build a comment on ``post_id``."""
    return Comment(
        id=CommentId(uuid4()),
        post_id=post_id,
        author_id=author_id or UserId(uuid4()),
        text=text,
        total_votes=total_votes,
    )
