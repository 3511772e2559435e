"""Get the current user's comments use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from blog.domain.service import CommentService, PostService
from blog.domain.value import UserId


class UserCommentItem(BaseModel):
    """One of the user's comments with the title of its post."""

    comment_id: str
    post_id: str
    post_title: str | None  # None if the post is gone
    text: str
    total_votes: int
    created_at: datetime
    updated_at: datetime


class GetUserCommentsRequest(BaseModel):
    """Get user comments request."""

    user_id: str  # Current user ID


class GetUserCommentsResponse(BaseModel):
    """Get user comments response."""

    comments: list[UserCommentItem]
    total: int


class GetUserCommentsUseCase:
    """Use case for listing a user's own comments, newest first."""

    def __init__(
        self, comment_service: CommentService, post_service: PostService
    ) -> None:
        """Initialize get user comments use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
        """
        self.comment_service = comment_service
        self.post_service = post_service

    async def execute(self, request: GetUserCommentsRequest) -> GetUserCommentsResponse:
        """Execute get user comments flow."""
        comments = await self.comment_service.get_comments_by_author(
            UserId(UUID(request.user_id))
        )

        titles: dict[UUID, str | None] = {}
        for comment in comments:
            if comment.post_id not in titles:
                post = await self.post_service.get_post_by_id(comment.post_id)
                titles[comment.post_id] = post.title if post else None

        items = [
            UserCommentItem(
                comment_id=str(comment.id),
                post_id=str(comment.post_id),
                post_title=titles[comment.post_id],
                text=comment.text,
                total_votes=comment.total_votes,
                created_at=comment.created_at,
                updated_at=comment.updated_at,
            )
            for comment in comments
        ]
        return GetUserCommentsResponse(comments=items, total=len(items))
