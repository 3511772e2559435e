"""Delete comment use case."""

from uuid import UUID

from pydantic import BaseModel

from blog.domain.service import CommentService, VoteService
from blog.domain.value import CommentId, PostId, UserId

from .common import get_owned_comment


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    post_id: str  # UUID string
    comment_id: str  # UUID string
    user_id: str  # Current user ID (must be author)


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    comment_id: str
    votes_deleted: int


class DeleteCommentUseCase:
    """Use case for an author deleting their comment and its votes."""

    def __init__(
        self, comment_service: CommentService, vote_service: VoteService
    ) -> None:
        """Initialize delete comment use case.

        Args:
            comment_service: Comment domain service
            vote_service: Vote domain service
        """
        self.comment_service = comment_service
        self.vote_service = vote_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Raises:
            NotFoundError: If no comment with this ID belongs to both the
                post and the caller
        """
        comment = await get_owned_comment(
            self.comment_service,
            PostId(UUID(request.post_id)),
            CommentId(UUID(request.comment_id)),
            UserId(UUID(request.user_id)),
        )

        votes_deleted = await self.vote_service.cascade_delete_for_targets(
            [comment.id]
        )
        await self.comment_service.delete_comment(comment.id)

        return DeleteCommentResponse(
            comment_id=request.comment_id, votes_deleted=votes_deleted
        )
